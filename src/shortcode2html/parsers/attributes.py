#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2html/parsers/attributes.py
"""Attribute list parsing for shortcode tags.

The attribute portion of a tag is everything between the tag name and the
closing bracket (minus a trailing ``/`` on self-closing tags). Each attribute
is one of::

    key                 flag attribute, recorded as "1"
    key=bare-token      value runs until the next whitespace
    key="quoted value"  may contain spaces, '=', brackets and \\" escapes

Parsing never fails. An unterminated quote takes the rest of the attribute
text as its value, and characters that cannot start a key are skipped.
"""

from __future__ import annotations

import logging

from shortcode2html.constants import (
    ATTRIBUTE_ESCAPE,
    ATTRIBUTE_KEY_PATTERN,
    ATTRIBUTE_QUOTE,
    FLAG_ATTRIBUTE_VALUE,
)

logger = logging.getLogger(__name__)


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def read_quoted(text: str, start: int) -> tuple[str, int]:
    """Read a double-quoted value whose opening quote precedes ``start``.

    Parameters
    ----------
    text : str
        Attribute text
    start : int
        Index of the first character after the opening quote

    Returns
    -------
    tuple of (str, int)
        The unescaped value and the index just past the closing quote (or the
        end of ``text`` when the quote is never closed)

    """
    chars: list[str] = []
    pos = start
    while pos < len(text):
        ch = text[pos]
        if ch == ATTRIBUTE_ESCAPE and pos + 1 < len(text) and text[pos + 1] in (ATTRIBUTE_QUOTE, ATTRIBUTE_ESCAPE):
            chars.append(text[pos + 1])
            pos += 2
            continue
        if ch == ATTRIBUTE_QUOTE:
            return "".join(chars), pos + 1
        chars.append(ch)
        pos += 1

    logger.debug("Unterminated quoted attribute value starting at offset %d", start - 1)
    return "".join(chars), len(text)


def _read_bare(text: str, start: int) -> tuple[str, int]:
    pos = start
    while pos < len(text) and not text[pos].isspace():
        pos += 1
    return text[start:pos], pos


def parse_attributes(text: str) -> dict[str, str]:
    """Parse the attribute portion of a tag into an ordered mapping.

    Parameters
    ----------
    text : str
        Attribute text, e.g. ``' path="/x" class=big  disabled'``

    Returns
    -------
    dict of str to str
        Attributes in first-seen order. When a key repeats, the last value
        wins and the key keeps its first position.

    Examples
    --------
        >>> parse_attributes(' title="Say \\\\"hi\\\\"" size=3 nofollow')
        {'title': 'Say "hi"', 'size': '3', 'nofollow': '1'}

    """
    attrs: dict[str, str] = {}
    pos = _skip_whitespace(text, 0)

    while pos < len(text):
        match = ATTRIBUTE_KEY_PATTERN.match(text, pos)
        if match is None:
            # Junk such as a stray quoted string or punctuation
            if text[pos] == ATTRIBUTE_QUOTE:
                junk, pos = read_quoted(text, pos + 1)
            else:
                junk, pos = _read_bare(text, pos)
            logger.debug("Skipping unparseable attribute text %r", junk)
            pos = _skip_whitespace(text, pos)
            continue

        key = match.group(0)
        pos = match.end()

        lookahead = _skip_whitespace(text, pos)
        if lookahead < len(text) and text[lookahead] == "=":
            pos = _skip_whitespace(text, lookahead + 1)
            if pos < len(text) and text[pos] == ATTRIBUTE_QUOTE:
                value, pos = read_quoted(text, pos + 1)
            else:
                value, pos = _read_bare(text, pos)
        else:
            value = FLAG_ATTRIBUTE_VALUE

        if key in attrs:
            logger.debug("Attribute %r repeated; keeping the last value", key)
        attrs[key] = value
        pos = _skip_whitespace(text, pos)

    return attrs
