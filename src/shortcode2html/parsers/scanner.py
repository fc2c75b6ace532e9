#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2html/parsers/scanner.py
"""Lexical scanner for bracket shortcodes.

The scanner walks the input left to right and splits it into a flat stream of
tokens:

- :class:`TextToken` for runs of ordinary text (adjacent literal characters
  are coalesced into a single token)
- :class:`TagOpenToken` for ``[name attrs]`` and ``[name attrs /]``
- :class:`TagCloseToken` for ``[/name]``

A ``[`` only starts a tag when it is followed by a tag name (optionally
preceded by ``/``) and the name is followed by whitespace, ``/`` or ``]``.
Anything else, including a bracket that never closes, stays literal text.
Matching is purely lexical; newlines are ordinary characters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from shortcode2html.constants import (
    ATTRIBUTE_ESCAPE,
    ATTRIBUTE_QUOTE,
    TAG_CLOSE_MARKER,
    TAG_END_CHAR,
    TAG_NAME_PATTERN,
    TAG_OPEN_CHAR,
)
from shortcode2html.parsers.attributes import parse_attributes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextToken:
    """Literal text run.

    Parameters
    ----------
    text : str
        The literal characters
    position : int
        Offset of the first character in the input

    """

    text: str
    position: int = 0

    @property
    def raw(self) -> str:
        return self.text


@dataclass(frozen=True)
class TagOpenToken:
    """Opening (or self-closing) tag.

    Parameters
    ----------
    name : str
        Tag name
    attrs : dict of str to str
        Parsed attributes in first-seen order
    self_closing : bool
        True for ``[name .../]``
    raw : str
        The tag exactly as written, brackets included
    position : int
        Offset of the opening ``[``

    """

    name: str
    attrs: dict[str, str] = field(default_factory=dict)
    self_closing: bool = False
    raw: str = ""
    position: int = 0


@dataclass(frozen=True)
class TagCloseToken:
    """Closing tag ``[/name]``.

    Parameters
    ----------
    name : str
        Tag name
    raw : str
        The tag exactly as written
    position : int
        Offset of the opening ``[``

    """

    name: str
    raw: str = ""
    position: int = 0


Token = Union[TextToken, TagOpenToken, TagCloseToken]


class ShortcodeScanner:
    """Split text into shortcode tokens.

    Examples
    --------
        >>> scanner = ShortcodeScanner()
        >>> [type(t).__name__ for t in scanner.tokenize("a [b x=1]c[/b]")]
        ['TextToken', 'TagOpenToken', 'TextToken', 'TagCloseToken']

    """

    def tokenize(self, text: str) -> list[Token]:
        """Return the complete token stream for ``text``."""
        return list(self.iter_tokens(text))

    def iter_tokens(self, text: str) -> Iterator[Token]:
        """Yield tokens for ``text`` in document order.

        Parameters
        ----------
        text : str
            Raw input text

        Yields
        ------
        Token
            Text, open and close tokens; the concatenation of their ``raw``
            values equals ``text``

        """
        pos = 0
        text_start = 0

        while True:
            bracket = text.find(TAG_OPEN_CHAR, pos)
            if bracket == -1:
                break

            matched = self._match_tag(text, bracket)
            if matched is None:
                pos = bracket + 1
                continue

            token, end = matched
            if bracket > text_start:
                yield TextToken(text=text[text_start:bracket], position=text_start)
            yield token
            pos = text_start = end

        if text_start < len(text):
            yield TextToken(text=text[text_start:], position=text_start)

    def _match_tag(self, text: str, start: int) -> Optional[tuple[Token, int]]:
        """Try to read a tag whose ``[`` is at ``start``.

        Returns
        -------
        tuple of (Token, int) or None
            The token and the offset just past its ``]``, or None if the
            bracket is literal text

        """
        pos = start + 1
        closing = pos < len(text) and text[pos] == TAG_CLOSE_MARKER
        if closing:
            pos += 1

        name_match = TAG_NAME_PATTERN.match(text, pos)
        if name_match is None:
            return None
        name = name_match.group(0)
        pos = name_match.end()
        if pos >= len(text):
            return None

        if closing:
            while pos < len(text) and text[pos].isspace():
                pos += 1
            if pos < len(text) and text[pos] == TAG_END_CHAR:
                return TagCloseToken(name=name, raw=text[start : pos + 1], position=start), pos + 1
            return None

        following = text[pos]
        if not (following.isspace() or following in (TAG_CLOSE_MARKER, TAG_END_CHAR)):
            return None

        end = self._find_tag_end(text, pos)
        if end is None:
            return None

        attr_text = text[pos:end]
        stripped = attr_text.rstrip()
        # Self-closing: first non-whitespace character before ']' is '/'
        self_closing = stripped.endswith(TAG_CLOSE_MARKER)
        if self_closing:
            attr_text = stripped[:-1]

        token = TagOpenToken(
            name=name,
            attrs=parse_attributes(attr_text),
            self_closing=self_closing,
            raw=text[start : end + 1],
            position=start,
        )
        return token, end + 1

    @staticmethod
    def _find_tag_end(text: str, pos: int) -> Optional[int]:
        """Find the ``]`` that ends a tag's attribute list.

        Brackets inside double-quoted values do not count. An unquoted ``[``
        means the candidate was not a tag. If a quote is never closed, the
        first ``]`` after ``pos`` ends the tag and the attribute parser takes
        the remainder as the value, unless a ``[`` comes first, in which case
        the candidate stays literal.
        """
        in_quote = False
        index = pos
        while index < len(text):
            ch = text[index]
            if in_quote:
                if ch == ATTRIBUTE_ESCAPE:
                    index += 2
                    continue
                if ch == ATTRIBUTE_QUOTE:
                    in_quote = False
            elif ch == ATTRIBUTE_QUOTE:
                in_quote = True
            elif ch == TAG_END_CHAR:
                return index
            elif ch == TAG_OPEN_CHAR:
                return None
            index += 1

        if in_quote:
            fallback = text.find(TAG_END_CHAR, pos)
            next_open = text.find(TAG_OPEN_CHAR, pos)
            if fallback != -1 and (next_open == -1 or fallback < next_open):
                logger.debug("Unterminated quote in tag at offset %d; ending tag at first ']'", pos)
                return fallback
        return None


def tokenize(text: str) -> list[Token]:
    """Tokenize ``text`` with a default :class:`ShortcodeScanner`."""
    return ShortcodeScanner().tokenize(text)
