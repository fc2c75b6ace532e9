#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2html/parsers/tree_builder.py
"""Build a node tree from a shortcode token stream.

The builder keeps a stack of open (paired) tags. Each frame owns a children
buffer; tokens are appended to the buffer of the innermost open tag, or to the
document root when nothing is open.

Recovery rules for unbalanced markup:

- A close tag with no matching open tag on the stack becomes literal text.
- A close tag that matches a frame below the top closes that frame; the
  frames above it were never closed and are flushed as literal text.
- Frames still open at end of input are flushed the same way: the raw opening
  tag is emitted as text, followed by the frame's children, so the body still
  renders.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from shortcode2html.ast import Document, Node, ShortcodeNode, SourceLocation, TextNode
from shortcode2html.parsers.scanner import TagCloseToken, TagOpenToken, TextToken, Token

logger = logging.getLogger(__name__)


@dataclass
class _OpenFrame:
    token: TagOpenToken
    children: list[Node] = field(default_factory=list)


class TreeBuilder:
    """Turn a token stream into a :class:`Document`.

    Parameters
    ----------
    source : str or None, default None
        The text the tokens were produced from. When given, nodes receive a
        :class:`SourceLocation` with line and column information.

    """

    def __init__(self, source: Optional[str] = None):
        """Initialize the builder."""
        self.source = source
        self._root: list[Node] = []
        self._stack: list[_OpenFrame] = []

    def build(self, tokens: Iterable[Token]) -> Document:
        """Consume ``tokens`` and return the finished tree.

        Parameters
        ----------
        tokens : iterable of Token
            Tokens in document order

        Returns
        -------
        Document
            Root node whose children preserve source order

        """
        self._root = []
        self._stack = []

        for token in tokens:
            if isinstance(token, TextToken):
                self._append_text(self._current(), token.text, token.position)
            elif isinstance(token, TagOpenToken):
                self._open(token)
            elif isinstance(token, TagCloseToken):
                self._close(token)

        while self._stack:
            frame = self._stack.pop()
            logger.debug("Unclosed [%s] at offset %d emitted as text", frame.token.name, frame.token.position)
            self._flush(frame)

        return Document(children=self._root, source_location=self._location(0))

    def _current(self) -> list[Node]:
        return self._stack[-1].children if self._stack else self._root

    def _location(self, position: int) -> Optional[SourceLocation]:
        if self.source is None:
            return None
        return SourceLocation.from_offset(self.source, position)

    def _open(self, token: TagOpenToken) -> None:
        if token.self_closing:
            self._current().append(
                ShortcodeNode(
                    name=token.name,
                    attrs=dict(token.attrs),
                    self_closing=True,
                    open_text=token.raw,
                    source_location=self._location(token.position),
                )
            )
        else:
            self._stack.append(_OpenFrame(token=token))

    def _close(self, token: TagCloseToken) -> None:
        match_index = None
        for index in range(len(self._stack) - 1, -1, -1):
            if self._stack[index].token.name == token.name:
                match_index = index
                break

        if match_index is None:
            logger.debug("Unmatched closing tag %s at offset %d emitted as text", token.raw, token.position)
            self._append_text(self._current(), token.raw, token.position)
            return

        while len(self._stack) - 1 > match_index:
            frame = self._stack.pop()
            logger.debug(
                "[%s] at offset %d closed implicitly by %s; emitted as text",
                frame.token.name,
                frame.token.position,
                token.raw,
            )
            self._flush(frame)

        frame = self._stack.pop()
        self._current().append(
            ShortcodeNode(
                name=frame.token.name,
                attrs=dict(frame.token.attrs),
                children=frame.children,
                self_closing=False,
                open_text=frame.token.raw,
                close_text=token.raw,
                source_location=self._location(frame.token.position),
            )
        )

    def _flush(self, frame: _OpenFrame) -> None:
        """Emit an unclosed frame into its parent as literal opening text plus children."""
        parent = self._current()
        self._append_text(parent, frame.token.raw, frame.token.position)
        for child in frame.children:
            if isinstance(child, TextNode):
                self._append_text(parent, child.content, None, child.source_location)
            else:
                parent.append(child)

    def _append_text(
        self,
        buffer: list[Node],
        content: str,
        position: Optional[int],
        location: Optional[SourceLocation] = None,
    ) -> None:
        if not content:
            return
        if buffer and isinstance(buffer[-1], TextNode):
            previous = buffer[-1]
            buffer[-1] = TextNode(content=previous.content + content, source_location=previous.source_location)
            return
        if location is None and position is not None:
            location = self._location(position)
        buffer.append(TextNode(content=content, source_location=location))


def build_tree(tokens: Iterable[Token], source: Optional[str] = None) -> Document:
    """Build a :class:`Document` from ``tokens`` with a fresh :class:`TreeBuilder`."""
    return TreeBuilder(source=source).build(tokens)
