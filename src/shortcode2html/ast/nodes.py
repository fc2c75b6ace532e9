#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2html/ast/nodes.py
"""Node classes for the shortcode tree.

Input text is parsed into a small tree: a :class:`Document` root holding
:class:`TextNode` runs and :class:`ShortcodeNode` tags, where paired tags hold
their body as children. Every node supports the visitor pattern, so renderers
live outside the node classes.

Node Hierarchy
--------------
- Document (root)
- TextNode (literal text run)
- ShortcodeNode (a tag with its attributes and, for paired tags, its body)

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class SourceLocation:
    """Where a node started in the input text.

    Parameters
    ----------
    offset : int
        Character offset of the node's first character
    line : int
        1-based line number
    column : int
        1-based column number

    """

    offset: int
    line: int = 1
    column: int = 1

    @classmethod
    def from_offset(cls, text: str, offset: int) -> SourceLocation:
        """Compute line and column of ``offset`` within ``text``."""
        line = text.count("\n", 0, offset) + 1
        last_newline = text.rfind("\n", 0, offset)
        return cls(offset=offset, line=line, column=offset - last_newline)


class Node(ABC):
    """Base class for all tree nodes.

    Parameters
    ----------
    source_location : SourceLocation or None, default = None
        Information about where this node came from in the source

    """

    source_location: Optional[SourceLocation]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result of the visitor's processing

        """
        pass

    @abstractmethod
    def source_text(self) -> str:
        """Return the markup this node was parsed from."""
        pass


@dataclass
class Document(Node):
    """Root node holding the top-level sequence of nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level nodes in source order
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)

    def source_text(self) -> str:
        """Return the concatenated source of all children."""
        return "".join(child.source_text() for child in self.children)

    def iter_shortcodes(self) -> list[ShortcodeNode]:
        """Return every shortcode node in document order, depth first."""
        found: list[ShortcodeNode] = []
        stack: list[Node] = list(reversed(self.children))
        while stack:
            node = stack.pop()
            if isinstance(node, ShortcodeNode):
                found.append(node)
                stack.extend(reversed(node.children))
        return found


@dataclass
class TextNode(Node):
    """Literal text run.

    Parameters
    ----------
    content : str
        Text content, passed through to the output unchanged
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)

    def source_text(self) -> str:
        return self.content


@dataclass
class ShortcodeNode(Node):
    """A shortcode tag.

    Parameters
    ----------
    name : str
        Tag name as written in the source
    attrs : dict of str to str, default = empty dict
        Parsed attributes in first-seen order
    children : list of Node, default = empty list
        Body of a paired tag; always empty for self-closing tags
    self_closing : bool, default = False
        Whether the tag was written as ``[name .../]``
    open_text : str, default = ""
        Raw opening tag exactly as it appeared in the source
    close_text : str, default = ""
        Raw closing tag; empty for self-closing tags
    source_location : SourceLocation or None, default = None
        Source location information

    """

    name: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    self_closing: bool = False
    open_text: str = ""
    close_text: str = ""
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        if self.self_closing and self.children:
            raise ValueError(f"Self-closing shortcode '{self.name}' cannot have children")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this shortcode."""
        return visitor.visit_shortcode(self)

    def source_text(self) -> str:
        """Return the tag and its body as they appeared in the source."""
        if self.self_closing:
            return self.open_text
        body = "".join(child.source_text() for child in self.children)
        return f"{self.open_text}{body}{self.close_text}"
