#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2html/ast/visitors.py
"""Visitor pattern implementation for shortcode tree traversal.

Renderers and other tree algorithms subclass :class:`NodeVisitor` instead of
adding methods to the node classes.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator

from shortcode2html.ast.nodes import Document, Node, ShortcodeNode, TextNode


class NodeVisitor(ABC):
    """Abstract base class for shortcode tree visitors.

    Examples
    --------
    A visitor that collects tag names:

        >>> class TagCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.names = []
        ...     def visit_document(self, node):
        ...         for child in node.children:
        ...             child.accept(self)
        ...     def visit_text(self, node):
        ...         pass
        ...     def visit_shortcode(self, node):
        ...         self.names.append(node.name)
        ...         for child in node.children:
        ...             child.accept(self)

    """

    def visit(self, node: Node) -> Any:
        """Dispatch ``node`` to the matching visit method."""
        return node.accept(self)

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit the root Document node."""
        pass

    @abstractmethod
    def visit_text(self, node: TextNode) -> Any:
        """Visit a TextNode."""
        pass

    @abstractmethod
    def visit_shortcode(self, node: ShortcodeNode) -> Any:
        """Visit a ShortcodeNode."""
        pass


class BottomUpStringVisitor(NodeVisitor):
    """Visitor that folds a tree into a string from the leaves up.

    Subclasses implement :meth:`fold_shortcode`, which receives a shortcode
    node together with the already folded text of its children. The walk uses
    an explicit stack, so nesting depth is not limited by the interpreter's
    recursion limit.

    """

    def visit_document(self, node: Document) -> str:
        return self._fold(node)

    def visit_text(self, node: TextNode) -> str:
        return node.content

    def visit_shortcode(self, node: ShortcodeNode) -> str:
        return self._fold(node)

    @abstractmethod
    def fold_shortcode(self, node: ShortcodeNode, content: str) -> str:
        """Return the output for ``node`` given its folded children."""
        pass

    def _fold(self, root: Document | ShortcodeNode) -> str:
        # Each frame: the node, an iterator over its children, their folded parts
        stack: list[tuple[Node, Iterator[Node], list[str]]] = [(root, iter(root.children), [])]
        while True:
            node, children, parts = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                content = "".join(parts)
                folded = self.fold_shortcode(node, content) if isinstance(node, ShortcodeNode) else content
                if not stack:
                    return folded
                stack[-1][2].append(folded)
            elif isinstance(child, ShortcodeNode):
                stack.append((child, iter(child.children), []))
            else:
                parts.append(child.accept(self))
