#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2html/ast/__init__.py
"""Tree representation of text containing shortcodes.

- nodes: Document, TextNode and ShortcodeNode
- visitors: visitor base classes used by renderers

Examples
--------
    >>> from shortcode2html.ast import Document, ShortcodeNode, TextNode
    >>> doc = Document(children=[
    ...     TextNode(content="Say "),
    ...     ShortcodeNode(name="highlight", children=[TextNode(content="hi")]),
    ... ])

"""

from shortcode2html.ast.nodes import Document, Node, ShortcodeNode, SourceLocation, TextNode
from shortcode2html.ast.visitors import BottomUpStringVisitor, NodeVisitor

__all__ = [
    "BottomUpStringVisitor",
    "Document",
    "Node",
    "NodeVisitor",
    "ShortcodeNode",
    "SourceLocation",
    "TextNode",
]
