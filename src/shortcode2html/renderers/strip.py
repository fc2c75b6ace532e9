#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2html/renderers/strip.py
"""Removal of shortcode markup, keeping the text it wraps.

Used for excerpts, search indexes and plain-text feeds where tags should not
show up but their bodies should. Only tags the registry resolves are removed;
unknown and disabled tags stay literal, just as the HTML renderer leaves them.

"""

from __future__ import annotations

from shortcode2html.ast import BottomUpStringVisitor, Document, ShortcodeNode
from shortcode2html.registry import ShortcodeRegistry


class ShortcodeStripper(BottomUpStringVisitor):
    """Strip enabled shortcodes from a tree.

    Paired tags are replaced by their body. Self-closing tags vanish.

    Parameters
    ----------
    registry : ShortcodeRegistry
        Decides which tags count as shortcodes

    """

    def __init__(self, registry: ShortcodeRegistry):
        """Initialize the stripper."""
        self.registry = registry

    def render_to_string(self, doc: Document) -> str:
        return doc.accept(self)

    def fold_shortcode(self, node: ShortcodeNode, content: str) -> str:
        if self.registry.resolve(node.name) is not None:
            return content
        if node.self_closing:
            return node.open_text
        return f"{node.open_text}{content}{node.close_text}"
