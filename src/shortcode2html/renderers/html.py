#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2html/renderers/html.py
"""HTML rendering of shortcode trees.

The renderer folds the tree bottom-up: a tag's children are rendered first and
the resulting string is handed to the tag's handler as its body. Tags the
registry does not resolve (unknown or disabled) are reproduced from their raw
source text, with their children still rendered, so recognised tags nested in
an unknown one are expanded.

"""

from __future__ import annotations

import logging

from shortcode2html.ast import BottomUpStringVisitor, Document, ShortcodeNode
from shortcode2html.context import RenderContext
from shortcode2html.exceptions import RenderingError

logger = logging.getLogger(__name__)


class ShortcodeHtmlRenderer(BottomUpStringVisitor):
    """Render a shortcode tree to an HTML string.

    Parameters
    ----------
    context : RenderContext
        Registry, capabilities and options for this render pass

    Examples
    --------
        >>> from shortcode2html.api import default_config, get_registry, parse
        >>> context = RenderContext(registry=get_registry(default_config()))
        >>> ShortcodeHtmlRenderer(context).render_to_string(parse("[highlight]hi[/highlight]"))
        '<span class=" highlight">hi</span>'

    """

    def __init__(self, context: RenderContext):
        """Initialize the renderer for one render context."""
        self.context = context

    def render_to_string(self, doc: Document) -> str:
        """Render the document to a string.

        Raises
        ------
        RenderingError
            If a handler fails and ``strict_mode`` is enabled

        """
        return doc.accept(self)

    def fold_shortcode(self, node: ShortcodeNode, content: str) -> str:
        """Hand the rendered children to the tag's handler."""
        entry = self.context.registry.resolve(node.name)
        if entry is None:
            logger.debug("Passing through unrecognised tag [%s]", node.name)
            return self._passthrough(node, content)

        try:
            return entry.render(node.attrs, content, self.context)
        except Exception as exc:
            if self.context.options.strict_mode:
                raise RenderingError(
                    f"Handler for [{node.name}] failed: {exc}",
                    tag_name=node.name,
                    original_error=exc,
                ) from exc
            logger.warning("Handler for [%s] failed, passing the tag through: %s", node.name, exc)
            return self._passthrough(node, content)

    @staticmethod
    def _passthrough(node: ShortcodeNode, content: str) -> str:
        if node.self_closing:
            return node.open_text
        return f"{node.open_text}{content}{node.close_text}"
