#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2html/parsers/shortcode.py
"""Shortcode text to tree parser.

:class:`ShortcodeParser` chains the scanner and the tree builder. Parsing
never raises for malformed markup; unbalanced tags, stray brackets and
unterminated quotes all degrade to literal text.
"""

from __future__ import annotations

import logging
from typing import Union

from shortcode2html.ast import Document
from shortcode2html.parsers.scanner import ShortcodeScanner
from shortcode2html.parsers.tree_builder import TreeBuilder

logger = logging.getLogger(__name__)


class ShortcodeParser:
    """Convert text containing shortcodes into a :class:`Document` tree.

    Examples
    --------
        >>> parser = ShortcodeParser()
        >>> doc = parser.parse('Read [link path="docs"]the docs[/link].')
        >>> [type(node).__name__ for node in doc.children]
        ['TextNode', 'ShortcodeNode', 'TextNode']

    """

    def __init__(self, scanner: ShortcodeScanner | None = None):
        """Initialize the parser with an optional custom scanner."""
        self.scanner = scanner or ShortcodeScanner()

    def parse(self, input_data: Union[str, bytes]) -> Document:
        """Parse shortcode text into a tree.

        Parameters
        ----------
        input_data : str or bytes
            Text to parse. Bytes are decoded as UTF-8.

        Returns
        -------
        Document
            A freshly built tree; callers may discard it after rendering

        """
        text = input_data.decode("utf-8") if isinstance(input_data, bytes) else input_data
        tokens = self.scanner.iter_tokens(text)
        document = TreeBuilder(source=text).build(tokens)
        logger.debug("Parsed %d characters into %d top-level nodes", len(text), len(document.children))
        return document
