"""Parsing of shortcode text: attributes, tokens and the node tree."""

from shortcode2html.parsers.attributes import parse_attributes
from shortcode2html.parsers.scanner import (
    ShortcodeScanner,
    TagCloseToken,
    TagOpenToken,
    TextToken,
    Token,
    tokenize,
)
from shortcode2html.parsers.shortcode import ShortcodeParser
from shortcode2html.parsers.tree_builder import TreeBuilder, build_tree

__all__ = [
    "ShortcodeParser",
    "ShortcodeScanner",
    "TagCloseToken",
    "TagOpenToken",
    "TextToken",
    "Token",
    "TreeBuilder",
    "build_tree",
    "parse_attributes",
    "tokenize",
]
