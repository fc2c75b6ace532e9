#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for shortcode2html.

This module centralizes the hardcoded values used across the library so that
the scanner, the handlers and the CLI agree on them.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Shortcode Syntax - Characters and patterns of the bracket grammar
3. Handler Defaults - Default attribute values for built-in tags
4. CLI - Exit codes and configuration file names
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

BuiltinTagName = Literal[
    "button",
    "link",
    "img",
    "item",
    "clear",
    "dropcap",
    "highlight",
    "quote",
    "random",
    "block",
]
WrapperElement = Literal["div", "span"]

# =============================================================================
# Shortcode Syntax
# =============================================================================

TAG_OPEN_CHAR = "["
TAG_END_CHAR = "]"
TAG_CLOSE_MARKER = "/"
ATTRIBUTE_QUOTE = '"'
ATTRIBUTE_ESCAPE = "\\"

# A tag name starts with a word character and may continue with word characters
# or hyphens.
TAG_NAME_PATTERN = re.compile(r"\w[\w-]*")

# Attribute keys additionally allow ':' and '.' (e.g. data.foo, xml:lang)
ATTRIBUTE_KEY_PATTERN = re.compile(r"[\w][\w:.-]*")

# Value recorded for an attribute written without "=value"
FLAG_ATTRIBUTE_VALUE = "1"

# =============================================================================
# Handler Defaults
# =============================================================================

BUILTIN_TAG_NAMES: tuple[BuiltinTagName, ...] = (
    "link",
    "random",
    "img",
    "clear",
    "dropcap",
    "item",
    "highlight",
    "button",
    "quote",
    "block",
)

DEFAULT_RANDOM_LENGTH = 8
DEFAULT_MAX_RANDOM_LENGTH = 99
RANDOM_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

DEFAULT_WRAPPER_TYPE = "d"

# Short and long spellings accepted by the ``type`` attribute of wrapper tags
WRAPPER_TYPE_ALIASES: dict[str, WrapperElement] = {
    "d": "div",
    "div": "div",
    "s": "span",
    "span": "span",
}

# The block tag additionally accepts a few sectioning elements
BLOCK_ELEMENT_ALIASES: dict[str, str] = {
    **WRAPPER_TYPE_ALIASES,
    "p": "p",
    "section": "section",
    "article": "article",
    "aside": "aside",
    "header": "header",
    "footer": "footer",
    "blockquote": "blockquote",
}

FRONT_PAGE_PATH = "<front>"
DEFAULT_BASE_URL = "/"

# Attributes emitted right after ``class`` by link-like handlers, in this order
PRIORITY_PASSTHROUGH_ATTRIBUTES = ("id", "style")

DEFAULT_STRICT_MODE = False
DEFAULT_ESCAPE_ATTRIBUTES = True

# Distinct configurations whose registries get_registry() keeps
REGISTRY_CACHE_SIZE = 32

# =============================================================================
# CLI
# =============================================================================

ENV_CONFIG_VARIABLE = "SHORTCODE2HTML_CONFIG"
CONFIG_FILENAMES = [
    ".shortcode2html.toml",
    ".shortcode2html.yaml",
    ".shortcode2html.yml",
    ".shortcode2html.json",
]
PYPROJECT_TOOL_SECTION = "shortcode2html"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7
