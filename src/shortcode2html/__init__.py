"""shortcode2html - expand bracket shortcodes into HTML.

Content authors write small bracketed tags such as ``[button path="contact"]``
or ``[highlight]...[/highlight]`` inside otherwise plain or HTML text.
shortcode2html parses those tags into a tree, renders each recognised tag
with a configurable handler, and leaves every other character exactly as it
was written.

Key Features
------------
- Ten built-in tags: link, button, img, item, clear, block, dropcap,
  highlight, quote and random
- Tolerant parsing: unbalanced tags and stray brackets degrade to literal
  text, never to errors
- Per-tag enable/disable switches, default attributes and aliases
- Injected path resolution and randomness for reproducible output
- ``strip()`` to remove shortcodes while keeping their text

Examples
--------
    >>> from shortcode2html import Capabilities, render
    >>> render('[button path="contact"]Write to us[/button]', capabilities=Capabilities.for_site("https://example.com"))
    '<a href="https://example.com/contact" class=" button" title="Write to us"><span>Write to us</span></a>'

Working with the tree directly:

    >>> from shortcode2html import parse
    >>> doc = parse("[quote author=ada]hi[/quote]")
    >>> doc.children[0].attrs
    {'author': 'ada'}

"""

__version__ = "1.0.0"

from shortcode2html.api import default_config, parse, render, strip
from shortcode2html.ast import Document, ShortcodeNode, TextNode
from shortcode2html.capabilities import Capabilities, SeededRandomSource, SitePathResolver, SystemRandomSource
from shortcode2html.context import RenderContext
from shortcode2html.exceptions import (
    CapabilityError,
    ConfigurationError,
    PathResolutionError,
    RenderingError,
    Shortcode2HtmlError,
    ValidationError,
)
from shortcode2html.options import HandlerSpec, RegistryConfig, ShortcodeRendererOptions
from shortcode2html.registry import ShortcodeRegistry, get_registry

__all__ = [
    "__version__",
    # API
    "default_config",
    "parse",
    "render",
    "strip",
    # Tree
    "Document",
    "ShortcodeNode",
    "TextNode",
    # Configuration
    "HandlerSpec",
    "RegistryConfig",
    "ShortcodeRendererOptions",
    "ShortcodeRegistry",
    "get_registry",
    # Capabilities
    "Capabilities",
    "RenderContext",
    "SeededRandomSource",
    "SitePathResolver",
    "SystemRandomSource",
    # Exceptions
    "CapabilityError",
    "ConfigurationError",
    "PathResolutionError",
    "RenderingError",
    "Shortcode2HtmlError",
    "ValidationError",
]
