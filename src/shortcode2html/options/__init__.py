"""Configuration objects for shortcode2html."""

from shortcode2html.options.base import BaseOptions, CloneFrozenMixin
from shortcode2html.options.shortcode import HandlerSpec, RegistryConfig, ShortcodeRendererOptions

__all__ = [
    "BaseOptions",
    "CloneFrozenMixin",
    "HandlerSpec",
    "RegistryConfig",
    "ShortcodeRendererOptions",
]
