"""Shortcode handlers and their registration metadata."""

from shortcode2html.handlers.builtin import BUILTIN_HANDLERS
from shortcode2html.handlers.metadata import HandlerFunction, HandlerMetadata, ParameterSpec

__all__ = [
    "BUILTIN_HANDLERS",
    "HandlerFunction",
    "HandlerMetadata",
    "ParameterSpec",
]
