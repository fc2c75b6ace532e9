"""Renderers turning shortcode trees into output text."""

from shortcode2html.renderers.html import ShortcodeHtmlRenderer
from shortcode2html.renderers.strip import ShortcodeStripper

__all__ = ["ShortcodeHtmlRenderer", "ShortcodeStripper"]
