#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2html/context.py
"""Per-render context handed to every shortcode handler."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from shortcode2html.capabilities import Capabilities
from shortcode2html.options.shortcode import ShortcodeRendererOptions

if TYPE_CHECKING:
    from shortcode2html.registry import ShortcodeRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderContext:
    """Immutable environment of a single render pass.

    Parameters
    ----------
    registry : ShortcodeRegistry
        Resolved tag configuration
    capabilities : Capabilities
        Path resolution and randomness collaborators
    options : ShortcodeRendererOptions
        Renderer settings

    """

    registry: ShortcodeRegistry
    capabilities: Capabilities = field(default_factory=Capabilities)
    options: ShortcodeRendererOptions = field(default_factory=ShortcodeRendererOptions)

    def resolve_path(self, path: str) -> str:
        """Resolve ``path`` to a URL, falling back to the raw path on failure.

        A failing resolver must not abort the render, so any exception it
        raises is logged and the unresolved path is returned instead.
        """
        try:
            return self.capabilities.resolve_path(path)
        except Exception as exc:
            logger.warning("Path resolution failed for %r, using it verbatim: %s", path, exc)
            return path

    def random_string(self, length: int) -> str:
        """Draw a random alphanumeric string from the injected source."""
        return self.capabilities.random_source.next_string(length)

    @property
    def escape_attributes(self) -> bool:
        return self.options.escape_attributes
