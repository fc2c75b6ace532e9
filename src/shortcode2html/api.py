#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2html/api.py
"""Public entry points for rendering text containing shortcodes.

Examples
--------
Render with every built-in tag enabled:

    >>> from shortcode2html import render
    >>> render('[link path="about"]About us[/link]')
    '<a href="/about" title="About us">About us</a>'

Disable a tag so that it passes through literally:

    >>> render("[highlight]x[/highlight]", config=default_config().disable("highlight"))
    '[highlight]x[/highlight]'

"""

from __future__ import annotations

import logging
from typing import Optional, Union

from shortcode2html.ast import Document
from shortcode2html.capabilities import Capabilities
from shortcode2html.constants import BUILTIN_TAG_NAMES, DEFAULT_RANDOM_LENGTH, DEFAULT_WRAPPER_TYPE
from shortcode2html.context import RenderContext
from shortcode2html.options.shortcode import HandlerSpec, RegistryConfig, ShortcodeRendererOptions
from shortcode2html.parsers import ShortcodeParser
from shortcode2html.registry import ShortcodeRegistry, get_registry
from shortcode2html.renderers import ShortcodeHtmlRenderer, ShortcodeStripper

logger = logging.getLogger(__name__)

_BUILTIN_DEFAULTS: dict[str, dict[str, str]] = {
    "random": {"length": str(DEFAULT_RANDOM_LENGTH)},
    "clear": {"type": DEFAULT_WRAPPER_TYPE},
    "item": {"type": DEFAULT_WRAPPER_TYPE},
    "block": {"type": DEFAULT_WRAPPER_TYPE},
}

RegistryLike = Union[RegistryConfig, ShortcodeRegistry]


def default_config() -> RegistryConfig:
    """Return the configuration with all ten built-in tags enabled."""
    return RegistryConfig(
        entries=tuple(HandlerSpec(name=name, defaults=_BUILTIN_DEFAULTS.get(name, {})) for name in BUILTIN_TAG_NAMES)
    )


def _as_registry(config: Optional[RegistryLike]) -> ShortcodeRegistry:
    if isinstance(config, ShortcodeRegistry):
        return config
    return get_registry(config if config is not None else default_config())


def parse(text: Union[str, bytes]) -> Document:
    """Parse text into a shortcode tree without rendering it.

    Parsing is independent of any configuration: every well-formed tag becomes
    a :class:`ShortcodeNode`, whether or not a handler exists for it.
    """
    return ShortcodeParser().parse(text)


def render(
    input_text: Union[str, bytes],
    config: Optional[RegistryLike] = None,
    capabilities: Optional[Capabilities] = None,
    options: Optional[ShortcodeRendererOptions] = None,
) -> str:
    """Expand the shortcodes in ``input_text`` into HTML.

    Parameters
    ----------
    input_text : str or bytes
        Text containing shortcodes. Bytes are decoded as UTF-8.
    config : RegistryConfig, ShortcodeRegistry or None
        Which tags are recognised. Defaults to :func:`default_config`.
    capabilities : Capabilities or None
        Path resolver and random source. Defaults to resolving against ``/``
        with system randomness.
    options : ShortcodeRendererOptions or None
        Renderer settings

    Returns
    -------
    str
        The text with every recognised tag replaced by its handler output.
        Everything else is reproduced unchanged.

    Raises
    ------
    ConfigurationError
        If ``config`` is invalid
    RenderingError
        If a handler fails and ``options.strict_mode`` is set

    """
    context = RenderContext(
        registry=_as_registry(config),
        capabilities=capabilities or Capabilities(),
        options=options or ShortcodeRendererOptions(),
    )
    document = parse(input_text)
    return ShortcodeHtmlRenderer(context).render_to_string(document)


def strip(input_text: Union[str, bytes], config: Optional[RegistryLike] = None) -> str:
    """Remove recognised shortcodes from ``input_text``, keeping their bodies.

        >>> strip("[dropcap]O[/dropcap]nce upon [random/]a time")
        'Once upon a time'

    """
    return ShortcodeStripper(_as_registry(config)).render_to_string(parse(input_text))
