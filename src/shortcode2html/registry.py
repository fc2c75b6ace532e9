#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2html/registry.py
"""Shortcode registry: tag name to handler resolution.

A :class:`ShortcodeRegistry` is built once from a :class:`RegistryConfig` and
is read-only afterwards, so a single instance can serve concurrent renders.
All validation happens in the constructor; an invalid configuration raises
:class:`ConfigurationError` before any text is rendered.

Examples
--------
    >>> from shortcode2html.api import default_config
    >>> registry = ShortcodeRegistry(default_config())
    >>> registry.resolve("highlight").metadata.description
    'Highlight the wrapped text'
    >>> registry.resolve("unknown") is None
    True

"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, Optional

from shortcode2html.constants import REGISTRY_CACHE_SIZE
from shortcode2html.exceptions import ConfigurationError
from shortcode2html.handlers import BUILTIN_HANDLERS, HandlerMetadata
from shortcode2html.options.shortcode import HandlerSpec, RegistryConfig

if TYPE_CHECKING:
    from shortcode2html.context import RenderContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredHandler:
    """A configured tag bound to its handler.

    Parameters
    ----------
    spec : HandlerSpec
        The configuration entry
    metadata : HandlerMetadata
        The handler variant the entry dispatches to

    """

    spec: HandlerSpec
    metadata: HandlerMetadata

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def enabled(self) -> bool:
        return self.spec.enabled

    @property
    def defaults(self) -> Mapping[str, str]:
        return self.spec.defaults

    def merge_attributes(self, attrs: Mapping[str, str]) -> dict[str, str]:
        """Overlay tag attributes on the configured defaults.

        Tag attributes win. Keys set by the tag keep their first-seen order
        and come after defaults the tag did not override.
        """
        merged = {key: value for key, value in self.defaults.items() if key not in attrs}
        merged.update(attrs)
        return merged

    def render(self, attrs: Mapping[str, str], content: str, context: RenderContext) -> str:
        """Invoke the handler with merged attributes."""
        return self.metadata(self.merge_attributes(attrs), content, context)


class ShortcodeRegistry:
    """Resolved, validated mapping from tag name to handler.

    Parameters
    ----------
    config : RegistryConfig
        Which tags exist, whether they are enabled and their defaults
    handlers : mapping of str to HandlerMetadata, optional
        Handler variants available to the configuration. Defaults to the
        built-in handlers; pass an extended mapping to add custom tags.

    Raises
    ------
    ConfigurationError
        If an entry names an unknown handler or has invalid defaults

    """

    def __init__(self, config: RegistryConfig, handlers: Optional[Mapping[str, HandlerMetadata]] = None):
        """Build and validate the registry."""
        self.config = config
        self._handlers: dict[str, HandlerMetadata] = dict(BUILTIN_HANDLERS if handlers is None else handlers)
        self._entries: dict[str, RegisteredHandler] = {}

        for spec in config:
            metadata = self._handlers.get(spec.handler_name)
            if metadata is None:
                raise ConfigurationError(
                    f"Tag '{spec.name}' refers to unknown handler '{spec.handler_name}'. "
                    f"Available: {', '.join(sorted(self._handlers))}",
                    tag_name=spec.name,
                    parameter_name="handler",
                    parameter_value=spec.handler_name,
                )
            try:
                metadata.validate_defaults(spec.defaults)
            except ValueError as exc:
                raise ConfigurationError(
                    f"Invalid configuration for tag '{spec.name}': {exc}",
                    tag_name=spec.name,
                    original_error=exc,
                ) from exc
            self._entries[spec.name] = RegisteredHandler(spec=spec, metadata=metadata)

        logger.debug(
            "Built shortcode registry: %d tags, %d enabled",
            len(self._entries),
            sum(1 for entry in self._entries.values() if entry.enabled),
        )

    def resolve(self, name: str) -> Optional[RegisteredHandler]:
        """Return the enabled handler for ``name``.

        Matching is case-sensitive. Returns None for tags that are not
        configured or are disabled; such tags pass through as literal text.
        """
        entry = self._entries.get(name)
        if entry is None or not entry.enabled:
            return None
        return entry

    def get_spec(self, name: str) -> Optional[HandlerSpec]:
        """Return the configuration entry for ``name``, enabled or not."""
        entry = self._entries.get(name)
        return entry.spec if entry else None

    def is_enabled(self, name: str) -> bool:
        return self.resolve(name) is not None

    def list_tags(self, include_disabled: bool = False) -> list[str]:
        """List tag names in configuration order."""
        return [name for name, entry in self._entries.items() if include_disabled or entry.enabled]

    def tips(self) -> dict[str, str]:
        """Return usage tips for every enabled tag."""
        return {name: self._entries[name].metadata.tip for name in self.list_tags()}

    def get_entry(self, name: str) -> RegisteredHandler:
        """Return the entry for ``name`` whether or not it is enabled.

        Raises
        ------
        KeyError
            If the tag is not configured

        """
        if name not in self._entries:
            raise KeyError(f"Tag '{name}' not configured")
        return self._entries[name]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


_cache: OrderedDict[Any, ShortcodeRegistry] = OrderedDict()
_cache_lock = threading.Lock()


def get_registry(config: RegistryConfig) -> ShortcodeRegistry:
    """Return a registry for ``config`` built from the built-in handlers, reusing cached instances.

    Registries are immutable after construction, so identical configurations
    share one instance across calls and threads. At most
    ``REGISTRY_CACHE_SIZE`` registries are kept; the least recently used one
    is evicted first.
    """
    key = config.fingerprint()
    with _cache_lock:
        registry = _cache.get(key)
        if registry is None:
            registry = ShortcodeRegistry(config)
            _cache[key] = registry
            if len(_cache) > REGISTRY_CACHE_SIZE:
                _cache.popitem(last=False)
        else:
            _cache.move_to_end(key)
        return registry


def clear_registry_cache() -> None:
    """Drop all cached registries."""
    with _cache_lock:
        _cache.clear()
