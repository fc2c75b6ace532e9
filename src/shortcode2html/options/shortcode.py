#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/shortcode2html/options/shortcode.py
"""Configuration for the shortcode registry and renderer.

Two immutable values configure a render pass:

- :class:`RegistryConfig` says which tags exist, whether each is enabled and
  which default attribute values it receives.
- :class:`ShortcodeRendererOptions` tunes renderer behaviour (strictness,
  attribute escaping, limits).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from shortcode2html.constants import (
    DEFAULT_ESCAPE_ATTRIBUTES,
    DEFAULT_MAX_RANDOM_LENGTH,
    DEFAULT_STRICT_MODE,
)
from shortcode2html.exceptions import ConfigurationError
from shortcode2html.options.base import BaseOptions, CloneFrozenMixin


@dataclass(frozen=True)
class HandlerSpec(CloneFrozenMixin):
    """Registry entry for a single tag.

    Parameters
    ----------
    name : str
        Tag name as written in the text (matched case-sensitively)
    enabled : bool, default True
        Disabled entries stay configured but their tags pass through as
        literal text
    defaults : mapping of str to str, default empty
        Attribute values applied when the tag does not set them itself
    handler : str or None, default None
        Name of the handler variant to use. ``None`` means the handler whose
        name equals the tag name, which lets a site alias ``btn`` to
        ``button``.

    """

    name: str
    enabled: bool = True
    defaults: Mapping[str, str] = field(default_factory=dict)
    handler: Optional[str] = None

    def __post_init__(self) -> None:
        """Freeze the defaults mapping and check its shape."""
        if not isinstance(self.defaults, Mapping):
            raise ConfigurationError(
                f"Defaults for tag '{self.name}' must be a mapping, got {type(self.defaults).__name__}",
                tag_name=self.name,
                parameter_value=self.defaults,
            )
        for key, value in self.defaults.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ConfigurationError(
                    f"Default '{key}' for tag '{self.name}' must map a string to a string, "
                    f"got {type(value).__name__}",
                    tag_name=self.name,
                    parameter_name=str(key),
                    parameter_value=value,
                )
        object.__setattr__(self, "defaults", MappingProxyType(dict(self.defaults)))

    @property
    def handler_name(self) -> str:
        """Name of the handler variant this entry dispatches to."""
        return self.handler or self.name

    def fingerprint(self) -> tuple[Any, ...]:
        """Return a hashable representation of this entry."""
        return (self.name, self.handler_name, self.enabled, tuple(self.defaults.items()))


def _coerce_default_value(tag_name: str, key: str, value: Any) -> str:
    # TOML/YAML hand us ints for values such as length = 10
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (str, int)):
        return str(value)
    raise ConfigurationError(
        f"Default '{key}' for tag '{tag_name}' must be a string or integer, got {type(value).__name__}",
        tag_name=tag_name,
        parameter_name=key,
        parameter_value=value,
    )


def _spec_from_value(tag_name: str, value: Any) -> HandlerSpec:
    if isinstance(value, HandlerSpec):
        return value if value.name == tag_name else value.create_updated(name=tag_name)

    # Short form: {"link": true} or {"link": 1}
    if isinstance(value, (bool, int)):
        return HandlerSpec(name=tag_name, enabled=bool(value))

    if isinstance(value, Mapping):
        unknown = set(value) - {"enabled", "defaults", "handler"}
        if unknown:
            raise ConfigurationError(
                f"Unknown keys for tag '{tag_name}': {', '.join(sorted(unknown))}",
                tag_name=tag_name,
                parameter_value=value,
            )
        raw_defaults = value.get("defaults") or {}
        if not isinstance(raw_defaults, Mapping):
            raise ConfigurationError(
                f"Defaults for tag '{tag_name}' must be a table/mapping",
                tag_name=tag_name,
                parameter_name="defaults",
                parameter_value=raw_defaults,
            )
        defaults = {str(k): _coerce_default_value(tag_name, str(k), v) for k, v in raw_defaults.items()}
        handler = value.get("handler")
        if handler is not None and not isinstance(handler, str):
            raise ConfigurationError(
                f"Handler for tag '{tag_name}' must be a string",
                tag_name=tag_name,
                parameter_name="handler",
                parameter_value=handler,
            )
        return HandlerSpec(
            name=tag_name,
            enabled=bool(value.get("enabled", True)),
            defaults=defaults,
            handler=handler,
        )

    raise ConfigurationError(
        f"Configuration for tag '{tag_name}' must be a boolean or a mapping, got {type(value).__name__}",
        tag_name=tag_name,
        parameter_value=value,
    )


@dataclass(frozen=True)
class RegistryConfig(CloneFrozenMixin):
    """Ordered, immutable set of tag configurations.

    Parameters
    ----------
    entries : tuple of HandlerSpec
        One entry per tag name. Names must be unique.

    Examples
    --------
    Build from a plain mapping, mixing short and long forms:

        >>> config = RegistryConfig.from_mapping({
        ...     "link": True,
        ...     "random": {"enabled": True, "defaults": {"length": "12"}},
        ...     "quote": False,
        ... })
        >>> config.get("random").defaults["length"]
        '12'

    """

    entries: tuple[HandlerSpec, ...] = ()

    def __post_init__(self) -> None:
        """Reject duplicate tag names."""
        object.__setattr__(self, "entries", tuple(self.entries))
        seen: set[str] = set()
        for spec in self.entries:
            if spec.name in seen:
                raise ConfigurationError(f"Tag '{spec.name}' is configured more than once", tag_name=spec.name)
            seen.add(spec.name)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> RegistryConfig:
        """Build a configuration from a mapping of tag name to settings.

        Each value is either a boolean/integer (enabled flag, no defaults),
        a mapping with optional ``enabled``, ``defaults`` and ``handler``
        keys, or a :class:`HandlerSpec`.

        Raises
        ------
        ConfigurationError
            If a value has an unsupported shape

        """
        if not isinstance(mapping, Mapping):
            raise ConfigurationError(f"Tag configuration must be a mapping, got {type(mapping).__name__}")
        return cls(entries=tuple(_spec_from_value(str(name), value) for name, value in mapping.items()))

    def get(self, name: str) -> Optional[HandlerSpec]:
        """Return the entry for ``name`` or None."""
        for spec in self.entries:
            if spec.name == name:
                return spec
        return None

    def names(self) -> list[str]:
        """Return configured tag names in configuration order."""
        return [spec.name for spec in self.entries]

    def with_tag(self, spec: HandlerSpec) -> RegistryConfig:
        """Return a copy with ``spec`` added, or replacing the entry of the same name."""
        if self.get(spec.name) is None:
            return self.create_updated(entries=self.entries + (spec,))
        return self.create_updated(entries=tuple(spec if e.name == spec.name else e for e in self.entries))

    def disable(self, *names: str) -> RegistryConfig:
        """Return a copy with the named tags disabled; unknown names are ignored."""
        return self.create_updated(
            entries=tuple(e.create_updated(enabled=False) if e.name in names else e for e in self.entries)
        )

    def fingerprint(self) -> tuple[Any, ...]:
        """Return a hashable key identifying this configuration."""
        return tuple(spec.fingerprint() for spec in self.entries)

    def __iter__(self) -> Iterator[HandlerSpec]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class ShortcodeRendererOptions(BaseOptions):
    """Configuration options for rendering shortcode trees.

    Parameters
    ----------
    strict_mode : bool, default False
        Whether a failing handler raises :class:`RenderingError`. When False
        the tag is passed through as literal text and a warning is logged.
    escape_attributes : bool, default True
        Whether attribute values written by handlers are HTML-escaped.
    max_random_length : int, default 99
        Upper bound applied to the ``length`` of the random tag.

    Examples
    --------
        >>> options = ShortcodeRendererOptions(strict_mode=True)
        >>> relaxed = options.create_updated(strict_mode=False)

    """

    strict_mode: bool = field(
        default=DEFAULT_STRICT_MODE,
        metadata={"help": "Raise an error when a shortcode handler fails instead of passing the tag through"},
    )
    escape_attributes: bool = field(
        default=DEFAULT_ESCAPE_ATTRIBUTES,
        metadata={"help": "HTML-escape attribute values emitted by handlers"},
    )
    max_random_length: int = field(
        default=DEFAULT_MAX_RANDOM_LENGTH,
        metadata={"help": "Maximum length of strings produced by the random tag"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if self.max_random_length <= 0:
            raise ValueError(f"max_random_length must be positive, got {self.max_random_length}")
