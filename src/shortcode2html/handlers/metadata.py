#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2html/handlers/metadata.py
"""Metadata describing shortcode handlers.

Every handler is a plain function ``handler(attrs, content, context) -> str``
registered together with a :class:`HandlerMetadata` record. The metadata
carries the description and usage tip shown by ``shortcode2html list-tags``
and the :class:`ParameterSpec` entries used to validate configured default
values when a registry is built.

Examples
--------
    >>> def shout(attrs, content, context):
    ...     return content.upper()
    >>> METADATA = HandlerMetadata(
    ...     name="shout",
    ...     description="Upper-case the body",
    ...     handler=shout,
    ...     tip="[shout]quiet words[/shout]",
    ... )

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Mapping, Optional

if TYPE_CHECKING:
    from shortcode2html.context import RenderContext


HandlerFunction = Callable[[Mapping[str, str], str, "RenderContext"], str]


@dataclass(frozen=True)
class ParameterSpec:
    """Specification of one attribute a handler understands.

    Parameters
    ----------
    help : str
        Description of the attribute
    default : str or None
        Value used by the handler when neither the tag nor the configuration
        provides one
    choices : tuple of str or None
        Accepted values, if the attribute is an enumeration
    validator : callable or None
        Takes the string value and returns True when it is acceptable

    """

    help: str = ""
    default: Optional[str] = None
    choices: Optional[tuple[str, ...]] = None
    validator: Optional[Callable[[str], bool]] = None

    def validate(self, value: str) -> bool:
        """Validate a configured value.

        Raises
        ------
        ValueError
            If the value is not acceptable

        """
        if not isinstance(value, str):
            raise ValueError(f"Expected type str, got {type(value).__name__}")

        if self.choices is not None and value not in self.choices:
            raise ValueError(f"Value must be one of {list(self.choices)}, got {value!r}")

        if self.validator is not None and not self.validator(value):
            raise ValueError(f"Validation failed for value: {value!r}")

        return True


@dataclass(frozen=True)
class HandlerMetadata:
    """Registration record for a shortcode handler.

    Parameters
    ----------
    name : str
        Handler variant name; configuration entries refer to it
    description : str
        One-line description
    handler : callable
        ``handler(attrs, content, context) -> str``
    tip : str
        Example usage shown to authors
    parameters : mapping of str to ParameterSpec
        Attributes with validation rules for configured defaults
    uses_content : bool
        False for handlers that ignore their body (e.g. random)

    """

    name: str
    description: str
    handler: HandlerFunction
    tip: str = ""
    parameters: Mapping[str, ParameterSpec] = field(default_factory=dict)
    uses_content: bool = True

    def validate_defaults(self, defaults: Mapping[str, str]) -> None:
        """Check configured defaults against the declared parameters.

        Defaults for attributes without a :class:`ParameterSpec` are accepted
        as-is, since most handlers pass unknown attributes through.

        Raises
        ------
        ValueError
            Naming the first invalid default

        """
        for key, value in defaults.items():
            spec = self.parameters.get(key)
            if spec is None:
                continue
            try:
                spec.validate(value)
            except ValueError as exc:
                raise ValueError(f"Invalid default for '{key}': {exc}") from exc

    def __call__(self, attrs: Mapping[str, str], content: str, context: RenderContext) -> str:
        return self.handler(attrs, content, context)
