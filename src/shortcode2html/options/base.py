"""Base classes for shortcode2html options.

Options objects are frozen dataclasses: they are built once, shared freely
between threads and copied with :meth:`CloneFrozenMixin.create_updated` when a
variant is needed.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Subclasses declare their settings as frozen dataclass fields whose
    ``metadata`` carries a ``help`` string, which the CLI reuses.
    """

    @classmethod
    def field_help(cls) -> dict[str, str]:
        """Return a mapping of option name to its help text."""
        return {f.name: f.metadata.get("help", "") for f in fields(cls)}

    def __post_init__(self) -> None:
        """Validate option values; subclasses extend this."""
        pass
