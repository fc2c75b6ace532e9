#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2html/capabilities.py
"""Capabilities injected into a render pass.

The engine itself performs no I/O. Two collaborators are supplied by the
caller:

- ``resolve_path(path) -> str`` turns an internal path into an absolute URL
- ``random_source.next_string(length) -> str`` produces alphanumeric strings
  for the random tag

Tests substitute :class:`SeededRandomSource` (or any object with a
``next_string`` method) to make output deterministic.
"""

from __future__ import annotations

import random
import secrets
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, runtime_checkable
from urllib.parse import urlsplit

from shortcode2html.constants import DEFAULT_BASE_URL, FRONT_PAGE_PATH, RANDOM_ALPHABET
from shortcode2html.exceptions import PathResolutionError

PathResolver = Callable[[str], str]


@runtime_checkable
class RandomSource(Protocol):
    """Source of random alphanumeric strings."""

    def next_string(self, length: int) -> str:
        """Return a random alphanumeric string of exactly ``length`` characters."""
        ...


class SystemRandomSource:
    """Random strings from the operating system's CSPRNG."""

    def __init__(self, alphabet: str = RANDOM_ALPHABET):
        """Initialize with the alphabet to draw characters from."""
        self.alphabet = alphabet

    def next_string(self, length: int) -> str:
        return "".join(secrets.choice(self.alphabet) for _ in range(length))


class SeededRandomSource:
    """Reproducible random strings for tests and repeatable builds.

    Parameters
    ----------
    seed : int or None
        Seed for the underlying :class:`random.Random`
    alphabet : str
        Characters to draw from

    """

    def __init__(self, seed: Optional[int] = None, alphabet: str = RANDOM_ALPHABET):
        """Initialize the generator."""
        self.alphabet = alphabet
        self._random = random.Random(seed)

    def next_string(self, length: int) -> str:
        return "".join(self._random.choice(self.alphabet) for _ in range(length))


def _is_absolute(path: str) -> bool:
    return path.startswith("//") or bool(urlsplit(path).scheme)


class SitePathResolver:
    """Resolve site paths against a base URL.

    - ``<front>`` and the empty path resolve to the base URL itself
    - absolute URLs (``http://...``, ``mailto:...``, ``//host/...``) are
      returned unchanged
    - anything else is appended to the base URL, with leading slashes dropped

    Parameters
    ----------
    base_url : str, default "/"
        Site root. A trailing slash is added when missing.

    Examples
    --------
        >>> resolve = SitePathResolver("https://example.com")
        >>> resolve("node/1")
        'https://example.com/node/1'
        >>> resolve("<front>")
        'https://example.com/'

    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL):
        """Initialize the resolver."""
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"

    def __call__(self, path: str) -> str:
        """Resolve ``path``.

        Raises
        ------
        PathResolutionError
            If the path contains whitespace or control characters
        """
        candidate = path.strip()
        if any(ch.isspace() or ord(ch) < 32 for ch in candidate):
            raise PathResolutionError(path)
        if candidate in ("", FRONT_PAGE_PATH):
            return self.base_url
        if _is_absolute(candidate):
            return candidate
        return self.base_url + candidate.lstrip("/")


@dataclass(frozen=True)
class Capabilities:
    """Bundle of collaborators available to handlers.

    Parameters
    ----------
    resolve_path : callable, default SitePathResolver("/")
        Maps a path to an absolute URL; may raise, in which case the raw path
        is used
    random_source : RandomSource, default SystemRandomSource()
        Supplies strings for the random tag

    """

    resolve_path: PathResolver = field(default_factory=SitePathResolver)
    random_source: RandomSource = field(default_factory=SystemRandomSource)

    @classmethod
    def for_site(cls, base_url: str = DEFAULT_BASE_URL, seed: Optional[int] = None) -> Capabilities:
        """Build capabilities for a site root, seeding the random source when ``seed`` is given."""
        source: RandomSource = SeededRandomSource(seed) if seed is not None else SystemRandomSource()
        return cls(resolve_path=SitePathResolver(base_url), random_source=source)
