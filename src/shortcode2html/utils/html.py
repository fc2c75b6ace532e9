"""HTML helpers shared by the shortcode handlers."""

from __future__ import annotations

from html import escape as _html_escape
from typing import Iterable, Mapping, Sequence


def escape_attribute(value: str, *, enabled: bool = True) -> str:
    """Escape a value for use inside a double-quoted attribute when enabled."""
    if not enabled:
        return value
    return _html_escape(value, quote=True)


def append_class(custom: str | None, suffix: str) -> str:
    """Append a handler class to a user-supplied class list.

    The result always has a single space before ``suffix``, so an empty custom
    class yields ``" suffix"``.

        >>> append_class("custom-class", "button")
        'custom-class button'
        >>> append_class(None, "button")
        ' button'

    """
    return f"{custom or ''} {suffix}"


def passthrough_attributes(
    attrs: Mapping[str, str],
    consumed: Iterable[str],
    priority: Sequence[str] = (),
) -> list[tuple[str, str]]:
    """Select attributes a handler copies to its output verbatim.

    Parameters
    ----------
    attrs : mapping of str to str
        Merged tag attributes in first-seen order
    consumed : iterable of str
        Attribute names the handler interprets itself
    priority : sequence of str
        Names emitted first, in this order, when present

    Returns
    -------
    list of (str, str)
        Priority attributes followed by the rest in first-seen order

    """
    skip = set(consumed)
    ordered = [(name, attrs[name]) for name in priority if name in attrs and name not in skip]
    taken = skip | {name for name, _ in ordered}
    ordered.extend((name, value) for name, value in attrs.items() if name not in taken)
    return ordered


def build_attributes(pairs: Iterable[tuple[str, str]], *, escape: bool = True) -> str:
    """Serialize attribute pairs as ``' name="value"'`` in the given order."""
    return "".join(f' {name}="{escape_attribute(value, enabled=escape)}"' for name, value in pairs)


def element(tag: str, pairs: Iterable[tuple[str, str]], content: str, *, escape: bool = True) -> str:
    """Return ``<tag attrs>content</tag>``."""
    return f"<{tag}{build_attributes(pairs, escape=escape)}>{content}</{tag}>"


def void_element(tag: str, pairs: Iterable[tuple[str, str]], *, escape: bool = True) -> str:
    """Return ``<tag attrs>`` for elements without a closing tag."""
    return f"<{tag}{build_attributes(pairs, escape=escape)}>"
