#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2html/handlers/builtin.py
"""Built-in shortcode handlers.

Each handler is a pure function of the merged attributes, the already
rendered body and the render context. Output attribute order is fixed per
handler so that output is byte-for-byte stable:

=========  ==============================================================
Tag        Output
=========  ==============================================================
button     ``<a href class id style ... title><span>body</span></a>``
link       ``<a href [class] id style ... title>body</a>``
img        ``<img src class alt ...>``
item       ``<div|span [class] ...>body</div|span>``
clear      ``<div|span class="... clearfix" ...>body</div|span>``
block      ``<element [class] ...>body</element>``
dropcap    ``<span class="... dropcap">body</span>``
highlight  ``<span class="... highlight">body</span>``
quote      ``<span class="... quote"> [author] body </span>``
random     plain alphanumeric text, body ignored
=========  ==============================================================
"""

from __future__ import annotations

import logging
import re
from typing import Mapping

from shortcode2html.constants import (
    BLOCK_ELEMENT_ALIASES,
    DEFAULT_MAX_RANDOM_LENGTH,
    DEFAULT_RANDOM_LENGTH,
    DEFAULT_WRAPPER_TYPE,
    FRONT_PAGE_PATH,
    PRIORITY_PASSTHROUGH_ATTRIBUTES,
    WRAPPER_TYPE_ALIASES,
)
from shortcode2html.context import RenderContext
from shortcode2html.handlers.metadata import HandlerMetadata, ParameterSpec
from shortcode2html.utils.html import (
    append_class,
    element,
    escape_attribute,
    passthrough_attributes,
    void_element,
)

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]*>")


def _plain_text(content: str) -> str:
    """Strip markup from rendered content for use as an attribute value."""
    return _TAG_RE.sub("", content)


def _is_positive_int(value: str) -> bool:
    stripped = value.strip()
    return stripped.isascii() and stripped.isdecimal() and int(stripped) > 0


def _resolve_element(type_value: str | None, aliases: Mapping[str, str], tag_name: str) -> str:
    key = (type_value or DEFAULT_WRAPPER_TYPE).strip().lower()
    if key not in aliases:
        logger.debug("Unknown type %r for [%s]; using div", type_value, tag_name)
        return "div"
    return aliases[key]


# ---------------------------------------------------------------------------
# Link-like handlers
# ---------------------------------------------------------------------------


def render_button(attrs: Mapping[str, str], content: str, context: RenderContext) -> str:
    """Render ``[button path="..."]Label[/button]`` as a styled anchor."""
    href = context.resolve_path(attrs.get("path", FRONT_PAGE_PATH))
    pairs = [("href", href), ("class", append_class(attrs.get("class"), "button"))]
    pairs += passthrough_attributes(attrs, ("path", "class", "title"), PRIORITY_PASSTHROUGH_ATTRIBUTES)
    pairs.append(("title", attrs.get("title", _plain_text(content))))
    return element("a", pairs, f"<span>{content}</span>", escape=context.escape_attributes)


def render_link(attrs: Mapping[str, str], content: str, context: RenderContext) -> str:
    """Render ``[link url|path="..."]text[/link]`` as an anchor.

    ``url`` is used verbatim and wins over ``path``, which is resolved.
    """
    if "url" in attrs:
        href = attrs["url"]
    else:
        href = context.resolve_path(attrs.get("path", FRONT_PAGE_PATH))

    pairs = [("href", href)]
    if "class" in attrs:
        pairs.append(("class", attrs["class"]))
    pairs += passthrough_attributes(attrs, ("path", "url", "class", "title"), PRIORITY_PASSTHROUGH_ATTRIBUTES)
    pairs.append(("title", attrs.get("title", _plain_text(content))))
    return element("a", pairs, content, escape=context.escape_attributes)


def render_img(attrs: Mapping[str, str], content: str, context: RenderContext) -> str:
    """Render ``[img src="..." alt="..." /]``; the body is the source when ``src`` is absent."""
    src = attrs.get("src", _plain_text(content).strip())
    pairs = [
        ("src", src),
        ("class", append_class(attrs.get("class"), "img")),
        ("alt", attrs.get("alt", "")),
    ]
    pairs += passthrough_attributes(attrs, ("src", "class", "alt"))
    return void_element("img", pairs, escape=context.escape_attributes)


# ---------------------------------------------------------------------------
# Wrapper handlers
# ---------------------------------------------------------------------------


def render_item(attrs: Mapping[str, str], content: str, context: RenderContext) -> str:
    """Wrap the body in a div, or a span for ``type="s"``."""
    tag = _resolve_element(attrs.get("type"), WRAPPER_TYPE_ALIASES, "item")
    pairs = [("class", attrs["class"])] if "class" in attrs else []
    pairs += passthrough_attributes(attrs, ("class", "type"))
    return element(tag, pairs, content, escape=context.escape_attributes)


def render_clear(attrs: Mapping[str, str], content: str, context: RenderContext) -> str:
    """Wrap the body in a clearfix div or span."""
    tag = _resolve_element(attrs.get("type"), WRAPPER_TYPE_ALIASES, "clear")
    pairs = [("class", append_class(attrs.get("class"), "clearfix"))]
    pairs += passthrough_attributes(attrs, ("class", "type"))
    return element(tag, pairs, content, escape=context.escape_attributes)


def render_block(attrs: Mapping[str, str], content: str, context: RenderContext) -> str:
    """Wrap the body in a configurable container element."""
    tag = _resolve_element(attrs.get("type"), BLOCK_ELEMENT_ALIASES, "block")
    pairs = [("class", attrs["class"])] if "class" in attrs else []
    pairs += passthrough_attributes(attrs, ("class", "type"))
    return element(tag, pairs, content, escape=context.escape_attributes)


def render_dropcap(attrs: Mapping[str, str], content: str, context: RenderContext) -> str:
    return element(
        "span", [("class", append_class(attrs.get("class"), "dropcap"))], content, escape=context.escape_attributes
    )


def render_highlight(attrs: Mapping[str, str], content: str, context: RenderContext) -> str:
    return element(
        "span", [("class", append_class(attrs.get("class"), "highlight"))], content, escape=context.escape_attributes
    )


def render_quote(attrs: Mapping[str, str], content: str, context: RenderContext) -> str:
    """Render a quotation span, optionally attributed to ``author``."""
    body = f" {content} "
    if "author" in attrs:
        author = escape_attribute(attrs["author"], enabled=context.escape_attributes)
        body = f' <span class="quote-author">{author} wrote: </span>{body}'
    return element(
        "span", [("class", append_class(attrs.get("class"), "quote"))], body, escape=context.escape_attributes
    )


# ---------------------------------------------------------------------------
# Text handlers
# ---------------------------------------------------------------------------


def render_random(attrs: Mapping[str, str], content: str, context: RenderContext) -> str:
    """Emit a random alphanumeric string; the body is ignored."""
    raw_length = attrs.get("length")
    length = DEFAULT_RANDOM_LENGTH
    if raw_length is not None:
        if _is_positive_int(raw_length):
            length = int(raw_length)
        else:
            logger.debug("Ignoring invalid random length %r; using %d", raw_length, DEFAULT_RANDOM_LENGTH)
    limit = context.options.max_random_length
    if length > limit:
        logger.warning("Random length %d exceeds max_random_length; using %d", length, limit)
        length = limit
    return context.random_string(length)


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

_WRAPPER_TYPE = ParameterSpec(
    help="Element to use: d/div or s/span",
    default=DEFAULT_WRAPPER_TYPE,
    choices=tuple(WRAPPER_TYPE_ALIASES),
)

BUILTIN_HANDLERS: dict[str, HandlerMetadata] = {
    metadata.name: metadata
    for metadata in (
        HandlerMetadata(
            name="link",
            description="Link to a site path or an external URL",
            handler=render_link,
            tip='[link path="node/1" class="more"]Read more[/link] or [link url="https://example.com"]Example[/link]',
            parameters={
                "path": ParameterSpec(help="Site path, resolved against the site root"),
                "url": ParameterSpec(help="Absolute URL used verbatim; wins over path"),
                "title": ParameterSpec(help="Link title; defaults to the link text"),
            },
        ),
        HandlerMetadata(
            name="random",
            description="Insert a random alphanumeric string",
            handler=render_random,
            tip="[random/] or [random length=12/]",
            parameters={
                "length": ParameterSpec(
                    help=f"Number of characters, capped at max_random_length ({DEFAULT_MAX_RANDOM_LENGTH} by default)",
                    default=str(DEFAULT_RANDOM_LENGTH),
                    validator=_is_positive_int,
                ),
            },
            uses_content=False,
        ),
        HandlerMetadata(
            name="img",
            description="Insert an image",
            handler=render_img,
            tip='[img src="/files/photo.jpg" alt="A photo" /]',
            parameters={
                "src": ParameterSpec(help="Image URL; the tag body is used when omitted"),
                "alt": ParameterSpec(help="Alternative text"),
            },
        ),
        HandlerMetadata(
            name="clear",
            description="Wrap content in a clearfix container",
            handler=render_clear,
            tip='[clear type="s"]floated content[/clear]',
            parameters={"type": _WRAPPER_TYPE},
        ),
        HandlerMetadata(
            name="dropcap",
            description="Style the wrapped letter as a drop capital",
            handler=render_dropcap,
            tip="[dropcap]T[/dropcap]his paragraph starts big.",
        ),
        HandlerMetadata(
            name="item",
            description="Wrap content in a div or span with custom attributes",
            handler=render_item,
            tip='[item class="box" style="color:#F00"]content[/item]',
            parameters={"type": _WRAPPER_TYPE},
        ),
        HandlerMetadata(
            name="highlight",
            description="Highlight the wrapped text",
            handler=render_highlight,
            tip="[highlight]important words[/highlight]",
        ),
        HandlerMetadata(
            name="button",
            description="Link styled as a button",
            handler=render_button,
            tip='[button path="contact" class="primary"]Contact us[/button]',
            parameters={
                "path": ParameterSpec(help="Site path or absolute URL; defaults to the site root"),
                "title": ParameterSpec(help="Button title; defaults to the label"),
            },
        ),
        HandlerMetadata(
            name="quote",
            description="Quotation with optional author",
            handler=render_quote,
            tip='[quote author="Ada"]quoted text[/quote]',
            parameters={"author": ParameterSpec(help="Name shown before the quotation")},
        ),
        HandlerMetadata(
            name="block",
            description="Generic container element with custom class and attributes",
            handler=render_block,
            tip='[block type="section" class="intro"]content[/block]',
            parameters={
                "type": ParameterSpec(
                    help="Element to use: d/div, s/span, p, section, article, aside, header, footer, blockquote",
                    default=DEFAULT_WRAPPER_TYPE,
                    choices=tuple(BLOCK_ELEMENT_ALIASES),
                ),
            },
        ),
    )
}
