"""Unit tests for the built-in shortcode handlers."""

import pytest

from shortcode2html import RenderContext, ShortcodeRendererOptions
from shortcode2html.handlers import BUILTIN_HANDLERS
from shortcode2html.handlers.builtin import (
    render_block,
    render_button,
    render_clear,
    render_dropcap,
    render_highlight,
    render_img,
    render_item,
    render_link,
    render_quote,
    render_random,
)
from shortcode2html.handlers.metadata import ParameterSpec


@pytest.mark.unit
class TestLinkHandlers:
    """Test button and link."""

    def test_button_defaults_to_front(self, context, base_url):
        html = render_button({}, "Label", context)
        assert html == f'<a href="{base_url}" class=" button" title="Label"><span>Label</span></a>'

    def test_button_attribute_order(self, context):
        attrs = {
            "path": "http://www.google.com",
            "class": "custom-class",
            "title": "Title",
            "style": "border-radius:5px;",
            "id": "theLabel",
        }
        assert render_button(attrs, "Label", context) == (
            '<a href="http://www.google.com" class="custom-class button" id="theLabel" '
            'style="border-radius:5px;" title="Title"><span>Label</span></a>'
        )

    def test_button_title_strips_markup(self, context):
        html = render_button({}, "<b>Bold</b> move", context)
        assert 'title="Bold move"' in html
        assert "<span><b>Bold</b> move</span>" in html

    def test_link_path(self, context, base_url):
        html = render_link({"path": "node/1", "class": "link-class"}, "Label", context)
        assert html == f'<a href="{base_url}node/1" class="link-class" title="Label">Label</a>'

    def test_link_without_class_has_no_class_attribute(self, context):
        assert "class=" not in render_link({"path": "x"}, "L", context)

    def test_link_url_wins_over_path(self, context):
        html = render_link({"path": "node/1", "url": "https://example.org/page"}, "L", context)
        assert html.startswith('<a href="https://example.org/page"')

    def test_link_extra_attributes_pass_through(self, context):
        html = render_link({"path": "x", "target": "_blank", "rel": "noopener"}, "L", context)
        assert html.endswith(' target="_blank" rel="noopener" title="L">L</a>')


@pytest.mark.unit
class TestImgHandler:
    """Test img."""

    def test_attribute_order(self, context):
        html = render_img({"src": "/abc.jpg", "alt": "Test image"}, "", context)
        assert html == '<img src="/abc.jpg" class=" img" alt="Test image">'

    def test_alt_always_present(self, context):
        assert render_img({"src": "/a.png"}, "", context) == '<img src="/a.png" class=" img" alt="">'

    def test_body_is_source_when_src_missing(self, context):
        assert render_img({}, " /a.png ", context).startswith('<img src="/a.png"')


@pytest.mark.unit
class TestWrapperHandlers:
    """Test item, clear, block, dropcap, highlight and quote."""

    def test_item_default_div_without_class(self, context):
        assert render_item({}, "x", context) == "<div>x</div>"

    @pytest.mark.parametrize("type_value,tag", [("s", "span"), ("span", "span"), ("d", "div"), ("div", "div")])
    def test_item_type(self, context, type_value, tag):
        assert render_item({"type": type_value}, "x", context) == f"<{tag}>x</{tag}>"

    def test_item_unknown_type_falls_back_to_div(self, context):
        assert render_item({"type": "table"}, "x", context) == "<div>x</div>"

    def test_item_passes_attributes_in_order(self, context):
        html = render_item({"class": "c", "type": "d", "style": "color:red", "id": "i"}, "x", context)
        assert html == '<div class="c" style="color:red" id="i">x</div>'

    def test_clear(self, context):
        assert render_clear({}, "x", context) == '<div class=" clearfix">x</div>'
        assert render_clear({"type": "s", "class": "c"}, "x", context) == '<span class="c clearfix">x</span>'

    def test_block_sectioning_element(self, context):
        assert render_block({"type": "section", "class": "intro"}, "x", context) == '<section class="intro">x</section>'

    def test_dropcap_and_highlight(self, context):
        assert render_dropcap({}, "T", context) == '<span class=" dropcap">T</span>'
        assert render_highlight({"class": "c"}, "x", context) == '<span class="c highlight">x</span>'

    def test_quote(self, context):
        assert render_quote({}, "body", context) == '<span class=" quote"> body </span>'
        assert render_quote({"author": "ryan", "class": "q"}, "body", context) == (
            '<span class="q quote"> <span class="quote-author">ryan wrote: </span> body </span>'
        )

    def test_attribute_values_are_escaped(self, context):
        html = render_item({"title": 'say "hi" <now>'}, "x", context)
        assert html == '<div title="say &quot;hi&quot; &lt;now&gt;">x</div>'

    def test_escaping_can_be_disabled(self, registry, capabilities):
        context = RenderContext(
            registry=registry,
            capabilities=capabilities,
            options=ShortcodeRendererOptions(escape_attributes=False),
        )
        assert render_item({"title": "a&b"}, "x", context) == '<div title="a&b">x</div>'


@pytest.mark.unit
class TestRandomHandler:
    """Test random."""

    def test_default_length(self, context):
        assert len(render_random({}, "", context)) == 8

    def test_explicit_length(self, context):
        assert len(render_random({"length": "10"}, "", context)) == 10

    @pytest.mark.parametrize("length", ["0", "-3", "abc", "", "٣"])
    def test_invalid_length_uses_default(self, context, length):
        assert len(render_random({"length": length}, "", context)) == 8

    def test_length_is_clamped_with_warning(self, registry, capabilities, caplog):
        context = RenderContext(
            registry=registry,
            capabilities=capabilities,
            options=ShortcodeRendererOptions(max_random_length=5),
        )
        with caplog.at_level("WARNING", logger="shortcode2html"):
            assert len(render_random({"length": "50"}, "", context)) == 5
        assert "exceeds max_random_length" in caplog.text

    def test_length_help_documents_cap(self):
        assert "capped at max_random_length (99" in BUILTIN_HANDLERS["random"].parameters["length"].help

    def test_body_ignored(self, context):
        assert "body" not in render_random({}, "body", context)


@pytest.mark.unit
class TestHandlerMetadata:
    """Test the handler catalogue."""

    def test_catalogue_covers_builtin_tags(self):
        assert set(BUILTIN_HANDLERS) == {
            "link",
            "random",
            "img",
            "clear",
            "dropcap",
            "item",
            "highlight",
            "button",
            "quote",
            "block",
        }
        for name, metadata in BUILTIN_HANDLERS.items():
            assert metadata.name == name
            assert metadata.description
            assert metadata.tip.startswith("[")

    def test_parameter_spec_validation(self):
        spec = ParameterSpec(choices=("a", "b"))
        assert spec.validate("a")
        with pytest.raises(ValueError):
            spec.validate("c")

    def test_validate_defaults_ignores_undeclared(self):
        BUILTIN_HANDLERS["link"].validate_defaults({"rel": "nofollow"})

    def test_validate_defaults_reports_key(self):
        with pytest.raises(ValueError, match="length"):
            BUILTIN_HANDLERS["random"].validate_defaults({"length": "0"})
