"""Integration tests: full text-to-HTML rendering of every built-in tag.

Rendered output is checked both byte-for-byte and by locating the generated
elements with CSS selectors, the way a browser-level test would find them.
"""

import pytest
from bs4 import BeautifulSoup

from shortcode2html import Capabilities, SeededRandomSource, SitePathResolver, default_config, render

BASE_URL = "http://example.test/"


def _render(text, config=None):
    capabilities = Capabilities(resolve_path=SitePathResolver(BASE_URL), random_source=SeededRandomSource(99))
    return render(text, config=config, capabilities=capabilities)


def _select_one(html, selector):
    element = BeautifulSoup(html, "html.parser").select_one(selector)
    assert element is not None, f"{selector!r} not found in {html!r}"
    return element


@pytest.mark.integration
class TestButton:
    def test_defaults(self):
        html = _render("[button]Label[/button]")
        assert html == f'<a href="{BASE_URL}" class=" button" title="Label"><span>Label</span></a>'

    def test_custom_class(self):
        html = _render('[button path="<front>" class="custom-class"]Label[/button]')
        link = _select_one(html, "a.custom-class.button")
        assert link["href"] == BASE_URL
        assert link.select_one("span").get_text() == "Label"

    def test_all_attributes(self):
        html = _render(
            '[button path="http://www.google.com" class="custom-class" title="Title" id="theLabel" '
            'style="border-radius:5px;"]Label[/button]'
        )
        assert html == (
            '<a href="http://www.google.com" class="custom-class button" id="theLabel" '
            'style="border-radius:5px;" title="Title"><span>Label</span></a>'
        )
        link = _select_one(html, "a#theLabel")
        assert link["style"] == "border-radius:5px;"

    def test_relative_path(self):
        html = _render('[button path="/x" class="c"]L[/button]')
        assert html == f'<a href="{BASE_URL}x" class="c button" title="L"><span>L</span></a>'


@pytest.mark.integration
class TestClear:
    def test_defaults(self):
        html = _render("[clear]<div>Other elements</div>[/clear]")
        assert html == '<div class=" clearfix"><div>Other elements</div></div>'

    @pytest.mark.parametrize("type_value", ["s", "span"])
    def test_span(self, type_value):
        html = _render(f'[clear type="{type_value}"]<div>Other elements</div>[/clear]')
        assert _select_one(html, "span.clearfix").select_one("div").get_text() == "Other elements"

    def test_div_with_attributes(self):
        html = _render(
            '[clear type="d" class="custom-class" id="theLabel" style="background-color: #F00;"]'
            "<div>Other elements</div>[/clear]"
        )
        assert html == (
            '<div class="custom-class clearfix" id="theLabel" style="background-color: #F00;">'
            "<div>Other elements</div></div>"
        )


@pytest.mark.integration
class TestDropcapAndHighlight:
    def test_dropcap(self):
        assert _render("[dropcap]text[/dropcap]") == '<span class=" dropcap">text</span>'
        assert _render('[dropcap class="custom-class"]text[/dropcap]') == (
            '<span class="custom-class dropcap">text</span>'
        )

    def test_highlight(self):
        assert _render("[highlight]text[/highlight]") == '<span class=" highlight">text</span>'
        assert _render('[highlight class="custom-class"]text[/highlight]') == (
            '<span class="custom-class highlight">text</span>'
        )


@pytest.mark.integration
class TestImg:
    def test_defaults(self):
        html = _render('[img src="/abc.jpg" alt="Test image" /]')
        assert html == '<img src="/abc.jpg" class=" img" alt="Test image">'

    def test_custom_class(self):
        html = _render('[img src="/abc.jpg" class="custom-class" alt="Test image"/]')
        image = _select_one(html, "img.custom-class.img")
        assert image["src"] == "/abc.jpg"
        assert image["alt"] == "Test image"

    def test_body_as_source(self):
        assert _select_one(_render("[img]/pic.png[/img]"), "img")["src"] == "/pic.png"


@pytest.mark.integration
class TestItem:
    def test_class(self):
        html = _render('[item class="item-class-here"]Item body here[/item]')
        assert html == '<div class="item-class-here">Item body here</div>'

    def test_span(self):
        html = _render('[item class="item-class-here" type="s"]Item body here[/item]')
        assert html == '<span class="item-class-here">Item body here</span>'

    def test_style(self):
        html = _render('[item class="item-class-here" type="d" style="background-color:#F00"]Item body here[/item]')
        assert html == '<div class="item-class-here" style="background-color:#F00">Item body here</div>'


@pytest.mark.integration
class TestLink:
    def test_path(self):
        html = _render('[link path="node/1" class="link-class"]Label[/link]')
        assert html == f'<a href="{BASE_URL}node/1" class="link-class" title="Label">Label</a>'

    def test_title_and_style(self):
        html = _render('[link path="node/23" title="Google" class="link-class" style="background-color:#0FF;"] Label [/link]')
        assert html == (
            f'<a href="{BASE_URL}node/23" class="link-class" style="background-color:#0FF;" '
            'title="Google"> Label </a>'
        )

    def test_url_verbatim_and_wins_over_path(self):
        html = _render('[link url="https://example.org/x?a=1" path="node/1"]L[/link]')
        assert _select_one(html, "a")["href"] == "https://example.org/x?a=1"


@pytest.mark.integration
class TestQuote:
    def test_without_author(self):
        assert _render("[quote]This is by no one[/quote]") == '<span class=" quote"> This is by no one </span>'

    def test_with_author(self):
        html = _render('[quote class="test-quote" author="ryan"]This is by ryan[/quote]')
        assert html == (
            '<span class="test-quote quote"> <span class="quote-author">ryan wrote: </span> This is by ryan </span>'
        )
        assert _select_one(html, "span.quote > span.quote-author").get_text() == "ryan wrote: "


@pytest.mark.integration
class TestRandom:
    @pytest.mark.parametrize("text", ["[random/]", "[random][/random]", "[random /]"])
    def test_default_length(self, text):
        output = _render(text)
        assert len(output) == 8
        assert output.isalnum()

    def test_explicit_length(self):
        assert len(_render("[random length=10][/random]")) == 10

    def test_configured_default_length(self):
        config = default_config().with_tag(default_config().get("random").create_updated(defaults={"length": "5"}))
        assert len(_render("[random/]", config)) == 5


@pytest.mark.integration
class TestBlock:
    def test_section(self):
        html = _render('[block type="section" class="intro" id="top"]Hello[/block]')
        assert html == '<section class="intro" id="top">Hello</section>'


@pytest.mark.integration
class TestMalformedMarkup:
    def test_unbalanced_close(self):
        assert _render("[/highlight]text") == "[/highlight]text"

    def test_unknown_wrapper_keeps_inner_expansion(self):
        assert _render("[unknown][highlight]x[/highlight][/unknown]") == (
            '[unknown]<span class=" highlight">x</span>[/unknown]'
        )

    def test_unclosed_tag_body_still_renders(self):
        assert _render("[item]a[highlight]b[/highlight]") == '[item]a<span class=" highlight">b</span>'

    def test_stray_brackets_untouched(self):
        text = "array[0] = x[1]; [ not a tag ] and [/ nope]"
        assert _render(text) == text

    def test_surrounding_html_untouched(self):
        text = '<p class="intro">Hi [dropcap]T[/dropcap]here &amp; <br/></p>'
        assert _render(text) == '<p class="intro">Hi <span class=" dropcap">T</span>here &amp; <br/></p>'
