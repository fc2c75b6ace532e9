"""Unit tests for the shortcode scanner."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from shortcode2html.parsers.scanner import ShortcodeScanner, TagCloseToken, TagOpenToken, TextToken, tokenize


@pytest.mark.unit
class TestTokenize:
    """Test splitting text into tokens."""

    def test_plain_text(self):
        assert tokenize("just text") == [TextToken(text="just text", position=0)]

    def test_empty_input(self):
        assert tokenize("") == []

    def test_paired_tag(self):
        tokens = tokenize('a [link path="x"]b[/link] c')
        assert [type(t) for t in tokens] == [TextToken, TagOpenToken, TextToken, TagCloseToken, TextToken]
        open_token = tokens[1]
        assert open_token.name == "link"
        assert open_token.attrs == {"path": "x"}
        assert open_token.self_closing is False
        assert open_token.raw == '[link path="x"]'
        assert open_token.position == 2
        assert tokens[3].name == "link"
        assert tokens[3].raw == "[/link]"

    def test_self_closing(self):
        (token,) = tokenize("[random/]")
        assert isinstance(token, TagOpenToken)
        assert token.self_closing is True
        assert token.attrs == {}

    def test_self_closing_with_attributes_and_space(self):
        (token,) = tokenize('[img src="/abc.jpg" alt="Test image" /]')
        assert token.self_closing is True
        assert token.attrs == {"src": "/abc.jpg", "alt": "Test image"}

    def test_slash_inside_quotes_is_not_self_closing(self):
        (token,) = tokenize('[link path="a/"]')
        assert token.self_closing is False
        assert token.attrs == {"path": "a/"}

    def test_bracket_inside_quoted_value(self):
        tokens = tokenize('[quote author="a]b"]x[/quote]')
        assert tokens[0].attrs == {"author": "a]b"}
        assert tokens[1] == TextToken(text="x", position=20)

    def test_literal_brackets(self):
        for text in ["[", "]", "[]", "[ x]", "a[1", "[/]", "x [!] y", "[link"]:
            assert tokenize(text) == [TextToken(text=text, position=0)], text

    def test_name_must_end_at_boundary(self):
        # "[a=b]" does not start a tag
        assert tokenize("[a=b]") == [TextToken(text="[a=b]", position=0)]

    def test_unquoted_bracket_aborts_candidate(self):
        tokens = tokenize("[b [i]x[/i]")
        assert tokens[0] == TextToken(text="[b ", position=0)
        assert isinstance(tokens[1], TagOpenToken)
        assert tokens[1].name == "i"

    def test_unterminated_quote_ends_at_first_bracket(self):
        tokens = tokenize('[link title="oops]text[/link]')
        assert isinstance(tokens[0], TagOpenToken)
        assert tokens[0].attrs == {"title": "oops"}
        assert tokens[0].raw == '[link title="oops]'

    def test_unterminated_quote_does_not_swallow_next_tag(self):
        tokens = tokenize('He wrote [sic "oops and [highlight]x[/highlight] end')
        assert tokens[0] == TextToken(text='He wrote [sic "oops and ', position=0)
        assert tokens[1] == TagOpenToken(name="highlight", attrs={}, self_closing=False, raw="[highlight]", position=24)
        assert tokens[3] == TagCloseToken(name="highlight", raw="[/highlight]", position=36)

    def test_close_tag_allows_trailing_whitespace(self):
        tokens = tokenize("[/item ]")
        assert tokens == [TagCloseToken(name="item", raw="[/item ]", position=0)]

    def test_newlines_are_ordinary(self):
        tokens = tokenize("[item]\nline\n[/item]")
        assert tokens[1] == TextToken(text="\nline\n", position=6)

    def test_tag_names_with_hyphens(self):
        (token,) = tokenize("[my-tag/]")
        assert token.name == "my-tag"

    def test_scanner_instance(self):
        scanner = ShortcodeScanner()
        assert list(scanner.iter_tokens("x[a]")) == scanner.tokenize("x[a]")


@pytest.mark.unit
class TestScannerProperties:
    """Property-based checks of the scanner."""

    @given(st.text(max_size=200))
    def test_raw_concatenation_reproduces_input(self, text):
        assert "".join(token.raw for token in tokenize(text)) == text

    @given(st.text(alphabet=st.characters(exclude_characters="["), max_size=200))
    def test_text_without_brackets_is_one_token(self, text):
        tokens = tokenize(text)
        assert tokens == ([TextToken(text=text, position=0)] if text else [])
