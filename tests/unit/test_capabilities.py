"""Unit tests for path resolution and random sources."""

import pytest

from shortcode2html import Capabilities, PathResolutionError, RenderContext, SeededRandomSource, SitePathResolver
from shortcode2html.capabilities import RandomSource, SystemRandomSource
from shortcode2html.constants import RANDOM_ALPHABET


@pytest.mark.unit
class TestSitePathResolver:
    """Test joining paths onto a site root."""

    def test_front_and_empty_resolve_to_base(self):
        resolve = SitePathResolver("https://example.com")
        assert resolve("<front>") == "https://example.com/"
        assert resolve("") == "https://example.com/"

    def test_relative_and_rooted_paths(self):
        resolve = SitePathResolver("https://example.com/site/")
        assert resolve("node/1") == "https://example.com/site/node/1"
        assert resolve("/node/1") == "https://example.com/site/node/1"

    def test_absolute_urls_verbatim(self):
        resolve = SitePathResolver("/")
        assert resolve("http://www.google.com") == "http://www.google.com"
        assert resolve("mailto:me@example.com") == "mailto:me@example.com"
        assert resolve("//cdn.example.com/a.js") == "//cdn.example.com/a.js"

    def test_default_base(self):
        assert SitePathResolver()("about") == "/about"

    def test_whitespace_inside_path_rejected(self):
        with pytest.raises(PathResolutionError) as exc_info:
            SitePathResolver()("bad path")
        assert exc_info.value.path == "bad path"


@pytest.mark.unit
class TestRandomSources:
    """Test random string generation."""

    @pytest.mark.parametrize("source", [SystemRandomSource(), SeededRandomSource(3)])
    def test_length_and_alphabet(self, source):
        value = source.next_string(40)
        assert len(value) == 40
        assert set(value) <= set(RANDOM_ALPHABET)
        assert isinstance(source, RandomSource)

    def test_seeded_is_reproducible(self):
        assert SeededRandomSource(7).next_string(16) == SeededRandomSource(7).next_string(16)

    def test_zero_length(self):
        assert SeededRandomSource(1).next_string(0) == ""


@pytest.mark.unit
class TestRenderContext:
    """Test capability access through the render context."""

    def test_resolver_failure_falls_back_to_raw_path(self, registry, caplog):
        def broken(path):
            raise RuntimeError("resolver down")

        context = RenderContext(registry=registry, capabilities=Capabilities(resolve_path=broken))
        with caplog.at_level("WARNING", logger="shortcode2html"):
            assert context.resolve_path("node/1") == "node/1"
        assert "resolver down" in caplog.text

    def test_for_site_with_seed(self):
        caps = Capabilities.for_site("https://example.com", seed=5)
        assert caps.resolve_path("x") == "https://example.com/x"
        assert caps.random_source.next_string(8) == SeededRandomSource(5).next_string(8)

    def test_default_capabilities(self):
        caps = Capabilities()
        assert caps.resolve_path("<front>") == "/"
        assert isinstance(caps.random_source, SystemRandomSource)
