"""Pytest configuration and shared fixtures for the shortcode2html test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from shortcode2html import Capabilities, RenderContext, SeededRandomSource, SitePathResolver, default_config
from shortcode2html.registry import ShortcodeRegistry, clear_registry_cache

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

BASE_URL = "http://example.test/"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def _fresh_registry_cache():
    """Keep cached registries from leaking between tests."""
    clear_registry_cache()
    yield
    clear_registry_cache()


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def capabilities() -> Capabilities:
    """Capabilities with a fixed site root and a seeded random source."""
    return Capabilities(resolve_path=SitePathResolver(BASE_URL), random_source=SeededRandomSource(1234))


@pytest.fixture
def registry() -> ShortcodeRegistry:
    return ShortcodeRegistry(default_config())


@pytest.fixture
def context(registry, capabilities) -> RenderContext:
    return RenderContext(registry=registry, capabilities=capabilities)
