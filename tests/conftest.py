"""Pytest configuration and fixtures for razorgen tests."""

import pytest

from razorgen import Compiler, GenerationConfig


@pytest.fixture
def config():
    """Default generation config (escaping on, standalone, no debug)."""
    return GenerationConfig()


@pytest.fixture
def compiler(config):
    """Compiler bound to the default config."""
    return Compiler(config)


@pytest.fixture
def raw_compiler():
    """Compiler with HTML escaping disabled."""
    return Compiler(GenerationConfig(html_escape=False))


@pytest.fixture
def debug_config():
    """Debug config with a small multi-line template source."""
    return GenerationConfig(debug=True, source='<p class="a">\n  @model.name\n</p>')
