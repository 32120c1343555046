"""Pytest configuration and shared fixtures for the clashview test suite.

This module provides shared fixtures and test configuration that are used
across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from clashview.style import Stylesheet

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def style() -> Stylesheet:
    """Provide the built-in truecolor stylesheet."""
    return Stylesheet.default()


@pytest.fixture
def plain_style() -> Stylesheet:
    """Provide a stylesheet that leaves text untouched."""
    return Stylesheet.plain()


@pytest.fixture
def isolated_config_env(tmp_path, monkeypatch):
    """Run in an empty directory with no config env var and an empty home.

    Yields
    ------
    Path
        The working directory

    """
    work = tmp_path / "work"
    home = tmp_path / "home"
    work.mkdir()
    home.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.delenv("CLASHVIEW_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    yield work
