"""Shared fixtures for corchetes tests."""

from __future__ import annotations

import pytest

from corchetes import ShortcodeParser, reset_shortcode_config


@pytest.fixture
def parser() -> ShortcodeParser:
    """Fresh parser with an empty registry."""
    return ShortcodeParser()


@pytest.fixture(autouse=True)
def _reset_config():
    """Keep config changes from leaking between tests."""
    yield
    reset_shortcode_config()
