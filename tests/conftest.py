# tests/conftest.py

"""Shared pytest fixtures for all investor_quote tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_screenshots(tmp_path: Path) -> Generator[Path, None, None]:
    """Keep screenshot artifacts out of the repo during tests."""
    target = tmp_path / "test-results"
    with patch(
        "investor_quote.config.settings.Settings.SCREENSHOTS_DIR", target
    ):
        yield target
