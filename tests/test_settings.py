# tests/test_settings.py

"""Tests for the Settings configuration class."""

import json
import re
import unittest
from pathlib import Path
from unittest.mock import patch

from investor_quote.config import settings as settings_mod
from investor_quote.config.settings import Settings


class TestSettings(unittest.TestCase):
    """Verify Settings constants and the selector file."""

    def test_investor_url_matches_url_pattern(self) -> None:
        self.assertRegex(Settings.INVESTOR_URL, Settings.URL_PATTERN)

    def test_currency_is_usd(self) -> None:
        self.assertEqual(Settings.CURRENCY, "USD")

    def test_timeouts(self) -> None:
        """Visibility and change lookups use their fixed budgets."""
        self.assertEqual(Settings.VISIBILITY_TIMEOUT_MS, 2000)
        self.assertEqual(Settings.CHANGE_TIMEOUT_MS, 1000)
        self.assertGreater(Settings.NAVIGATION_TIMEOUT_MS, 0)

    def test_path_constants_are_paths(self) -> None:
        self.assertIsInstance(Settings.BASE_DIR, Path)
        self.assertIsInstance(Settings.SELECTORS_PATH, Path)
        self.assertIsInstance(Settings.LOGS_DIR, Path)

    def test_selectors_path_exists(self) -> None:
        self.assertTrue(Settings.SELECTORS_PATH.exists())

    def test_selector_file_structure(self) -> None:
        """selectors.json lists tier-1 candidates and a change locator."""
        with open(Settings.SELECTORS_PATH, encoding="utf-8") as f:
            data = json.load(f)
        self.assertEqual(len(data["stock_price"]), 7)
        self.assertEqual(
            data["stock_price"][0], '[data-testid="stock-price"]'
        )
        self.assertEqual(data["change"], "text=/[+-]\\d+\\.\\d+/")

    def test_url_pattern_compiles(self) -> None:
        re.compile(Settings.URL_PATTERN)


class TestEnvFlag(unittest.TestCase):
    """The boolean environment helper behind HEADLESS."""

    def test_default_when_unset(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            self.assertTrue(settings_mod._env_flag("X_FLAG", True))
            self.assertFalse(settings_mod._env_flag("X_FLAG", False))

    def test_truthy_and_falsy_values(self) -> None:
        for raw, expected in (
            ("1", True), ("true", True), ("YES", True),
            ("0", False), ("false", False), ("off", False),
        ):
            with self.subTest(raw=raw):
                with patch.dict("os.environ", {"X_FLAG": raw}):
                    self.assertEqual(
                        settings_mod._env_flag("X_FLAG", not expected),
                        expected,
                    )


if __name__ == "__main__":
    unittest.main()
