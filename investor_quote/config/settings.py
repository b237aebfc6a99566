# investor_quote/config/settings.py

"""Central configuration for the investor_quote tool."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag such as ``1``/``true``/``no`` from the env."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Central configuration for the investor_quote tool."""

    # --- Target ---
    INVESTOR_URL: str = "https://www.microsoft.com/en-us/investor/default"
    URL_PATTERN: str = r".*microsoft\.com.*investor.*"
    TITLE_KEYWORD: str = "microsoft"
    CURRENCY: str = "USD"

    # --- Timeouts (milliseconds) ---
    VISIBILITY_TIMEOUT_MS: int = 2000   # Per tier-1 candidate
    CHANGE_TIMEOUT_MS: int = 1000       # Change-value lookup
    NAVIGATION_TIMEOUT_MS: int = 30000  # page.goto + networkidle
    SLOW_PAGE_MS: float = 10000.0       # Page check "slow" threshold

    # --- Browser ---
    HEADLESS: bool = _env_flag("INVESTOR_QUOTE_HEADLESS", True)
    BROWSER_ARGS: list[str] = [
        "--no-sandbox",
        "--disable-dev-shm-usage",
    ]
    USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/131.0.0.0 Safari/537.36"
    )

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    SELECTORS_PATH: Path = (
        BASE_DIR / "investor_quote" / "config" / "selectors.json"
    )
    SCREENSHOTS_DIR: Path = BASE_DIR / "test-results"
    LOGS_DIR: Path = BASE_DIR / "logs"
