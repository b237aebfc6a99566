# investor_quote/services/page_checker.py

"""Sanity checks that the investor page loaded and is the right page."""

import logging
import re
import time
from dataclasses import dataclass

from playwright.async_api import Error as PlaywrightError

from investor_quote.config.settings import Settings
from investor_quote.pages.investor_page import MicrosoftInvestorPage

logger = logging.getLogger("investor_quote.health")


@dataclass
class PageCheckResult:
    """Outcome of a single investor page check."""

    status: str  # "ok", "slow", "down"
    latency_ms: float
    title: str
    message: str


async def check_investor_page(
    investor_page: MicrosoftInvestorPage,
) -> PageCheckResult:
    """Navigate and verify the landed URL and title."""
    start = time.monotonic()
    try:
        await investor_page.goto()
        title = await investor_page.title()
    except PlaywrightError as exc:
        elapsed_ms = (time.monotonic() - start) * 1000
        logger.error("Investor page unreachable: %s", exc, exc_info=True)
        return PageCheckResult(
            status="down",
            latency_ms=elapsed_ms,
            title="",
            message=str(exc)[:80],
        )
    elapsed_ms = (time.monotonic() - start) * 1000
    landed_url = investor_page.page.url

    if not re.match(Settings.URL_PATTERN, landed_url):
        result = PageCheckResult(
            status="down",
            latency_ms=elapsed_ms,
            title=title,
            message=f"Unexpected URL: {landed_url}",
        )
    elif Settings.TITLE_KEYWORD not in title.lower():
        result = PageCheckResult(
            status="down",
            latency_ms=elapsed_ms,
            title=title,
            message=f"Title lacks '{Settings.TITLE_KEYWORD}'",
        )
    elif elapsed_ms > Settings.SLOW_PAGE_MS:
        result = PageCheckResult(
            status="slow",
            latency_ms=elapsed_ms,
            title=title,
            message="High latency",
        )
    else:
        result = PageCheckResult(
            status="ok",
            latency_ms=elapsed_ms,
            title=title,
            message="",
        )

    logger.info(
        "Page check: %s (%.0fms) %s",
        result.status,
        result.latency_ms,
        result.message,
    )
    return result
