# investor_quote/browser/session.py

"""Async Playwright session that owns the browser lifecycle."""

import logging
from collections.abc import Awaitable, Callable
from types import TracebackType

from playwright.async_api import (
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
    async_playwright,
)

from investor_quote.config.settings import Settings

logger = logging.getLogger("investor_quote.browser")


class BrowserSession:
    """Launch Chromium and hand out a single fresh page.

    Usage::

        async with BrowserSession() as page:
            await MicrosoftInvestorPage(page).capture_stock_info()
    """

    def __init__(self, headless: bool | None = None) -> None:
        self.headless = (
            Settings.HEADLESS if headless is None else headless
        )
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    async def start(self) -> Page:
        """Start Playwright, launch the browser and open a page."""
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=self.headless,
                args=Settings.BROWSER_ARGS,
            )
            self._context = await self._browser.new_context(
                user_agent=Settings.USER_AGENT,
            )
            self._page = await self._context.new_page()
        except Exception:
            logger.error("Failed to start browser session", exc_info=True)
            await self.close()
            raise
        logger.info("Browser session started (headless=%s)", self.headless)
        return self._page

    async def close(self) -> None:
        """Tear down context, browser and Playwright in order.

        Every step runs even if an earlier one fails; a crashed browser
        commonly makes ``context.close()`` raise.
        """
        steps: list[tuple[str, Callable[[], Awaitable[None]] | None]] = [
            ("context", self._context.close if self._context else None),
            ("browser", self._browser.close if self._browser else None),
            (
                "playwright",
                self._playwright.stop if self._playwright else None,
            ),
        ]
        for name, step in steps:
            if step is None:
                continue
            try:
                await step()
            except PlaywrightError as exc:
                logger.debug("Closing %s failed: %s", name, exc)
        self._page = None
        self._context = None
        self._browser = None
        self._playwright = None
        logger.info("Browser session closed")

    async def __aenter__(self) -> Page:
        return await self.start()

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
