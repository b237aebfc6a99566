# investor_quote/pages/investor_page.py

"""Page model for the Microsoft investor relations page."""

import logging
from pathlib import Path

from playwright.async_api import Page

from investor_quote.config.settings import Settings
from investor_quote.extractors.price_extractor import PriceExtractor
from investor_quote.models.stock_snapshot import StockSnapshot

logger = logging.getLogger("investor_quote.page")


class MicrosoftInvestorPage:
    """Navigation and price lookups against the investor page."""

    def __init__(
        self,
        page: Page,
        extractor: PriceExtractor | None = None,
    ) -> None:
        self.page = page
        self.url = Settings.INVESTOR_URL
        self.extractor = extractor or PriceExtractor()

    async def goto(self) -> None:
        """Open the investor page and wait for the network to settle."""
        logger.info("Navigating to %s", self.url)
        await self.page.goto(
            self.url, timeout=Settings.NAVIGATION_TIMEOUT_MS,
        )
        await self.page.wait_for_load_state(
            "networkidle", timeout=Settings.NAVIGATION_TIMEOUT_MS,
        )

    async def title(self) -> str:
        return await self.page.title()

    async def screenshot(self, path: Path) -> Path:
        """Capture a full-page screenshot to *path*."""
        await self.page.screenshot(path=str(path), full_page=True)
        logger.info("Screenshot written to %s", path)
        return path

    async def get_stock_price(self) -> str:
        return await self.extractor.extract_price(self.page)

    async def get_stock_price_details(self) -> StockSnapshot:
        return await self.extractor.extract_snapshot(
            self.page, source=self.url,
        )

    async def capture_stock_info(self) -> StockSnapshot:
        """Navigate, then return a snapshot including the page title."""
        await self.goto()
        return await self.read_stock_info()

    async def read_stock_info(self) -> StockSnapshot:
        """Snapshot the already-loaded page, including its title."""
        page_title = await self.title()
        return await self.extractor.extract_snapshot(
            self.page, source=self.url, page_title=page_title,
        )
