# investor_quote/extractors/price_extractor.py

"""Ordered fallback chain that locates the displayed share price."""

import json
import logging
from collections.abc import Awaitable, Callable, Sequence
from datetime import datetime, timezone
from typing import Any

from playwright.async_api import Error as PlaywrightError, Page

from investor_quote.config.settings import Settings
from investor_quote.extractors.patterns import (
    match_currency_number,
    match_signed_decimal,
    match_stock_price_phrase,
    match_ticker_proximity,
)
from investor_quote.models.stock_snapshot import StockSnapshot

Tier = Callable[[], Awaitable[str | None]]


class PriceNotFound(LookupError):
    """Raised when every extraction tier comes up empty."""

    def __init__(self) -> None:
        super().__init__("Stock price not found on the page")


async def first_present(tiers: Sequence[Tier]) -> str | None:
    """Await each tier in order and return the first non-None result."""
    for tier in tiers:
        result = await tier()
        if result is not None:
            return result
    return None


class PriceExtractor:
    """Extracts a validated price string from a loaded Playwright page.

    Tiers, in order (first success wins, each tried once):

    1. Targeted locators from ``selectors.json``.
    2. "stock price" phrase in the full page markup.
    3. "MSFT"/"Microsoft" proximity in the visible body text.
    """

    def __init__(self, selectors: dict[str, Any] | None = None) -> None:
        self.logger = logging.getLogger("investor_quote.extractor")
        self.settings = Settings()
        self.selectors: dict[str, Any] = (
            selectors if selectors is not None else self._load_selectors()
        )

    def _load_selectors(self) -> dict[str, Any]:
        """Load locator definitions from selectors.json."""
        with open(self.settings.SELECTORS_PATH, encoding="utf-8") as f:
            result: dict[str, Any] = json.load(f)
        return result

    @property
    def price_selectors(self) -> list[str]:
        return list(self.selectors.get("stock_price", []))

    # --- Tier 1 -------------------------------------------------------------

    async def _read_visible_text(
        self, page: Page, selector: str, timeout_ms: int,
    ) -> str | None:
        """Return the text of the first match once visible, else None."""
        element = page.locator(selector).first
        try:
            await element.wait_for(state="visible", timeout=timeout_ms)
            return await element.text_content()
        except PlaywrightError as exc:
            self.logger.debug(
                "Locator %s unresolved: %s", selector, exc,
            )
            return None

    async def _from_selectors(self, page: Page) -> str | None:
        for selector in self.price_selectors:
            text = await self._read_visible_text(
                page, selector, self.settings.VISIBILITY_TIMEOUT_MS,
            )
            price = match_currency_number(text)
            if price is not None:
                self.logger.info(
                    "Price %s found via locator %s", price, selector,
                )
                return price
        return None

    # --- Tier 2 -------------------------------------------------------------

    async def _from_page_content(self, page: Page) -> str | None:
        try:
            markup = await page.content()
        except PlaywrightError as exc:
            self.logger.debug("Page content unavailable: %s", exc)
            return None
        price = match_stock_price_phrase(markup)
        if price is not None:
            self.logger.info("Price %s found in page content", price)
        return price

    # --- Tier 3 -------------------------------------------------------------

    async def _from_ticker_proximity(self, page: Page) -> str | None:
        body = self.selectors.get("body", "body")
        try:
            text = await page.locator(body).inner_text()
        except PlaywrightError as exc:
            self.logger.debug("Body text unavailable: %s", exc)
            return None
        price = match_ticker_proximity(text)
        if price is not None:
            self.logger.info("Price %s found near ticker text", price)
        return price

    # --- Public API ---------------------------------------------------------

    async def extract_price(self, page: Page) -> str:
        """Return the displayed price without a currency symbol.

        Raises:
            PriceNotFound: if none of the three tiers produced a match.
        """
        price = await first_present([
            lambda: self._from_selectors(page),
            lambda: self._from_page_content(page),
            lambda: self._from_ticker_proximity(page),
        ])
        if price is None:
            self.logger.warning("No tier produced a stock price")
            raise PriceNotFound()
        return price

    async def extract_change(self, page: Page) -> str | None:
        """Best-effort lookup of the signed change value; never raises."""
        selector = self.selectors.get("change")
        if not selector:
            return None
        text = await self._read_visible_text(
            page, selector, self.settings.CHANGE_TIMEOUT_MS,
        )
        if match_signed_decimal(text) is None:
            self.logger.debug("Change value not found")
            return None
        return text.strip() if text is not None else None

    async def extract_snapshot(
        self,
        page: Page,
        source: str = Settings.INVESTOR_URL,
        page_title: str = "",
    ) -> StockSnapshot:
        """Extract the price and enrich it into a :class:`StockSnapshot`."""
        price = await self.extract_price(page)
        timestamp = datetime.now(timezone.utc).isoformat()
        change = await self.extract_change(page)
        return StockSnapshot(
            price=price,
            currency=self.settings.CURRENCY,
            timestamp=timestamp,
            source=source,
            change=change,
            page_title=page_title,
        )
