# investor_quote/extractors/patterns.py

"""Regex heuristics for pulling a USD share price out of page text.

Every helper is pure and returns ``None`` when nothing usable is found,
so the extractor can chain them without exception handling.
"""

import re
from decimal import Decimal, InvalidOperation

# Tier 1: first currency-ish number inside a targeted element
CURRENCY_NUMBER_RE = re.compile(r"\$?\d+\.?\d*")

# Tier 2: "stock price" phrase followed eventually by a 2-decimal number
STOCK_PRICE_PHRASE_RE = re.compile(
    r"stock price.*?\$?(\d+\.\d{2})", re.IGNORECASE
)

# Tier 3: ticker or company name followed eventually by a 2-3 digit price
TICKER_PROXIMITY_RE = re.compile(
    r"(?:MSFT|Microsoft).*?\$?(\d{2,3}\.\d{2})", re.IGNORECASE
)

# Signed change value, e.g. "+1.25" or "-0.87"
SIGNED_DECIMAL_RE = re.compile(r"[+-]\d+\.\d+")

VALID_PRICE_RE = re.compile(r"^\d+(\.\d{1,2})?$")


def strip_currency(text: str) -> str:
    """Remove the dollar sign and surrounding whitespace."""
    return text.replace("$", "").strip()


def is_valid_price(value: str | None) -> bool:
    """Return True for an unsigned decimal with <= 2 places that is > 0."""
    if not value or not VALID_PRICE_RE.match(value):
        return False
    try:
        return Decimal(value) > 0
    except InvalidOperation:
        return False


def _validated(candidate: str | None) -> str | None:
    if candidate is None:
        return None
    return candidate if is_valid_price(candidate) else None


def match_currency_number(text: str | None) -> str | None:
    """Extract the first price-like number from an element's text.

    ``"Current Price: $123.45"`` gives ``"123.45"``. A bare trailing
    dot (``"$412."``) is dropped. Matches with more than two decimal
    places are rejected.
    """
    if not text:
        return None
    match = CURRENCY_NUMBER_RE.search(text)
    if not match:
        return None
    return _validated(strip_currency(match.group(0)).rstrip("."))


def match_stock_price_phrase(markup: str | None) -> str | None:
    """Find a price following the phrase "stock price" in page markup."""
    if not markup:
        return None
    match = STOCK_PRICE_PHRASE_RE.search(markup)
    return _validated(match.group(1)) if match else None


def match_ticker_proximity(text: str | None) -> str | None:
    """Find a price following "MSFT" or "Microsoft" in body text."""
    if not text:
        return None
    match = TICKER_PROXIMITY_RE.search(text)
    return _validated(match.group(1)) if match else None


def match_signed_decimal(text: str | None) -> str | None:
    """Return the raw signed decimal text found in *text*, if any."""
    if not text:
        return None
    match = SIGNED_DECIMAL_RE.search(text)
    return match.group(0) if match else None
