# investor_quote/models/stock_snapshot.py

"""Stock snapshot model returned by the price extractor."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StockSnapshot:
    """A single price observation captured from the investor page."""

    price: str
    currency: str
    timestamp: str
    source: str
    change: str | None = None
    page_title: str = ""

    def to_dict(self) -> dict[str, str]:
        """Serialise to a plain dict, omitting ``change`` when absent."""
        data: dict[str, str] = {
            "price": self.price,
            "currency": self.currency,
            "timestamp": self.timestamp,
            "source": self.source,
        }
        if self.page_title:
            data["page_title"] = self.page_title
        if self.change is not None:
            data["change"] = self.change
        return data
