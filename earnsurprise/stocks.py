"""A stock with its earnings announcement and its daily adjusted close prices."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Stock:
    """Earnings data and date-keyed prices for one ticker."""

    ticker: str = ""
    announcement_date: str = ""
    period_ending: str = ""
    estimated_eps: float = 0.0
    reported_eps: float = 0.0
    surprise_eps: float = 0.0
    surprise_percent: float = 0.0
    group: str = ""
    start_date: str = ""
    end_date: str = ""
    price_data: dict[str, float] = field(default_factory=dict)

    def add_price(self, date: str, price: float) -> None:
        """Record the price for a date, replacing any earlier price for it."""
        self.price_data[date] = float(price)

    def dates(self) -> list[str]:
        """Dates with a price, in chronological (lexicographic) order."""
        return sorted(self.price_data)

    def prices(self) -> list[float]:
        """Prices in the order of :meth:`dates`."""
        return [self.price_data[date] for date in self.dates()]

    def clear_prices(self) -> None:
        """Forget every recorded price."""
        self.price_data.clear()