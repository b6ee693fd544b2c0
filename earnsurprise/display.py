"""Text reports for a single stock and for per-day group metrics."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .calculation import cumulative_returns, daily_returns
from .stocks import Stock


def format_stock(stock: Stock) -> str:
    """Price, return and earnings report for one stock."""
    prices = stock.prices()
    returns = [0.0, *daily_returns(prices)]
    cumulative = [0.0, *cumulative_returns(prices)]

    lines = [
        "",
        f"Displaying Data for Stock {stock.ticker}",
        "",
        "Price and Return Data :",
        f"{'Date':<15}{'Price':<15}{'Return':<15}{'Cumulative Return':<15}",
        "",
    ]
    for date, price, ret, cum in zip(stock.dates(), prices, returns, cumulative):
        lines.append(f"{date:<15}{price:<15.3f}{ret:<15.3f}{cum:<15.3f}")

    lines += [
        "",
        f"Stock {stock.ticker} belongs to group {stock.group}",
        "",
        f"Earnings Announcement Date: {stock.announcement_date}",
        "",
        f"Period Ending: {stock.period_ending}",
        "",
        f"Estimated Earnings: {stock.estimated_eps:.3f}",
        "",
        f"Reported Earnings: {stock.reported_eps:.3f}",
        "",
        f"Surprise: {stock.surprise_eps:.3f}",
        "",
        f"Surprise Percent: {stock.surprise_percent:.3f}%",
    ]
    return "\n".join(lines) + "\n"


def find_and_format_stock(
    ticker: str,
    beat: Mapping[str, Stock],
    meet: Mapping[str, Stock],
    miss: Mapping[str, Stock],
) -> str:
    """Report for the ticker from the first group holding it, or a not-found note."""
    for group in (beat, meet, miss):
        stock = group.get(ticker)
        if stock is not None:
            return format_stock(stock)
    return f"Ticker {ticker} not found in any group.\n"


def format_metrics(
    aar: Sequence[float],
    caar: Sequence[float],
    aar_sd: Sequence[float],
    caar_sd: Sequence[float],
    n: int,
) -> str:
    """One line per day with AAR, CAAR and their standard deviations."""
    lines = [
        f"Day Number: {i - n + 1}\tAAR: {a:g}\tCAAR: {c:g}"
        f"\tAAR_SD: {a_sd:g}\tCAAR_SD: {c_sd:g}"
        for i, (a, c, a_sd, c_sd) in enumerate(zip(aar, caar, aar_sd, caar_sd))
    ]
    return "".join(line + "\n" for line in lines)