"""Reading the window size and checking fetched group data."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping

from .stocks import Stock

MAX_ATTEMPTS = 3


def fetch_number_of_days(
    max_n: int,
    min_n: int,
    prompt: Callable[[str], str] = input,
) -> int:
    """Ask for N within [min_n, max_n], allowing three attempts."""
    for attempt in range(1, MAX_ATTEMPTS + 1):
        answer = prompt(
            "\nEnter number of days N for pre and post announcement dates "
            f"(N must be between {min_n} and {max_n} ): "
        )
        try:
            n = int(answer.strip())
        except ValueError:
            n = None
        if n is not None and min_n <= n <= max_n:
            return n
        if attempt == MAX_ATTEMPTS:
            raise ValueError(
                f"N must be between {min_n} and {max_n}. Exiting Program"
            )
        print(
            f"N must be between {min_n} and {max_n}. Try again. "
            f"Remaining attempts = {MAX_ATTEMPTS - attempt}"
        )
    raise AssertionError("unreachable")


def verify_group_data(
    group: Mapping[str, Stock], tickers: Iterable[str], n: int
) -> list[str]:
    """Problems found: missing tickers and stocks without 2N+1 prices."""
    expected = 2 * n + 1
    problems: list[str] = []
    for ticker in tickers:
        stock = group.get(ticker)
        if stock is None:
            problems.append(f"Data not found for ticker {ticker}")
            continue
        size = len(stock.price_data)
        if size != expected:
            problems.append(f"{stock.ticker} size = {size}")
    return problems