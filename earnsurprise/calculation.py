"""Returns, abnormal returns and bootstrapped AAR/CAAR for groups of stocks."""

from __future__ import annotations

import math
import random
from collections.abc import Mapping, Sequence
from itertools import accumulate

from .stocks import Stock

Vector = list[float]
Matrix = list[Vector]


def _check_sizes(lhs: Sequence[float], rhs: Sequence[float], op: str) -> None:
    if len(lhs) != len(rhs):
        raise ValueError(f"Vector sizes must match for {op}.")


def add_vectors(lhs: Sequence[float], rhs: Sequence[float]) -> Vector:
    """Element-wise sum of two vectors of equal length."""
    _check_sizes(lhs, rhs, "addition")
    return [a + b for a, b in zip(lhs, rhs)]


def subtract_vectors(lhs: Sequence[float], rhs: Sequence[float]) -> Vector:
    """Element-wise difference of two vectors of equal length."""
    _check_sizes(lhs, rhs, "subtraction")
    return [a - b for a, b in zip(lhs, rhs)]


def daily_returns(prices: Sequence[float]) -> Vector:
    """Log returns between consecutive prices."""
    return [math.log(cur / prev) for prev, cur in zip(prices, prices[1:])]


def cumulative_returns(prices: Sequence[float]) -> Vector:
    """Running sum of the daily log returns."""
    return list(accumulate(daily_returns(prices)))


def abnormal_returns(
    stock_prices: Sequence[float], market_prices: Sequence[float]
) -> Vector:
    """Stock daily returns minus market daily returns."""
    return subtract_vectors(daily_returns(stock_prices), daily_returns(market_prices))


def average_abnormal_returns(matrix: Sequence[Sequence[float]]) -> Vector:
    """Column-wise mean of equally long rows; empty input gives an empty vector."""
    if not matrix:
        return []
    num_days = len(matrix[0])
    total = [0.0] * num_days
    for row in matrix:
        if len(row) != num_days:
            raise ValueError("Row size mismatch in abnormal returns.")
        total = add_vectors(total, row)
    return [value / len(matrix) for value in total]


def cumulative_sum(aar: Sequence[float]) -> Vector:
    """Running sum of a vector (CAAR from AAR)."""
    return list(accumulate(aar))


def std_per_day(matrix: Sequence[Sequence[float]]) -> Vector:
    """Sample standard deviation of each column; NaN when there is one row."""
    if not matrix:
        return []
    num_days = len(matrix[0])
    if any(len(row) != num_days for row in matrix):
        raise ValueError("Row size mismatch in data matrix.")
    count = len(matrix)
    result: Vector = []
    for column in zip(*matrix):
        mean = sum(column) / count
        sq_diff = sum((value - mean) ** 2 for value in column)
        result.append(math.sqrt(sq_diff / (count - 1)) if count > 1 else math.nan)
    return result


def market_prices(ticker: str, group: Mapping[str, Stock], benchmark: Stock) -> Vector:
    """Benchmark prices on the dates for which the ticker has prices."""
    try:
        stock = group[ticker]
    except KeyError:
        raise KeyError(f"Ticker {ticker} not found in the group.") from None
    bench = benchmark.price_data
    return [bench[date] for date in stock.dates() if date in bench]


class Bootstrap:
    """Repeated random sampling of a group to estimate AAR and CAAR."""

    def __init__(
        self,
        num_samples: int,
        sample_size: int = 30,
        rng: random.Random | None = None,
    ) -> None:
        self.num_samples = num_samples
        self.sample_size = sample_size
        self.rng = rng if rng is not None else random.Random()
        self.aar: Vector = []
        self.caar: Vector = []
        self.aar_matrix: Matrix = []
        self.caar_matrix: Matrix = []

    def clear(self) -> None:
        """Drop all results from a previous run."""
        self.aar = []
        self.caar = []
        self.aar_matrix = []
        self.caar_matrix = []

    def run(self, group: Mapping[str, Stock], benchmark: Stock) -> None:
        """Draw samples from the group and average their abnormal returns."""
        self.clear()
        print(f"Work in Progress - Running {self.num_samples} simulations...")
        if len(group) < self.sample_size:
            raise ValueError(
                f"Group has {len(group)} stocks, fewer than the sample size "
                f"{self.sample_size}."
            )
        for _ in range(self.num_samples):
            tickers = list(group)
            self.rng.shuffle(tickers)
            sample: Matrix = []
            for ticker in tickers[: self.sample_size]:
                stock_prices = group[ticker].prices()
                bench_prices = market_prices(ticker, group, benchmark)
                if len(stock_prices) != len(bench_prices):
                    continue
                sample.append(abnormal_returns(stock_prices, bench_prices))
            sample_aar = average_abnormal_returns(sample)
            self.aar_matrix.append(sample_aar)
            self.caar_matrix.append(cumulative_sum(sample_aar))
        self.aar = average_abnormal_returns(self.aar_matrix)
        self.caar = cumulative_sum(self.aar)

    def summarize(self) -> str:
        """Table of AAR, CAAR and their standard deviations per day."""
        aar_std = std_per_day(self.aar_matrix)
        caar_std = std_per_day(self.caar_matrix)
        lines = [
            "",
            "Detailed Final Metrics:",
            "",
            f"{'Day':<10}{'AAR':<15}{'AAR STD':<15}{'CAAR':<15}{'CAAR STD':<15}",
            "",
        ]
        half = len(self.aar) // 2
        for i, (aar, a_sd, caar, c_sd) in enumerate(
            zip(self.aar, aar_std, self.caar, caar_std)
        ):
            lines.append(
                f"{i - half + 1:<10}{aar:<15.5f}{a_sd:<15.5f}{caar:<15.5f}{c_sd:<15.5f}"
            )
        return "\n".join(lines) + "\n"