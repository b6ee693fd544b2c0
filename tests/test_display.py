import pytest

from earnsurprise.calculation import cumulative_returns, daily_returns
from earnsurprise.display import find_and_format_stock, format_metrics, format_stock
from earnsurprise.stocks import Stock


@pytest.fixture
def stock():
    s = Stock(
        ticker="ABC",
        announcement_date="2024-01-15",
        period_ending="2023-12-31",
        estimated_eps=1.25,
        reported_eps=1.5,
        surprise_eps=0.25,
        surprise_percent=20.0,
        group="Beat",
    )
    s.add_price("2024-01-03", 120.0)
    s.add_price("2024-01-01", 100.0)
    s.add_price("2024-01-02", 110.0)
    return s


def test_format_stock_rows_in_date_order(stock):
    text = format_stock(stock)
    rows = [line for line in text.splitlines() if line.startswith("2024-")]
    assert [row.split()[0] for row in rows] == ["2024-01-01", "2024-01-02", "2024-01-03"]


def test_format_stock_first_row_has_zero_returns(stock):
    text = format_stock(stock)
    first = next(line for line in text.splitlines() if line.startswith("2024-01-01"))
    assert first.split() == ["2024-01-01", "100.000", "0.000", "0.000"]


def test_format_stock_returns_match_calculation(stock):
    text = format_stock(stock)
    rows = [line.split() for line in text.splitlines() if line.startswith("2024-")]
    rets = daily_returns(stock.prices())
    cums = cumulative_returns(stock.prices())
    assert [row[2] for row in rows[1:]] == [f"{r:.3f}" for r in rets]
    assert [row[3] for row in rows[1:]] == [f"{c:.3f}" for c in cums]


def test_format_stock_earnings_lines(stock):
    text = format_stock(stock)
    assert "Stock ABC belongs to group Beat" in text
    assert "Earnings Announcement Date: 2024-01-15" in text
    assert "Period Ending: 2023-12-31" in text
    assert "Surprise Percent: 20.000%" in text


def test_format_stock_without_prices():
    text = format_stock(Stock(ticker="ZZZ"))
    assert "Displaying Data for Stock ZZZ" in text
    assert not any(line[:1].isdigit() for line in text.splitlines())


def test_find_searches_groups_in_order(stock):
    other = Stock(ticker="ABC", group="Meet")
    text = find_and_format_stock("ABC", {}, {"ABC": other}, {"ABC": stock})
    assert "belongs to group Meet" in text


def test_find_in_miss_group(stock):
    text = find_and_format_stock("ABC", {}, {}, {"ABC": stock})
    assert "belongs to group Beat" in text


def test_find_missing_ticker():
    assert find_and_format_stock("NOPE", {}, {}, {}) == "Ticker NOPE not found in any group.\n"


def test_format_metrics_day_numbers():
    text = format_metrics([0.5, 0.25, 1.0], [0.5, 0.75, 1.75], [1, 2, 3], [4, 5, 6], 1)
    lines = text.splitlines()
    assert len(lines) == 3
    assert [line.split("\t")[0] for line in lines] == [
        "Day Number: 0",
        "Day Number: 1",
        "Day Number: 2",
    ]
    assert "CAAR: 0.75" in lines[1]
    assert "AAR_SD: 3" in lines[2]


def test_format_metrics_empty():
    assert format_metrics([], [], [], [], 30) == ""