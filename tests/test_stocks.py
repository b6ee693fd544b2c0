from earnsurprise.stocks import Stock


def test_add_price_keeps_dates_sorted():
    stock = Stock(ticker="AAA")
    stock.add_price("2024-01-03", 12.0)
    stock.add_price("2024-01-01", 10.0)
    stock.add_price("2024-01-02", 11.0)
    assert stock.dates() == ["2024-01-01", "2024-01-02", "2024-01-03"]
    assert stock.prices() == [10.0, 11.0, 12.0]


def test_add_price_replaces_existing_date():
    stock = Stock()
    stock.add_price("2024-01-01", 10.0)
    stock.add_price("2024-01-01", 15.0)
    assert stock.dates() == ["2024-01-01"]
    assert stock.prices() == [15.0]


def test_dates_and_prices_have_same_length():
    stock = Stock()
    for day in range(1, 10):
        stock.add_price(f"2024-02-0{day}", float(day))
    assert len(stock.dates()) == len(stock.prices()) == len(stock.price_data)


def test_clear_prices():
    stock = Stock(ticker="BBB")
    stock.add_price("2024-01-01", 1.0)
    stock.clear_prices()
    assert stock.dates() == []
    assert stock.prices() == []
    assert stock.ticker == "BBB"


def test_defaults_are_zero():
    stock = Stock()
    assert (stock.estimated_eps, stock.reported_eps, stock.surprise_eps,
            stock.surprise_percent) == (0.0, 0.0, 0.0, 0.0)