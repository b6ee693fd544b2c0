# earnsurprise

Tools for an earnings-surprise event study. Stocks are sorted into *beat*,
*meet* and *miss* groups by their earnings surprise. For each group the
package computes abnormal returns against a benchmark (for example IWV),
then the average abnormal return (AAR) and the cumulative AAR (CAAR). It
bootstraps these figures over random samples of a group and can plot the
three groups' CAAR with gnuplot.

## Install

```
pip install .
```

The package has no third-party dependencies. Plotting needs the `gnuplot`
program on the `PATH`.

## Modules

### `earnsurprise.stocks`

`Stock` is a dataclass with a ticker, announcement date, period ending,
estimated/reported/surprise EPS, surprise percent, group name, start and end
dates, and `price_data`, a dict of prices keyed by date string.

- `add_price(date, price)` records a price, replacing any earlier one for
  that date.
- `dates()` returns the dates in sorted order; `prices()` returns the prices
  in that same order.
- `clear_prices()` removes every price.

### `earnsurprise.calculation`

- `add_vectors` and `subtract_vectors` work element by element and raise
  `ValueError` when the lengths differ.
- `daily_returns(prices)` gives log returns between consecutive prices;
  `cumulative_returns(prices)` gives their running sum.
- `abnormal_returns(stock_prices, market_prices)` is stock returns minus
  market returns.
- `average_abnormal_returns(matrix)` is the column mean of equally long rows
  (`ValueError` on a length mismatch, empty list for an empty matrix).
- `cumulative_sum(aar)` turns AAR into CAAR.
- `std_per_day(matrix)` is the sample standard deviation of each column (NaN
  when there is only one row).
- `market_prices(ticker, group, benchmark)` returns the benchmark's prices on
  the dates the ticker has prices; an unknown ticker raises `KeyError`.
- `Bootstrap(num_samples, sample_size=30, rng=None)`:
  - `run(group, benchmark)` draws `num_samples` random samples of
    `sample_size` tickers and averages their abnormal returns into `aar` and
    `caar`. The per-sample results are kept in `aar_matrix` and
    `caar_matrix`. A ticker whose dates do not all appear in the benchmark is
    skipped. A group smaller than the sample size raises `ValueError`.
  - `summarize()` returns a text table of day, AAR, AAR STD, CAAR and
    CAAR STD.
  - `clear()` drops the results.

  Pass a seeded `random.Random` as `rng` for repeatable runs.

### `earnsurprise.display`

Each of these returns text and prints nothing.

- `format_stock(stock)` reports the stock's prices, daily and cumulative
  returns, and its earnings figures.
- `find_and_format_stock(ticker, beat, meet, miss)` reports the ticker from
  the first group that holds it. If no group holds it, it returns a
  "not found" line.
- `format_metrics(aar, caar, aar_sd, caar_sd, n)` lists the metrics day by
  day. Days are numbered from `1 - n`.

### `earnsurprise.plotting`

- `write_caar_data(path, beat_caar, meet_caar, miss_caar, n)` writes one row
  per day, from `-n` up to `n`. Each row holds the day and the three CAARs in
  percent. Writing stops at the length of `beat_caar`, and the function
  returns the number of rows written.
- `gnuplot_script(data_path)` returns the gnuplot commands for the plot.
- `plot_caar(beat_caar, meet_caar, miss_caar, n, data_path=...)` writes the
  data file, by default `gnuplot_data.txt` in the temp directory. It then
  runs `gnuplot -persist` with the script. If gnuplot cannot be started it
  raises `RuntimeError`.

### `earnsurprise.utils`

- `fetch_number_of_days(max_n, min_n, prompt=input)` asks for N within
  `[min_n, max_n]`. It allows three attempts, then raises `ValueError`.
- `verify_group_data(group, tickers, n)` returns a list of problems. It
  lists tickers missing from the group and stocks without exactly `2n + 1`
  prices.

## Example

```python
from earnsurprise.stocks import Stock
from earnsurprise.calculation import abnormal_returns, market_prices

benchmark = Stock(ticker="IWV")
stock = Stock(ticker="ABC")
for day, (p, m) in enumerate([(10.0, 200.0), (10.5, 201.0), (10.2, 202.5)], 1):
    stock.add_price(f"2024-01-0{day}", p)
    benchmark.add_price(f"2024-01-0{day}", m)

group = {"ABC": stock}
print(abnormal_returns(stock.prices(), market_prices("ABC", group, benchmark)))
```

## What it does not do

The package does not download earnings announcements or price histories.
Your own code must load the `Stock` objects and sort them into groups. The
package also installs no command and has no interactive menu. You call the
functions above from Python.