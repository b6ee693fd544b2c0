"""CAAR plots for the beat, meet and miss groups through gnuplot."""

from __future__ import annotations

import subprocess
import tempfile
from collections.abc import Sequence
from pathlib import Path

DEFAULT_DATA_PATH = Path(tempfile.gettempdir()) / "gnuplot_data.txt"


def write_caar_data(
    path: str | Path,
    beat_caar: Sequence[float],
    meet_caar: Sequence[float],
    miss_caar: Sequence[float],
    n: int,
) -> int:
    """Write day and CAAR percentages for days -n..n; return the rows written."""
    rows = min(2 * n + 1, len(beat_caar))
    if len(meet_caar) < rows or len(miss_caar) < rows:
        raise ValueError("Meet and miss CAAR must be at least as long as beat CAAR.")
    with open(path, "w", encoding="utf-8") as out:
        for idx in range(rows):
            out.write(
                f"{idx - n} {beat_caar[idx] * 100:g} "
                f"{meet_caar[idx] * 100:g} {miss_caar[idx] * 100:g}\n"
            )
    return rows


def gnuplot_script(data_path: str | Path) -> str:
    """Commands that plot the three CAAR columns of the data file."""
    p = str(data_path)
    return (
        "set terminal qt size 800,600\n"
        "set terminal qt font 'Helvetica,10'\n"
        "set title 'CAAR for Beat, Meet, and Miss Groups'\n"
        "set xlabel 'Days Relative to Earnings Announcement'\n"
        "set ylabel 'Cumulative Average Abnormal Return (CAAR %)'\n"
        "set arrow from 0, graph 0 to 0, graph 1 nohead lw 1 lc rgb 'black'\n"
        "set grid\n"
        f"plot '{p}' using 1:2 with lines linecolor rgb 'red' title 'Beat', "
        f"'{p}' using 1:3 with lines linecolor rgb 'blue' title 'Meet', "
        f"'{p}' using 1:4 with lines linecolor rgb 'green' title 'Miss'\n"
        "set key left top\n"
    )


def plot_caar(
    beat_caar: Sequence[float],
    meet_caar: Sequence[float],
    miss_caar: Sequence[float],
    n: int,
    data_path: str | Path = DEFAULT_DATA_PATH,
) -> None:
    """Write the data file and show the CAAR plot in a persistent gnuplot window."""
    write_caar_data(data_path, beat_caar, meet_caar, miss_caar, n)
    script = gnuplot_script(data_path) + "exit\n"
    try:
        subprocess.run(["gnuplot", "-persist"], input=script, text=True, check=True)
    except OSError as exc:
        raise RuntimeError("Could not open pipe to gnuplot") from exc