#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import jalcal

from ._extras import _need_matplotlib, _need_numpy


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """(Gregorian year, March day of Nowruz, leap flag) per Jalali year."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    gy = np.empty_like(years)
    march = np.empty_like(years)
    leap = np.zeros(len(years), dtype=bool)

    for i, jy in enumerate(years):
        r = jalcal.jal_cal(int(jy))
        gy[i] = r.gy
        march[i] = r.march
        leap[i] = r.leap == 0

    return gy, march, leap


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the March day of Nowruz across Jalali years.")
    p.add_argument("--start-year", type=int, default=1200)
    p.add_argument("--end-year", type=int, default=1600)
    p.add_argument("--outbase", default="nowruz_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")
    if args.start_year < jalcal.MIN_YEAR or args.end_year > jalcal.MAX_YEAR:
        raise SystemExit(f"years must lie in {jalcal.MIN_YEAR}..{jalcal.MAX_YEAR}")

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y, leap = build_series(np, args.start_year, args.end_year)

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.scatter(x[~leap], y[~leap], s=12, marker="o", c="tab:blue", alpha=0.45, label="common year")
    ax.scatter(x[leap], y[leap], s=22, marker="o", facecolors="none", edgecolors="tab:red",
               linewidths=1.0, alpha=0.8, label="leap year")

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("March day of 1 Farvardin")
    ax.set_title("Nowruz in the Gregorian calendar")
    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
