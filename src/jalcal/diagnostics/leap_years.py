#!/usr/bin/env python3
"""
Leap-year structure of the Jalali calendar.

Lists the leap years in a range, summarises the gaps between consecutive
leap years (4 or 5 years inside a 33-year cycle) and optionally draws a
barcode of leap years with the break-point years marked.
"""
from __future__ import annotations

import argparse
from typing import Dict, List, Optional

import jalcal

from ._extras import _need_matplotlib, _need_numpy


def leap_years(np, start_year: int, end_year: int) -> "np.ndarray":
    years = np.arange(start_year, end_year + 1, dtype=int)
    mask = np.array([jalcal.jal_cal(int(y)).leap == 0 for y in years], dtype=bool)
    return years[mask]


def gap_histogram(np, leaps: "np.ndarray") -> Dict[int, int]:
    if len(leaps) < 2:
        return {}
    gaps, counts = np.unique(np.diff(leaps), return_counts=True)
    return {int(g): int(c) for g, c in zip(gaps, counts)}


def breaks_in(start_year: int, end_year: int) -> List[int]:
    return [b for b in jalcal.BREAKS if start_year <= b <= end_year]


def plot_barcode(np, plt, leaps, start_year: int, end_year: int, out: str, title: str) -> None:
    fig, ax = plt.subplots(figsize=(16, 2.4))

    ax.vlines(leaps, 0.0, 1.0, color="0.15", linewidth=1.0, label="leap year")
    for b in breaks_in(start_year, end_year):
        ax.axvline(b, color="tab:red", linewidth=1.4, alpha=0.8)

    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.0, 1.0)
    ax.set_yticks([])
    ax.tick_params(axis="x", which="both", length=0)
    ax.set_xlabel("Jalali year (red: 33-year rule break points)")
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(out, dpi=250)
    print(f"Saved: {out}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Jalali leap years, gap statistics and barcode plot.")
    p.add_argument("--start-year", type=int, default=1300)
    p.add_argument("--end-year", type=int, default=1500)
    p.add_argument("--list", action="store_true", help="Print every leap year in the range.")
    p.add_argument("--plot", action="store_true", help="Write a barcode plot (needs matplotlib).")
    p.add_argument("--out", default="jalali_leap_years.png")
    p.add_argument("--title", default="Jalali leap years")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")
    if start_year < jalcal.MIN_YEAR or end_year > jalcal.MAX_YEAR:
        raise SystemExit(f"years must lie in {jalcal.MIN_YEAR}..{jalcal.MAX_YEAR}")

    np = _need_numpy()
    leaps = leap_years(np, start_year, end_year)
    total = end_year - start_year + 1

    print(f"Jalali years {start_year}..{end_year}: {len(leaps)} leap of {total}")
    if total:
        print(f"  mean year length = {365 + len(leaps) / total:.6f} days")
    for gap, count in sorted(gap_histogram(np, leaps).items()):
        print(f"  gap {gap}: {count}")
    bs = breaks_in(start_year, end_year)
    if bs:
        print("  break points:", ", ".join(str(b) for b in bs))
    if args.list:
        print(" ".join(str(int(y)) for y in leaps))

    if args.plot:
        plt = _need_matplotlib()
        plot_barcode(np, plt, leaps, start_year, end_year, args.out, args.title)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
