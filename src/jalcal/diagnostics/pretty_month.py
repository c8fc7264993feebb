from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import jalcal
from jalcal.names import LONG_MONTHS, SHORT_WEEKDAYS

# Columns run Saturday..Friday, the Iranian week.
_COLUMNS = [6, 0, 1, 2, 3, 4, 5]


def dow_header(w: int = 6) -> str:
    return " ".join(SHORT_WEEKDAYS[i][:w].ljust(w) for i in _COLUMNS)


def cell(top: str, bot: str, w: int = 6) -> Tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def month_weeks(year: int, month: int) -> List[List[Tuple[str, str]]]:
    """Week rows of (Jalali day, Gregorian MM-DD) cells, Saturday first."""
    first = jalcal.create_date(year, month, 1)
    n_days = jalcal.days_in_month(month, year)

    weeks: List[List[Tuple[str, str]]] = []
    wk: List[Tuple[str, str]] = []
    pad = _COLUMNS.index(first.day_of_week())
    for _ in range(pad):
        wk.append(cell("", ""))

    d = first.clone()
    for _ in range(n_days):
        g = d.to_gregorian()
        wk.append(cell(f"{d.day:2d}", f"{g.month:02d}-{g.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
        d.add_days(1)
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def print_month(year: int, month: int) -> None:
    first = jalcal.create_date(year, month, 1)
    last = jalcal.create_date(year, month, jalcal.days_in_month(month, year))
    header = dow_header()
    print(f"{first.format('YYYY MMMM')}  ({first.to_gregorian()} .. {last.to_gregorian()})")
    print(header)
    print("-" * len(header))
    for wk in month_weeks(year, month):
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Jalali month calendar with the paired Gregorian days."
    )
    p.add_argument("year", type=int, nargs="?", help="Jalali year (default: current)")
    p.add_argument("month", type=int, nargs="?", help="Jalali month 1..12 (default: current)")
    args = p.parse_args(argv)

    if args.year is None or args.month is None:
        t = jalcal.today()
        year, month = t.year, t.month
    else:
        year, month = args.year, args.month
    if not 1 <= month <= 12:
        raise SystemExit(f"month must be in 1..12 ({LONG_MONTHS[0]}..{LONG_MONTHS[-1]})")
    if not jalcal.MIN_YEAR <= year <= jalcal.MAX_YEAR:
        raise SystemExit(f"year must lie in {jalcal.MIN_YEAR}..{jalcal.MAX_YEAR}")

    print_month(year, month)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
