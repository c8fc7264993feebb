from __future__ import annotations

import argparse
from typing import List, Optional

import jalcal


def nowruz_rows(from_year: int, to_year: int) -> List[dict]:
    rows = []
    for jy in range(from_year, to_year + 1):
        r = jalcal.jal_cal(jy)
        first = jalcal.JalaliDate(jy, 1, 1)
        rows.append({
            "year": jy,
            "gregorian": first.to_gregorian(),
            "march": r.march,
            "leap": r.leap,
            "days": jalcal.days_in_year(jy),
            "weekday": first.day_of_week(),
        })
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian date of Nowruz (1 Farvardin) over a range of Jalali years."
    )
    p.add_argument("--from-year", type=int, default=1390)
    p.add_argument("--to-year", type=int, default=1420)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian column (default: iso).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")
    if Y0 < jalcal.MIN_YEAR or Y1 > jalcal.MAX_YEAR:
        raise SystemExit(f"years must lie in {jalcal.MIN_YEAR}..{jalcal.MAX_YEAR}")

    names = jalcal.api.get_day_of_week_names("long")
    print(f"{'Year':>5}  {'Gregorian':<10}  {'Leap':>4}  {'Days':>4}  Weekday")
    for row in nowruz_rows(Y0, Y1):
        g = row["gregorian"]
        gs = g.isoformat() if args.dates == "iso" else f"{g.month:02d}-{g.day:02d}"
        leap = "*" if row["leap"] == 0 else ""
        print(f"{row['year']:>5}  {gs:<10}  {leap:>4}  {row['days']:>4}  {names[row['weekday']]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
