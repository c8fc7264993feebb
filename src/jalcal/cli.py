from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib
import inspect

from jalcal.core.errors import JalaliError


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as e:
        raise SystemExit(f"error: invalid Gregorian date {s!r} (expected YYYY-MM-DD)") from e


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    try:
        if len(sig.parameters) == 0:
            rv = fn()
        else:
            rv = fn(argv)
    except JalaliError as e:
        raise SystemExit(f"error: {e}") from e
    return int(rv or 0)


def cmd_to_jalali(argv: list[str]) -> int:
    import jalcal

    p = argparse.ArgumentParser(prog="jalcal to-jalali", description="Gregorian -> Jalali date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--format", default="YYYY/MM/DD", help="output template (YYYY, MMMM, MM, DD)")
    args = p.parse_args(argv)

    try:
        j = jalcal.from_gregorian(_parse_ymd(args.date))
        print(j.format(args.format))
    except JalaliError as e:
        raise SystemExit(f"error: {e}") from e
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import jalcal

    p = argparse.ArgumentParser(prog="jalcal to-gregorian", description="Jalali -> Gregorian date")
    p.add_argument("date", help="Jalali date, laid out per --parse-format")
    p.add_argument("--parse-format", action="append", default=None,
                   help="input template (repeatable; default YYYY/MM/DD)")
    args = p.parse_args(argv)

    try:
        j = jalcal.JalaliDate.parse(args.date, args.parse_format)
        j.validate()
        print(jalcal.to_gregorian(j).isoformat())
    except JalaliError as e:
        raise SystemExit(f"error: {e}") from e
    return 0


def cmd_info(argv: list[str]) -> int:
    import jalcal

    p = argparse.ArgumentParser(prog="jalcal info", description="Rule-table data for a Jalali year")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    try:
        r = jalcal.jal_cal(args.year)
    except JalaliError as e:
        raise SystemExit(f"error: {e}") from e

    first = jalcal.JalaliDate(args.year, 1, 1)
    print(f"Jalali year        = {args.year}")
    print(f"leap index         = {r.leap}")
    print(f"leap year          = {r.leap == 0}")
    print(f"days in year       = {jalcal.days_in_year(args.year)}")
    print(f"Gregorian year     = {r.gy}")
    print(f"1 Farvardin        = {first.to_gregorian().isoformat()} (March {r.march})")
    print(f"Julian Day Number  = {first.to_jdn()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `jalcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_to_jalali(argv)

    p = argparse.ArgumentParser(prog="jalcal", description="Jalali (Persian) calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-jalali", help="Gregorian -> Jalali date")
    sub.add_parser("to-gregorian", help="Jalali -> Gregorian date")
    sub.add_parser("info", help="Rule-table data for a Jalali year")

    # diagnostics
    sub.add_parser("month", help="Print a Jalali month calendar (diagnostics)")
    sub.add_parser("new-years", help="Print Nowruz table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-years", "nowruz-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "to-jalali":
        return cmd_to_jalali(rest)

    if args.cmd == "to-gregorian":
        return cmd_to_gregorian(rest)

    if args.cmd == "info":
        return cmd_info(rest)

    if args.cmd == "month":
        return _run_module_main("jalcal.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("jalcal.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "jalcal.diagnostics.round_trip",
            "leap-years": "jalcal.diagnostics.leap_years",
            "nowruz-scatter": "jalcal.diagnostics.nowruz_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
