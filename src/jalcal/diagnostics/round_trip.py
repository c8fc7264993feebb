from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List, Optional

import jalcal


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        j = jalcal.from_gregorian(d0)
        back = jalcal.to_gregorian(j)
        jdn = jalcal.gregorian_to_jdn(d0.year, d0.month, d0.day)
        jdn_back = jalcal.jalali_to_jdn(*jalcal.jdn_to_jalali(jdn).as_tuple())

        if back != d0 or jdn_back != jdn or not j.is_valid():
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("jalali:", j, "valid:", j.is_valid())
            print("back:", back)
            print("jdn:", jdn, "->", jdn_back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> jalali -> gregorian.")
    p.add_argument("--N", type=int, default=20000, help="Trials.")
    p.add_argument("--start", type=str, default="0700-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="3700-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start, end = parse_date(args.start), parse_date(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)
    print(f"trials={args.N}  failures={failures}")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
