from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List, Optional

import khmercal
from khmercal.core.time import to_jdn


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(rng: random.Random, start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=rng.randint(0, span))


def check_day(d0: date) -> List[str]:
    """Problems found for one civil day; empty when consistent."""
    problems = []
    cal = khmercal.get_calendar()
    lunar = cal.find_lunar_date(d0)
    if lunar.month_start_jdn + lunar.day != to_jdn(d0):
        problems.append(f"month_start + day != target ({lunar})")
    if not 0 <= lunar.day <= 29:
        problems.append(f"day out of range ({lunar.day})")

    prev = cal.find_lunar_date(d0 - timedelta(days=1))
    same_month = prev.month == lunar.month and prev.day + 1 == lunar.day
    new_month = lunar.day == 0 and lunar.month_start_jdn == prev.month_start_jdn + prev.day + 1
    if not (same_month or new_month):
        problems.append(f"discontinuity after {prev}")
    return problems


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    rng = random.Random(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(rng, start, end)
        problems = check_day(d0)
        if problems:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            for msg in problems:
                print("  ", msg)
            print("day_info(debug=True):", khmercal.day_info(d0, debug=True))
            if failures >= max_failures:
                return failures

    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random consistency checks of the Gregorian -> lunar walk.")
    p.add_argument("--N", type=int, default=2000, help="Trials.")
    p.add_argument("--start", type=str, default="1800-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2200-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start, end = parse_date(args.start), parse_date(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)
    print(f"\n{args.N} trials, {failures} failure(s)")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
