from __future__ import annotations

import argparse
from datetime import datetime
from typing import List, Optional, Tuple

import khmercal
from khmercal.core.constants import ANIMAL_YEARS


def new_year_rows(from_year: int, to_year: int) -> List[Tuple[int, datetime, bool]]:
    """(Gregorian year, New Year moment, taken from the override table)."""
    cal = khmercal.get_calendar()
    overrides = cal.p.new_year.overrides
    return [(y, cal.new_year_moment(y), y in overrides) for y in range(from_year, to_year + 1)]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print the Khmer New Year moment for a range of years.")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--list-day",
        type=int,
        default=0,
        help="After the table, list the years whose New Year falls on this day of April (default: none).",
    )
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    rows = new_year_rows(args.from_year, args.to_year)

    headers = ["Year", "JS", "Moment", "Days", "Animal", "Src"]
    line = f"{headers[0]:<5}  {headers[1]:<5}  {headers[2]:<16}  {headers[3]:<4}  {headers[4]:<8}  {headers[5]}"
    print(line)
    print("-" * len(line))

    for y, moment, overridden in rows:
        js = khmercal.jolak_sakaraj_year(moment)
        ndays = khmercal.soriyatra_lerng_sak(js).number_of_new_year_days
        animal = ANIMAL_YEARS[khmercal.animal_year(moment)]
        src = "table" if overridden else "calc"
        print(f"{y:<5}  {js:<5}  {moment:%Y-%m-%d %H:%M}  {ndays:<4}  {animal:<8}  {src}")

    if args.list_day:
        hits = [y for y, moment, _ in rows if moment.month == 4 and moment.day == args.list_day]
        print(f"\nNew Year on April {args.list_day:02d}:")
        print(", ".join(str(y) for y in hits) if hits else "(none)")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
