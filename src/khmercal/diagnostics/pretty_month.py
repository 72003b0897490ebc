from __future__ import annotations

import argparse
import calendar as pycal
from datetime import date, timedelta
from typing import List, Optional, Tuple

import khmercal
from khmercal.core.constants import lunar_month_name
from khmercal.core.time import from_jdn, weekday_sunday0

Cell = Tuple[str, str]


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


def cell(top: str, bot: str, w: int = 6) -> Cell:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def lunar_label(d: date) -> str:
    lday = khmercal.find_lunar_date(d).lunar_day
    return f"{lday.count:2d}{'+' if lday.phase == khmercal.MoonPhase.WAXING else '-'}"


def build_weeks(days: List[Tuple[date, str, str]]) -> List[List[Cell]]:
    weeks: List[List[Cell]] = []
    wk: List[Cell] = [cell("", "") for _ in range(weekday_sunday0(days[0][0]))]
    for _, top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def render_grid(title: str, weeks: List[List[Cell]]) -> str:
    lines = [title, dow_header(), "-" * len(dow_header())]
    for wk in weeks:
        lines.append(" ".join(c[0] for c in wk))
        lines.append(" ".join(c[1] for c in wk))
    return "\n".join(lines) + "\n"


def lunar_month_grid(d: date) -> str:
    """Grid of the lunar month containing `d`: lunar day on top, civil date below."""
    lunar = khmercal.find_lunar_date(d)
    d0 = from_jdn(lunar.month_start_jdn)
    n = khmercal.days_in_month(lunar.month, khmercal.maybe_be_year(d0))
    days = []
    for i in range(n):
        di = d0 + timedelta(days=i)
        days.append((di, lunar_label(di), f"{di.month:02d}-{di.day:02d}"))
    d1 = days[-1][0]
    title = f"lunar month {lunar_month_name(lunar.month)} ({lunar.month.name})  ({d0} .. {d1})"
    return render_grid(title, build_weeks(days))


def gregorian_month_grid(gy: int, gm: int) -> str:
    """Grid of a Gregorian month: civil day on top, lunar day below."""
    last_day = pycal.monthrange(gy, gm)[1]
    days = []
    for day in range(1, last_day + 1):
        d = date(gy, gm, day)
        days.append((d, f"{day:2d}", lunar_label(d)))
    return render_grid(f"Gregorian month  {gy}-{gm:02d}", build_weeks(days))


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--lunar", type=str, metavar="YYYY-MM-DD",
                   help="Print the lunar month containing this civil date.")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2024 4)")
    args = p.parse_args(argv)

    if not args.lunar and not args.greg:
        print(lunar_month_grid(date(2024, 4, 14)))
        print(gregorian_month_grid(2024, 4))
        return 0

    if args.lunar:
        y, m, d = map(int, args.lunar.split("-"))
        print(lunar_month_grid(date(y, m, d)))

    if args.greg:
        gy, gm = args.greg
        print(gregorian_month_grid(gy, gm))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
