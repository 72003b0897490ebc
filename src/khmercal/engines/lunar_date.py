"""
khmercal.engines.lunar_date
---------------------------
Gregorian -> Khmer lunar day/month by walking a known month start forward
(or backward) in whole lunar years, then whole lunar months.

The walk runs on Julian Day Numbers so no intermediate value is limited by
the `datetime` year range, and no caller instant is ever mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from ..core.errors import ComputationFailureError
from ..core.time import Instant, add_one_year, civil_day, jdn_to_ymd, to_jdn
from ..core.types import LunarDate, LunarMonth
from .month_cycle import days_in_month, days_in_year, next_month

# Shortest lunar year; bounds the number of whole-year steps.
MIN_YEAR_DAYS = 354
# A remainder shorter than 384 days never spans more than 13 months.
MAX_MONTH_STEPS = 14


def maybe_be_year_ymd(year: int, month: int) -> int:
    """BE year guess from the Gregorian month alone (January..April -> +543)."""
    return year + 543 if month <= 4 else year + 544


def maybe_be_year(t: Instant) -> int:
    """
    Approximate BE year of an instant.

    Only used to pick which year's month/day-count table applies while
    walking; the reported BE year comes from the Visakha Bochea boundary.
    """
    d = civil_day(t)
    return maybe_be_year_ymd(d.year, d.month)


def _maybe_be_jdn(jdn: int) -> int:
    y, m, _ = jdn_to_ymd(jdn)
    return maybe_be_year_ymd(y, m)


@dataclass(frozen=True)
class LunarWalkParams:
    epoch: date                # civil day of lunar day 0 of epoch_month
    epoch_month: LunarMonth

    def __post_init__(self) -> None:
        if self.epoch_month in (LunarMonth.PATHAM_ASATH, LunarMonth.TUTIY_ASATH):
            raise ValueError("epoch_month must be a regular month")


@dataclass(frozen=True)
class WalkTrace:
    year_steps: int
    month_steps: int
    max_year_steps: int


def max_year_steps(target_jdn: int, epoch_jdn: int) -> int:
    return abs(target_jdn - epoch_jdn) // MIN_YEAR_DAYS + 2


class LunarDateFinder:
    """
    Locates the lunar month enclosing a civil day and the 0-based day
    within it. Only the civil day of the target is used.
    """
    def __init__(self, params: LunarWalkParams):
        self.p = params
        self.epoch_jdn = to_jdn(params.epoch)

    def find(self, target: Instant) -> LunarDate:
        return self.walk(to_jdn(civil_day(target)))[0]

    def walk(self, target: int) -> Tuple[LunarDate, WalkTrace]:
        epoch = self.epoch_jdn
        month = self.p.epoch_month
        year_limit = max_year_steps(target, epoch)
        year_steps = 0

        # 1. Nearest year epoch
        if target > epoch:
            while True:
                y, m, _ = add_one_year(*jdn_to_ymd(epoch))
                year_len = days_in_year(maybe_be_year_ymd(y, m))
                if target - epoch <= year_len:
                    break
                epoch += year_len
                year_steps += 1
                if year_steps > year_limit:
                    raise ComputationFailureError(f"Year walk exceeded {year_limit} steps for JDN {target}")
        else:
            while True:
                epoch -= days_in_year(_maybe_be_jdn(epoch))
                year_steps += 1
                if year_steps > year_limit:
                    raise ComputationFailureError(f"Year walk exceeded {year_limit} steps for JDN {target}")
                if epoch <= target:
                    break

        # 2. Month by month
        month_steps = 0
        while True:
            month_len = days_in_month(month, _maybe_be_jdn(epoch))
            if target - epoch <= month_len:
                break
            epoch += month_len
            month = next_month(month, _maybe_be_jdn(epoch))
            month_steps += 1
            if month_steps > MAX_MONTH_STEPS:
                raise ComputationFailureError(f"Month walk exceeded {MAX_MONTH_STEPS} steps for JDN {target}")

        day = target - epoch

        # 3. The walk stops one step early when the day lands exactly on the
        #    month length ("15 waning" of a 29-day month); roll into the next month.
        total = days_in_month(month, _maybe_be_jdn(target))
        if day >= total:
            day %= total
            month = next_month(month, _maybe_be_jdn(epoch))
            epoch += total

        trace = WalkTrace(year_steps=year_steps, month_steps=month_steps, max_year_steps=year_limit)
        return LunarDate(day=day, month=month, month_start_jdn=epoch), trace
