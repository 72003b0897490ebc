"""
khmercal.engines.calendar
-------------------------
The Orchestrator. Binds the lunar walk, the New Year calculator (and its
cache) and the year labeler into one calendar object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from ..core.time import Instant, as_datetime, to_jdn, civil_day
from ..core.types import KhmerDayInfo, LeapType, LunarDate, LunarMonth, SoriyatraInfo
from . import leap, month_cycle, soriyatra
from .lunar_date import LunarDateFinder, LunarWalkParams, maybe_be_year
from .new_year import NewYearCache, NewYearCalculator, NewYearParams
from .year_labels import YearLabeler


def _default_walk() -> LunarWalkParams:
    from .specs import DEFAULT_WALK
    return DEFAULT_WALK


@dataclass(frozen=True)
class KhmerCalendarParams:
    walk: LunarWalkParams = field(default_factory=_default_walk)
    new_year: NewYearParams = field(default_factory=NewYearParams)


class KhmerCalendar:
    """
    Gregorian -> Khmer lunisolar calendar.

    Each instance owns its own New Year cache; everything else is a pure
    function of the params.
    """
    def __init__(self, params: KhmerCalendarParams):
        self.p = params
        self.finder = LunarDateFinder(params.walk)
        cache = NewYearCache() if params.new_year.use_cache else None
        self.new_year = NewYearCalculator(params.new_year, self.finder, cache)
        self.labels = YearLabeler(self.finder, self.new_year)

    # ---------------------------------------------------------
    # Lunar date
    # ---------------------------------------------------------

    def find_lunar_date(self, t: Instant) -> LunarDate:
        return self.finder.find(t)

    def maybe_be_year(self, t: Instant) -> int:
        return maybe_be_year(t)

    # ---------------------------------------------------------
    # Year arithmetic (pure, independent of params)
    # ---------------------------------------------------------

    @staticmethod
    def is_leap_month(be_year: int) -> bool:
        return leap.is_leap_month(be_year)

    @staticmethod
    def is_leap_day(be_year: int) -> bool:
        return leap.is_leap_day(be_year)

    @staticmethod
    def leap_type(be_year: int) -> LeapType:
        return leap.protetin_leap(be_year)

    @staticmethod
    def days_in_month(month: int, be_year: int) -> int:
        return month_cycle.days_in_month(month, be_year)

    @staticmethod
    def days_in_year(be_year: int) -> int:
        return month_cycle.days_in_year(be_year)

    @staticmethod
    def next_month(month: int, be_year: int) -> LunarMonth:
        return month_cycle.next_month(month, be_year)

    @staticmethod
    def months_of_year(be_year: int) -> List[LunarMonth]:
        return month_cycle.months_of_year(be_year)

    @staticmethod
    def soriyatra_lerng_sak(js_year: int) -> SoriyatraInfo:
        return soriyatra.soriyatra_lerng_sak(js_year)

    # ---------------------------------------------------------
    # Year labels
    # ---------------------------------------------------------

    def new_year_moment(self, gregorian_year: int) -> datetime:
        return self.new_year.moment(gregorian_year)

    def visakha_bochea(self, gregorian_year: int) -> datetime:
        return self.labels.visakha_bochea(gregorian_year)

    def be_year(self, t: Instant) -> int:
        return self.labels.be_year(t)

    def animal_year(self, t: Instant) -> int:
        return self.labels.animal_year(t)

    def era_year(self, t: Instant) -> int:
        return self.labels.era_year(t)

    def jolak_sakaraj_year(self, t: Instant) -> int:
        return self.labels.jolak_sakaraj_year(t)

    # ---------------------------------------------------------
    # Aggregate
    # ---------------------------------------------------------

    def day_info(self, t: Instant, *, debug: bool = False) -> KhmerDayInfo:
        dt = as_datetime(t)
        lunar, trace = self.finder.walk(to_jdn(civil_day(dt)))
        dbg = None
        if debug:
            dbg = {
                "jdn": lunar.jdn,
                "month_start": lunar.month_start.isoformat(),
                "maybe_be_year": maybe_be_year(dt),
                "walk_year_steps": trace.year_steps,
                "walk_month_steps": trace.month_steps,
                "new_year": self.new_year_moment(dt.year).isoformat(),
                "visakha_bochea": self.visakha_bochea(dt.year).isoformat(),
            }
        return KhmerDayInfo(
            instant=dt,
            lunar=lunar,
            lunar_day=lunar.lunar_day,
            be_year=self.be_year(dt),
            animal_year=self.animal_year(dt),
            era_year=self.era_year(dt),
            jolak_sakaraj_year=self.jolak_sakaraj_year(dt),
            debug=dbg,
        )

    def info(self) -> Dict[str, Any]:
        return {
            "epoch": self.p.walk.epoch.isoformat(),
            "epoch_month": self.p.walk.epoch_month.name,
            "overrides": sorted(self.p.new_year.overrides),
            "cache": None if self.new_year.cache is None else len(self.new_year.cache),
        }
