from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

from .time import from_jdn


class LunarMonth(IntEnum):
    """Khmer lunar months. The value is the month index used by the arithmetic."""
    MIKASIR = 0
    BOSS = 1
    MEAK = 2
    PHALKUN = 3
    CHAET = 4
    PISAK = 5
    CHESTH = 6
    ASATH = 7
    SRAP = 8
    PHATROBOT = 9
    ASSUJ = 10
    KATTIK = 11
    PATHAM_ASATH = 12   # first Asath, leap-month years only
    TUTIY_ASATH = 13    # second Asath, leap-month years only


class MoonPhase(IntEnum):
    WAXING = 0
    WANING = 1


class LeapType(IntEnum):
    """
    NONE/LEAP_MONTH/LEAP_DAY are public (Protetin) values.
    LEAP_BOTH only appears in the Bodithey stage.
    """
    NONE = 0
    LEAP_MONTH = 1
    LEAP_DAY = 2
    LEAP_BOTH = 3


@dataclass(frozen=True)
class KhmerLunarDay:
    count: int          # 1..15
    phase: MoonPhase


@dataclass(frozen=True)
class LunarDate:
    day: int                 # 0..29
    month: LunarMonth
    month_start_jdn: int     # JDN of lunar day 0 of `month`

    @property
    def month_start(self) -> date:
        return from_jdn(self.month_start_jdn)

    @property
    def jdn(self) -> int:
        return self.month_start_jdn + self.day

    @property
    def lunar_day(self) -> KhmerLunarDay:
        return khmer_lunar_day(self.day)


def khmer_lunar_day(day: int) -> KhmerLunarDay:
    """Split a 0-based lunar day into (count 1..15, waxing/waning)."""
    return KhmerLunarDay(
        count=day % 15 + 1,
        phase=MoonPhase.WANING if day > 14 else MoonPhase.WAXING,
    )


@dataclass(frozen=True)
class SotinInfo:
    sotin: int
    angsar: int
    avaman: int


@dataclass(frozen=True)
class SoriyatraInfo:
    """Intermediate values of the Lerng Sak computation for one Jolak-Sakaraj year."""
    js_year: int
    harkun: int
    kromathopol: int
    avaman: int
    bodithey: int
    has_366_days: bool
    is_athikameas: bool
    is_chantreathimeas: bool
    jesth_has_30: bool
    day_lerng_sak: int
    lunar_date_lerng_sak: Tuple[int, LunarMonth]   # (day, month)
    new_years_day_sotins: Tuple[SotinInfo, ...]
    time_of_new_year: Tuple[int, int]             # (hour, minute); hour may exceed 23

    @property
    def number_of_new_year_days(self) -> int:
        return 4 if self.new_years_day_sotins[0].angsar == 0 else 3


@dataclass(frozen=True)
class KhmerDayInfo:
    instant: datetime
    lunar: LunarDate
    lunar_day: KhmerLunarDay
    be_year: int
    animal_year: int
    era_year: int
    jolak_sakaraj_year: int
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
