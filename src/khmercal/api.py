from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from .attributes.registry import compute_attributes
from .core.time import Instant, days_in_gregorian_year as _days_in_gregorian_year, is_gregorian_leap as _is_gregorian_leap
from .core.types import KhmerDayInfo, KhmerLunarDay, LeapType, LunarDate, LunarMonth, SoriyatraInfo
from .core.types import khmer_lunar_day as _khmer_lunar_day
from .engines.calendar import KhmerCalendar, KhmerCalendarParams
from .engines.factory import make_calendar as _make_calendar

_calendar: Optional[KhmerCalendar] = None

def set_calendar(cal: KhmerCalendar) -> None:
    global _calendar
    _calendar = cal

def get_calendar() -> KhmerCalendar:
    return _cal()

def _cal() -> KhmerCalendar:
    if _calendar is None:
        raise RuntimeError("Default calendar not initialized")
    return _calendar

def make_calendar(params: Optional[KhmerCalendarParams] = None) -> KhmerCalendar:
    return _make_calendar(params)

def calendar_info() -> Dict[str, Any]:
    return _cal().info()

# ============================================================
# Lunar date
# ============================================================

def find_lunar_date(t: Instant) -> LunarDate:
    return _cal().find_lunar_date(t)

def khmer_lunar_day(day: int) -> KhmerLunarDay:
    return _khmer_lunar_day(day)

def day_info(
    t: Instant,
    *,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> KhmerDayInfo:
    info = _cal().day_info(t, debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

# ============================================================
# Year arithmetic
# ============================================================

def is_leap_month(be_year: int) -> bool:
    return _cal().is_leap_month(be_year)

def is_leap_day(be_year: int) -> bool:
    return _cal().is_leap_day(be_year)

def leap_type(be_year: int) -> LeapType:
    return _cal().leap_type(be_year)

def days_in_month(month: int, be_year: int) -> int:
    return _cal().days_in_month(month, be_year)

def days_in_year(be_year: int) -> int:
    return _cal().days_in_year(be_year)

def next_month(month: int, be_year: int) -> LunarMonth:
    return _cal().next_month(month, be_year)

def months_of_year(be_year: int) -> List[LunarMonth]:
    return _cal().months_of_year(be_year)

def soriyatra_lerng_sak(js_year: int) -> SoriyatraInfo:
    return _cal().soriyatra_lerng_sak(js_year)

def is_gregorian_leap(ad_year: int) -> bool:
    return _is_gregorian_leap(ad_year)

def days_in_gregorian_year(ad_year: int) -> int:
    return _days_in_gregorian_year(ad_year)

# ============================================================
# Year labels
# ============================================================

def be_year(t: Instant) -> int:
    return _cal().be_year(t)

def maybe_be_year(t: Instant) -> int:
    return _cal().maybe_be_year(t)

def new_year_moment(gregorian_year: int) -> datetime:
    return _cal().new_year_moment(gregorian_year)

def visakha_bochea(gregorian_year: int) -> datetime:
    return _cal().visakha_bochea(gregorian_year)

def animal_year(t: Instant) -> int:
    return _cal().animal_year(t)

def era_year(t: Instant) -> int:
    return _cal().era_year(t)

def jolak_sakaraj_year(t: Instant) -> int:
    return _cal().jolak_sakaraj_year(t)
