"""
khmercal.utils
--------------
Helpers built on the calendar: month ranges, lunar-day searches, holidays,
era conversion, validation and seasons.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from .core.constants import MOON_PHASE_NAMES, season_of_month
from .core.errors import InvalidInputError
from .core.time import Instant, civil_day
from .core.types import LunarMonth, MoonPhase, khmer_lunar_day
from .engines.calendar import KhmerCalendar
from .format import render_lunar

ERAS = ("AD", "BE", "JS")
# Years added to an AD year; the BE offset is the one before Visakha Bochea.
_ERA_OFFSET = {"AD": 0, "BE": 543, "JS": -1182}


def _calendar(calendar: Optional[KhmerCalendar]) -> KhmerCalendar:
    if calendar is not None:
        return calendar
    from .api import get_calendar
    return get_calendar()


def khmer_month_range(month: int, be_year: int, *, calendar: Optional[KhmerCalendar] = None) -> List[Dict[str, Any]]:
    """One record per lunar day of `month` in `be_year`."""
    n = _calendar(calendar).days_in_month(month, be_year)
    out = []
    for day in range(n):
        lday = khmer_lunar_day(day)
        out.append({
            "day": day,
            "count": lday.count,
            "phase": lday.phase,
            "formatted": f"{lday.count}{MOON_PHASE_NAMES[lday.phase]}",
        })
    return out


def find_lunar_day_occurrences(
    count: int,
    phase: MoonPhase,
    gregorian_year: int,
    *,
    calendar: Optional[KhmerCalendar] = None,
) -> List[Dict[str, Any]]:
    """Every civil day of `gregorian_year` whose lunar day is `count` `phase`."""
    if not 1 <= count <= 15:
        raise InvalidInputError(f"Lunar day count must be 1..15, got {count}")
    cal = _calendar(calendar)
    phase = MoonPhase(phase)
    out = []
    d = date(gregorian_year, 1, 1)
    end = date(gregorian_year + 1, 1, 1)
    while d < end:
        lunar = cal.find_lunar_date(d)
        lday = lunar.lunar_day
        if lday.count == count and lday.phase == phase:
            out.append({
                "gregorian": d,
                "khmer": render_lunar(cal.day_info(d)),
                "month": lunar.month,
            })
        d += timedelta(days=1)
    return out


def buddhist_holidays(gregorian_year: int, *, calendar: Optional[KhmerCalendar] = None) -> Dict[str, Dict[str, Any]]:
    cal = _calendar(calendar)
    visakha = cal.visakha_bochea(gregorian_year)
    new_year = cal.new_year_moment(gregorian_year)
    return {
        "visakha_bochea": {
            "name": "ព្រះរាជពិធីវិសាខបូជា",
            "name_en": "Visakha Bochea",
            "date": visakha.date(),
            "khmer_date": render_lunar(cal.day_info(visakha)),
        },
        "khmer_new_year": {
            "name": "បុណ្យចូលឆ្នាំខ្មែរ",
            "name_en": "Khmer New Year",
            "date": new_year.date(),
            "moment": new_year,
            "khmer_date": render_lunar(cal.day_info(new_year)),
        },
    }


def convert_era(year: int, from_era: str, to_era: str) -> int:
    """
    Shift a year number between Anno Domini, Buddhist Era and Jolak Sakaraj.

    Fixed offsets only: the BE offset assumes a date before Visakha Bochea.
    Use `be_year` for an exact instant.
    """
    src, dst = from_era.upper(), to_era.upper()
    for era in (src, dst):
        if era not in _ERA_OFFSET:
            raise InvalidInputError(f"Unknown era '{era}'. Available: {list(ERAS)}")
    return year - _ERA_OFFSET[src] + _ERA_OFFSET[dst]


def is_valid_khmer_date(day: int, month: int, be_year: int, *, calendar: Optional[KhmerCalendar] = None) -> bool:
    if not 0 <= month <= 13 or be_year < 0:
        return False
    cal = _calendar(calendar)
    if month in (LunarMonth.PATHAM_ASATH, LunarMonth.TUTIY_ASATH) and not cal.is_leap_month(be_year):
        return False
    if month == LunarMonth.ASATH and cal.is_leap_month(be_year):
        return False
    return 0 <= day < cal.days_in_month(month, be_year)


def season(t: Instant, *, calendar: Optional[KhmerCalendar] = None) -> Dict[str, str]:
    name, name_en = season_of_month(_calendar(calendar).find_lunar_date(t).month)
    return {"name": name, "name_en": name_en}


def diff_in_days(a: Instant, b: Instant) -> int:
    """Whole civil days from `a` to `b` (negative when `b` is earlier)."""
    return (civil_day(b) - civil_day(a)).days
