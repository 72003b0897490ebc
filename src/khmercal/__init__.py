"""khmercal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize the default calendar on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    find_lunar_date,
    khmer_lunar_day,
    day_info,
    be_year,
    maybe_be_year,
    new_year_moment,
    visakha_bochea,
    animal_year,
    era_year,
    jolak_sakaraj_year,
    is_leap_month,
    is_leap_day,
    leap_type,
    days_in_month,
    days_in_year,
    next_month,
    months_of_year,
    soriyatra_lerng_sak,
    is_gregorian_leap,
    days_in_gregorian_year,
    get_calendar,
    set_calendar,
    make_calendar,
    calendar_info,
)
from .core.errors import KhmerCalError, InvalidInputError, ComputationFailureError
from .core.types import KhmerDayInfo, KhmerLunarDay, LeapType, LunarDate, LunarMonth, MoonPhase
from .engines.calendar import KhmerCalendar, KhmerCalendarParams

__version__ = "0.1.0"

__all__ = [
    "find_lunar_date",
    "khmer_lunar_day",
    "day_info",
    "be_year",
    "maybe_be_year",
    "new_year_moment",
    "visakha_bochea",
    "animal_year",
    "era_year",
    "jolak_sakaraj_year",
    "is_leap_month",
    "is_leap_day",
    "leap_type",
    "days_in_month",
    "days_in_year",
    "next_month",
    "months_of_year",
    "soriyatra_lerng_sak",
    "is_gregorian_leap",
    "days_in_gregorian_year",
    "get_calendar",
    "set_calendar",
    "make_calendar",
    "calendar_info",
    "KhmerCalError",
    "InvalidInputError",
    "ComputationFailureError",
    "KhmerDayInfo",
    "KhmerLunarDay",
    "LeapType",
    "LunarDate",
    "LunarMonth",
    "MoonPhase",
    "KhmerCalendar",
    "KhmerCalendarParams",
]
