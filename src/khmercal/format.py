"""
khmercal.format
---------------
Khmer rendering of numbers, Gregorian dates, times and lunar dates.

Lunar formats
-------------
``full``    ថ្ងៃW dN ខែm ឆ្នាំa e ពុទ្ធសករាជ b
``medium``  dN ខែm ព.ស. b
``short``   dN ខែm

Any other string is a token template; each token letter is replaced once:

====  ===========================================
W     weekday name
w     weekday, short
d     lunar day count (1..15)
D     lunar day count, two digits
n     moon phase, short (ក / រ)
N     moon phase (កើត / រោច)
m     lunar month name
M     solar month name
a     animal year
e     era year
b     Buddhist Era year
c     Gregorian year
j     Jolak Sakaraj year
====  ===========================================

All numbers are written with Khmer digits.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Optional, Union

from .core.constants import (
    ANIMAL_YEARS,
    ARABIC_DIGITS,
    ERA_YEARS,
    KHMER_DIGITS,
    MOON_PHASE_NAMES,
    MOON_PHASE_SHORT,
    SOLAR_MONTH_NAMES,
    WEEKDAYS,
    WEEKDAYS_SHORT,
)
from .core.constants import lunar_month_name as _lunar_month_name
from .core.errors import InvalidInputError
from .core.time import Instant, as_datetime, weekday_sunday0
from .core.types import KhmerDayInfo
from .engines.calendar import KhmerCalendar

_TOKEN_RE = re.compile(r"[WwdDnNmMaebcj]")
_KHMER_TEXT_RE = re.compile(r"[\u1780-\u17FF]")

DATE_STYLES = ("full", "medium", "short")

RIEL = "រៀល"
ORDINAL_PREFIX = "ទី"


def _calendar(calendar: Optional[KhmerCalendar]) -> KhmerCalendar:
    if calendar is not None:
        return calendar
    from .api import get_calendar
    return get_calendar()


# ============================================================
# Numbers
# ============================================================

def to_khmer_number(value: Union[str, int]) -> str:
    return "".join(KHMER_DIGITS.get(ch, ch) for ch in str(value))


def from_khmer_number(text: str) -> str:
    return "".join(ARABIC_DIGITS.get(ch, ch) for ch in text)


def format_number(value: float, decimals: int = 0, thousands_sep: str = ",") -> str:
    if decimals < 0:
        raise InvalidInputError(f"decimals must be >= 0, got {decimals}")
    s = f"{value:,.{decimals}f}"
    if thousands_sep != ",":
        s = s.replace(",", thousands_sep)
    return to_khmer_number(s)


def format_currency(amount: float, show_symbol: bool = True) -> str:
    s = format_number(amount, 0, ",")
    return f"{s} {RIEL}" if show_symbol else s


def format_ordinal(n: int) -> str:
    return ORDINAL_PREFIX + to_khmer_number(n)


def is_khmer_text(text: str) -> bool:
    return _KHMER_TEXT_RE.search(text) is not None


# ============================================================
# Gregorian dates and times
# ============================================================

def day_name(t: Instant) -> str:
    return WEEKDAYS[weekday_sunday0(t)]


def month_name(t: Instant) -> str:
    return SOLAR_MONTH_NAMES[t.month - 1]


def lunar_month_name(month: int) -> str:
    return _lunar_month_name(month)


def format_date(t: Instant, style: str = "full") -> str:
    dt = as_datetime(t)
    day = to_khmer_number(dt.day)
    year = to_khmer_number(dt.year)
    if style == "full":
        return f"ថ្ងៃ{day_name(dt)} ទី{day} ខែ{month_name(dt)} ឆ្នាំ{year}"
    if style == "medium":
        return f"ទី{day} ខែ{month_name(dt)} ឆ្នាំ{year}"
    if style == "short":
        return f"{day}/{to_khmer_number(dt.month)}/{year}"
    raise InvalidInputError(f"Invalid date format: {style}. Available: {list(DATE_STYLES)}")


def format_time(t: Instant, use_24_hour: bool = False) -> str:
    dt = as_datetime(t)
    minute = to_khmer_number(f"{dt.minute:02d}")
    if use_24_hour:
        return f"{to_khmer_number(f'{dt.hour:02d}')}ម៉ោង{minute}នាទី"
    hour = dt.hour % 12 or 12
    period = "ព្រឹក" if dt.hour < 12 else "ល្ងាច"
    return f"{to_khmer_number(hour)}ម៉ោង{minute}នាទី{period}"


# ============================================================
# Lunar dates
# ============================================================

def _token_values(info: KhmerDayInfo, js_era: bool = False) -> Dict[str, Callable[[], str]]:
    dt = info.instant
    w = weekday_sunday0(dt)
    lday = info.lunar_day
    return {
        "W": lambda: WEEKDAYS[w],
        "w": lambda: WEEKDAYS_SHORT[w],
        "d": lambda: to_khmer_number(lday.count),
        "D": lambda: to_khmer_number(f"{lday.count:02d}"),
        "n": lambda: MOON_PHASE_SHORT[lday.phase],
        "N": lambda: MOON_PHASE_NAMES[lday.phase],
        "m": lambda: _lunar_month_name(info.lunar.month),
        "M": lambda: SOLAR_MONTH_NAMES[dt.month - 1],
        "a": lambda: ANIMAL_YEARS[info.animal_year],
        # the full preset names the era after the Jolak Sakaraj year
        "e": lambda: ERA_YEARS[info.jolak_sakaraj_year % 10 if js_era else info.era_year],
        "b": lambda: to_khmer_number(info.be_year),
        "c": lambda: to_khmer_number(dt.year),
        "j": lambda: to_khmer_number(info.jolak_sakaraj_year),
    }


_PRESETS = {
    "full": "ថ្ងៃW dN ខែm ឆ្នាំa e ពុទ្ធសករាជ b",
    "medium": "dN ខែm ព.ស. b",
    "short": "dN ខែm",
}


def render_lunar(info: KhmerDayInfo, fmt: str = "full") -> str:
    """Render an already computed day with a preset name or token template."""
    template = _PRESETS.get(fmt, fmt)
    values = _token_values(info, js_era=(fmt == "full"))
    return _TOKEN_RE.sub(lambda mo: values[mo.group(0)](), template)


def format_lunar_date(t: Instant, fmt: str = "full", *, calendar: Optional[KhmerCalendar] = None) -> str:
    info = _calendar(calendar).day_info(t)
    return render_lunar(info, fmt)
