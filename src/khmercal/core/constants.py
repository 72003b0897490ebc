"""
khmercal.core.constants
-----------------------
Immutable name tables and the historical New Year override table.
"""

from __future__ import annotations

from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Tuple

from .errors import InvalidInputError
from .types import LunarMonth, MoonPhase

# Index order follows LunarMonth.
LUNAR_MONTH_NAMES: Tuple[str, ...] = (
    "មិគសិរ",
    "បុស្ស",
    "មាឃ",
    "ផល្គុន",
    "ចេត្រ",
    "ពិសាខ",
    "ជេស្ឋ",
    "អាសាឍ",
    "ស្រាពណ៍",
    "ភទ្របទ",
    "អស្សុជ",
    "កត្តិក",
    "បឋមាសាឍ",
    "ទុតិយាសាឍ",
)

_LUNAR_MONTH_BY_NAME: Mapping[str, LunarMonth] = MappingProxyType(
    {name: LunarMonth(i) for i, name in enumerate(LUNAR_MONTH_NAMES)}
)

SOLAR_MONTH_NAMES: Tuple[str, ...] = (
    "មករា", "កុម្ភៈ", "មីនា", "មេសា", "ឧសភា", "មិថុនា",
    "កក្កដា", "សីហា", "កញ្ញា", "តុលា", "វិច្ឆិកា", "ធ្នូ",
)

ANIMAL_YEARS: Tuple[str, ...] = (
    "ជូត", "ឆ្លូវ", "ខាល", "ថោះ", "រោង", "ម្សាញ់",
    "មមី", "មមែ", "វក", "រកា", "ច", "កុរ",
)

ERA_YEARS: Tuple[str, ...] = (
    "សំរឹទ្ធិស័ក", "ឯកស័ក", "ទោស័ក", "ត្រីស័ក", "ចត្វាស័ក",
    "បញ្ចស័ក", "ឆស័ក", "សប្តស័ក", "អដ្ឋស័ក", "នព្វស័ក",
)

MOON_PHASE_NAMES: Mapping[MoonPhase, str] = MappingProxyType(
    {MoonPhase.WAXING: "កើត", MoonPhase.WANING: "រោច"}
)
MOON_PHASE_SHORT: Mapping[MoonPhase, str] = MappingProxyType(
    {MoonPhase.WAXING: "ក", MoonPhase.WANING: "រ"}
)

# Sunday first, matching core.time.weekday_sunday0
WEEKDAYS: Tuple[str, ...] = ("អាទិត្យ", "ចន្ទ", "អង្គារ", "ពុធ", "ព្រហស្បតិ៍", "សុក្រ", "សៅរ៍")
WEEKDAYS_SHORT: Tuple[str, ...] = ("អា", "ច", "អ", "ព", "ព្រ", "សុ", "ស")

KHMER_DIGITS: Mapping[str, str] = MappingProxyType(
    {"0": "០", "1": "១", "2": "២", "3": "៣", "4": "៤", "5": "៥", "6": "៦", "7": "៧", "8": "៨", "9": "៩"}
)
ARABIC_DIGITS: Mapping[str, str] = MappingProxyType({v: k for k, v in KHMER_DIGITS.items()})

# Years whose published New Year moment differs from the arithmetic.
NEW_YEAR_OVERRIDES: Mapping[int, str] = MappingProxyType({
    1879: "12-04-1879 11:36",
    1897: "13-04-1897 02:00",
    2011: "14-04-2011 13:12",
    2012: "14-04-2012 19:11",
    2013: "14-04-2013 02:12",
    2014: "14-04-2014 08:07",
    2015: "14-04-2015 14:02",
})
NEW_YEAR_OVERRIDE_FORMAT = "%d-%m-%Y %H:%M"


def parse_override(text: str) -> datetime:
    return datetime.strptime(text, NEW_YEAR_OVERRIDE_FORMAT)


def lunar_month_name(month: int) -> str:
    if not 0 <= int(month) < len(LUNAR_MONTH_NAMES):
        raise InvalidInputError(f"Invalid Khmer month index: {month}")
    return LUNAR_MONTH_NAMES[int(month)]


def lunar_month_from_name(name: str) -> LunarMonth:
    try:
        return _LUNAR_MONTH_BY_NAME[name]
    except KeyError:
        raise InvalidInputError(f"Unknown Khmer month name '{name}'") from None


# (Khmer name, English name)
COLD_SEASON = ("រដូវរងារ", "Cold Season")
HOT_SEASON = ("រដូវក្ដៅ", "Hot Season")
RAINY_SEASON = ("រដូវវស្សា", "Rainy Season")

_COLD_MONTHS = frozenset({LunarMonth.MIKASIR, LunarMonth.BOSS, LunarMonth.MEAK})
_HOT_MONTHS = frozenset({LunarMonth.PHALKUN, LunarMonth.CHAET, LunarMonth.PISAK})


def season_of_month(month: int) -> Tuple[str, str]:
    """Traditional season of a lunar month; every other month is rainy season."""
    m = int(month)
    if m in _COLD_MONTHS:
        return COLD_SEASON
    if m in _HOT_MONTHS:
        return HOT_SEASON
    return RAINY_SEASON
