from __future__ import annotations
from typing import Any, Dict

from ..core.constants import ANIMAL_YEARS, ERA_YEARS, MOON_PHASE_NAMES, WEEKDAYS, season_of_month
from ..core.time import weekday_sunday0
from ..core.types import KhmerDayInfo
from .registry import register_attribute

def weekday(info: KhmerDayInfo) -> Dict[str, Any]:
    # 0=Sunday..6=Saturday, the order of the Khmer weekday names
    w = weekday_sunday0(info.instant)
    return {"weekday": w, "weekday_name": WEEKDAYS[w]}

def animal_year(info: KhmerDayInfo) -> Dict[str, Any]:
    return {"animal_year": info.animal_year, "animal_year_name": ANIMAL_YEARS[info.animal_year]}

def era_year(info: KhmerDayInfo) -> Dict[str, Any]:
    return {"era_year": info.era_year, "era_year_name": ERA_YEARS[info.era_year]}

def season(info: KhmerDayInfo) -> Dict[str, Any]:
    name, name_en = season_of_month(info.lunar.month)
    return {"season": name, "season_en": name_en}

def moon_phase(info: KhmerDayInfo) -> Dict[str, Any]:
    phase = info.lunar_day.phase
    return {"moon_phase": int(phase), "moon_phase_name": MOON_PHASE_NAMES[phase]}

register_attribute("weekday", weekday)
register_attribute("animal_year", animal_year)
register_attribute("era_year", era_year)
register_attribute("season", season)
register_attribute("moon_phase", moon_phase)
