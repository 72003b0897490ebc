"""
khmercal.engines.new_year
-------------------------
Moment of Khmer New Year for a Gregorian year.

Lookup order: the override table of published moments, then the
calculator's own cache, then the Soriyatra Lerng Sak computation aligned
against the lunar walk.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, Mapping, Optional

from ..core.constants import NEW_YEAR_OVERRIDES, parse_override
from ..core.errors import InvalidInputError
from ..core.types import SoriyatraInfo
from .lunar_date import LunarDateFinder
from .soriyatra import js_year_of, soriyatra_lerng_sak

log = logging.getLogger(__name__)

# Lerng Sak arithmetic reaches back two JS years (JS 0 = 638 AD).
EARLIEST_COMPUTED_YEAR = 640

# Day and month of the anchor the alignment starts from.
ANCHOR_MONTH = 4
ANCHOR_DAY = 17


class NewYearCache:
    """
    Process-lifetime memo of New Year moments keyed by Gregorian year.

    Append-only: the first value stored for a year is kept. Writers are
    serialised by the lock; `get` reads the dict without it, so a reader
    never waits on a write for another year.
    """
    def __init__(self) -> None:
        self._store: Dict[int, datetime] = {}
        self._lock = threading.Lock()

    def get(self, year: int) -> Optional[datetime]:
        return self._store.get(year)

    def set(self, year: int, moment: datetime) -> datetime:
        with self._lock:
            return self._store.setdefault(year, moment)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __contains__(self, year: object) -> bool:
        with self._lock:
            return year in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


@dataclass(frozen=True)
class NewYearParams:
    overrides: Mapping[int, str] = field(default_factory=lambda: dict(NEW_YEAR_OVERRIDES))
    use_cache: bool = True

    def __post_init__(self) -> None:
        for year, text in self.overrides.items():
            parsed = parse_override(text)
            if parsed.year != year:
                raise ValueError(f"Override for {year} names year {parsed.year}")


def lunar_offset(day: int, month: int) -> int:
    """Elapsed lunar days counted from Chaet, 29 days per month."""
    return (int(month) - 4) * 29 + day


class NewYearCalculator:
    def __init__(self, params: NewYearParams, finder: LunarDateFinder, cache: Optional[NewYearCache] = None):
        self.p = params
        self.finder = finder
        if cache is None and params.use_cache:
            cache = NewYearCache()
        self.cache = cache
        self._overrides = {y: parse_override(s) for y, s in params.overrides.items()}

    def moment(self, gregorian_year: int) -> datetime:
        if gregorian_year in self._overrides:
            log.debug("New Year %d taken from override table", gregorian_year)
            return self._overrides[gregorian_year]

        if self.cache is not None:
            hit = self.cache.get(gregorian_year)
            if hit is not None:
                return hit

        result = self.compute(gregorian_year)
        log.debug("New Year %d computed as %s", gregorian_year, result.isoformat())
        if self.cache is not None:
            result = self.cache.set(gregorian_year, result)
        return result

    def compute(self, gregorian_year: int) -> datetime:
        """Soriyatra Lerng Sak computation, bypassing overrides and cache."""
        if gregorian_year < EARLIEST_COMPUTED_YEAR:
            raise InvalidInputError(
                f"New Year can only be computed from {EARLIEST_COMPUTED_YEAR}, got {gregorian_year}"
            )
        info = soriyatra_lerng_sak(js_year_of(gregorian_year))
        anchor = self.anchor(gregorian_year, info)

        lunar = self.finder.find(anchor)
        ls_day, ls_month = info.lunar_date_lerng_sak
        diff = lunar_offset(lunar.day, lunar.month) - lunar_offset(ls_day, ls_month)

        return anchor - timedelta(days=diff + info.number_of_new_year_days - 1)

    @staticmethod
    def anchor(gregorian_year: int, info: SoriyatraInfo) -> datetime:
        # hours past 23 roll over into the next day
        hour, minute = info.time_of_new_year
        return datetime(gregorian_year, ANCHOR_MONTH, ANCHOR_DAY) + timedelta(hours=hour, minutes=minute)
