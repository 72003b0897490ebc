"""
khmercal.engines.year_labels
----------------------------
Year labels of a civil instant: Buddhist Era year (changes at Visakha
Bochea), animal year, era year and Jolak-Sakaraj year (change at the
New Year moment).
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from ..core.errors import ComputationFailureError, InvalidInputError
from ..core.time import Instant, as_datetime
from ..core.types import LunarMonth
from .lunar_date import LunarDateFinder
from .new_year import NewYearCalculator

VISAKHA_DAY = 14
VISAKHA_MONTH = LunarMonth.PISAK
MAX_SCAN_DAYS = 365

JS_EPOCH_OFFSET = 1182


class YearLabeler:
    def __init__(self, finder: LunarDateFinder, new_year: NewYearCalculator):
        self.finder = finder
        self.new_year = new_year

    def visakha_bochea(self, gregorian_year: int) -> datetime:
        """Midnight of the full-moon day of Pisak in `gregorian_year`."""
        if gregorian_year < 1:
            raise InvalidInputError(f"Gregorian year must be positive, got {gregorian_year}")
        d = date(gregorian_year, 1, 1)
        for _ in range(MAX_SCAN_DAYS):
            lunar = self.finder.find(d)
            if lunar.day == VISAKHA_DAY and lunar.month == VISAKHA_MONTH:
                return datetime(d.year, d.month, d.day)
            d += timedelta(days=1)
        raise ComputationFailureError(f"Cannot find Visakha Bochea day for year {gregorian_year}")

    def be_year(self, t: Instant) -> int:
        dt = as_datetime(t)
        if dt >= self.visakha_bochea(dt.year):
            return dt.year + 544
        return dt.year + 543

    def _after_new_year(self, dt: datetime) -> bool:
        return dt >= self.new_year.moment(dt.year)

    def new_year_be(self, t: Instant) -> int:
        """BE year counted from the New Year moment instead of Visakha Bochea."""
        dt = as_datetime(t)
        return dt.year + (544 if self._after_new_year(dt) else 543)

    def animal_year(self, t: Instant) -> int:
        """Index into the 12-year animal cycle, 0 = rat."""
        return (self.new_year_be(t) + 4) % 12

    def era_year(self, t: Instant) -> int:
        """Index into the 10-year era cycle, 0 = សំរឹទ្ធិស័ក."""
        return (self.new_year_be(t) - 1) % 10

    def jolak_sakaraj_year(self, t: Instant) -> int:
        return self.new_year_be(t) - JS_EPOCH_OFFSET
