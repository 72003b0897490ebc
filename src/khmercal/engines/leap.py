"""
khmercal.engines.leap
---------------------
Leap classification of a Buddhist-Era year.

Stage 1 (Bodithey leap) may report a year as both leap-month and leap-day.
Stage 2 (Protetin leap) resolves that: the year keeps the leap month and
the leap day moves to the following year.
"""

from __future__ import annotations

from ..core.types import LeapType
from .aharkun import avoman, bodithey, check_be_year, is_solar_leap

BODITHEY_LEAP_HIGH = 25
BODITHEY_LEAP_LOW = 5
AVOMAN_LIMIT_SOLAR_LEAP = 126
AVOMAN_LIMIT = 137


def bodithey_is_leap(be_year: int) -> bool:
    b = bodithey(be_year)
    leap = b >= BODITHEY_LEAP_HIGH or b <= BODITHEY_LEAP_LOW

    # 25 followed by 5: only the 5 year takes the leap month
    if b == 25 and bodithey(be_year + 1) == 5:
        leap = False
    # 24 followed by 6: the 24 year takes it
    if b == 24 and bodithey(be_year + 1) == 6:
        leap = True
    return leap


def avoman_is_leap(be_year: int) -> bool:
    a = avoman(be_year)
    if is_solar_leap(be_year):
        return a <= AVOMAN_LIMIT_SOLAR_LEAP
    # avoman 137 followed by 0: the 137 year stays regular
    return a <= AVOMAN_LIMIT and avoman(be_year + 1) != 0


def bodithey_leap(be_year: int) -> LeapType:
    check_be_year(be_year)
    month_leap = bodithey_is_leap(be_year)
    day_leap = avoman_is_leap(be_year)
    if month_leap and day_leap:
        return LeapType.LEAP_BOTH
    if month_leap:
        return LeapType.LEAP_MONTH
    if day_leap:
        return LeapType.LEAP_DAY
    return LeapType.NONE


def protetin_leap(be_year: int) -> LeapType:
    b = bodithey_leap(be_year)
    if b == LeapType.LEAP_BOTH:
        return LeapType.LEAP_MONTH
    if b in (LeapType.LEAP_MONTH, LeapType.LEAP_DAY):
        return b
    # year 0 has no predecessor to spill a leap day from
    if be_year > 0 and bodithey_leap(be_year - 1) == LeapType.LEAP_BOTH:
        return LeapType.LEAP_DAY
    return LeapType.NONE


def is_leap_month(be_year: int) -> bool:
    return protetin_leap(be_year) == LeapType.LEAP_MONTH


def is_leap_day(be_year: int) -> bool:
    return protetin_leap(be_year) == LeapType.LEAP_DAY
