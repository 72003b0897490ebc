from __future__ import annotations
from datetime import date, datetime, timedelta
from typing import Tuple, Union

Instant = Union[date, datetime]


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def jdn_to_ymd(jdn: int) -> Tuple[int, int, int]:
    """
    Fliegel-Van Flandern inverse of to_jdn (proleptic Gregorian).

    Works for any integer, including days before 0001-01-01 that
    `datetime.date` cannot represent. The lunar walk relies on this.
    """
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day

def from_jdn(jdn: int) -> date:
    y, m, d = jdn_to_ymd(jdn)
    return date(y, m, d)

def as_datetime(t: Instant) -> datetime:
    """
    Normalise an instant to a naive wall-clock datetime.

    A bare date means midnight. Aware datetimes keep their wall-clock fields
    and lose the zone: the calendar only anchors civil time.
    """
    if isinstance(t, datetime):
        return t.replace(tzinfo=None) if t.tzinfo is not None else t
    return datetime(t.year, t.month, t.day)

def civil_day(t: Instant) -> date:
    """The civil day an instant falls on."""
    if isinstance(t, datetime):
        return t.date()
    return t

def add_days(t: datetime, days: int) -> datetime:
    return t + timedelta(days=days)

def add_one_year(y: int, m: int, d: int) -> Tuple[int, int, int]:
    """Same month/day one year later; Feb 29 rolls over to Mar 1."""
    if m == 2 and d == 29 and not is_gregorian_leap(y + 1):
        return y + 1, 3, 1
    return y + 1, m, d

def is_gregorian_leap(ad_year: int) -> bool:
    return (ad_year % 4 == 0 and ad_year % 100 != 0) or (ad_year % 400 == 0)

def days_in_gregorian_year(ad_year: int) -> int:
    return 366 if is_gregorian_leap(ad_year) else 365

def day_of_year(t: Instant) -> int:
    d = civil_day(t)
    return (d - date(d.year, 1, 1)).days + 1

def weekday_sunday0(t: Instant) -> int:
    """Weekday with Sunday = 0 .. Saturday = 6 (the order of the Khmer weekday table)."""
    return (to_jdn(civil_day(t)) + 1) % 7
