"""
khmercal.engines.month_cycle
----------------------------
Month ordering and month lengths of the Khmer lunar year.
"""

from __future__ import annotations

from typing import Dict, List

from ..core.errors import InvalidInputError
from ..core.types import LunarMonth
from .aharkun import check_be_year
from .leap import is_leap_day, is_leap_month

M = LunarMonth

# Successors that do not depend on the year. CHESTH is resolved in next_month.
_SUCCESSOR: Dict[LunarMonth, LunarMonth] = {
    M.MIKASIR: M.BOSS,
    M.BOSS: M.MEAK,
    M.MEAK: M.PHALKUN,
    M.PHALKUN: M.CHAET,
    M.CHAET: M.PISAK,
    M.PISAK: M.CHESTH,
    M.ASATH: M.SRAP,
    M.SRAP: M.PHATROBOT,
    M.PHATROBOT: M.ASSUJ,
    M.ASSUJ: M.KATTIK,
    M.KATTIK: M.MIKASIR,
    M.PATHAM_ASATH: M.TUTIY_ASATH,
    M.TUTIY_ASATH: M.SRAP,
}


def as_month(month: int) -> LunarMonth:
    try:
        return LunarMonth(month)
    except ValueError:
        raise InvalidInputError(f"Invalid Khmer month index: {month}") from None


def days_in_month(month: int, be_year: int) -> int:
    check_be_year(be_year)
    m = as_month(month)
    if m == M.CHESTH and is_leap_day(be_year):
        return 30
    if m in (M.PATHAM_ASATH, M.TUTIY_ASATH):
        return 30
    # Mikasir 29, Boss 30, Meak 29, ...
    return 29 if m % 2 == 0 else 30


def days_in_year(be_year: int) -> int:
    if is_leap_month(be_year):
        return 384
    if is_leap_day(be_year):
        return 355
    return 354


def next_month(month: int, be_year: int) -> LunarMonth:
    check_be_year(be_year)
    m = as_month(month)
    if m == M.CHESTH:
        return M.PATHAM_ASATH if is_leap_month(be_year) else M.ASATH
    return _SUCCESSOR[m]


def months_of_year(be_year: int) -> List[LunarMonth]:
    """Lunar months of a BE year in order, Mikasir first (12 or 13 months)."""
    out = [M.MIKASIR]
    m = next_month(M.MIKASIR, be_year)
    while m != M.MIKASIR:
        out.append(m)
        m = next_month(m, be_year)
    return out
