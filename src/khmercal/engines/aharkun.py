"""
khmercal.engines.aharkun
------------------------
Integer arithmetic on a Buddhist-Era year: Aharkun and the quantities
derived from it (Avoman, Bodithey, Kromthupul).

Everything here is exact integer math. Python ints do not overflow, so
`be_year * 292207` is safe for any year.
"""

from __future__ import annotations

from ..core.errors import InvalidInputError

# Aharkun accumulator: 292207 / 800 days per solar year
AHARKUN_NUM = 292207
AHARKUN_DEN = 800
AHARKUN_SHIFT = 499

# Avoman cycle
AVOMAN_MOD = 692

# A Kromthupul at or below this value marks a 366-day solar year.
SOLAR_LEAP_LIMIT = 207


def check_be_year(be_year: int) -> None:
    if be_year < 0:
        raise InvalidInputError("Buddhist Era year must be positive")


def _aharkun_numerator(be_year: int) -> int:
    return be_year * AHARKUN_NUM + AHARKUN_SHIFT


def aharkun(be_year: int) -> int:
    """
    Aharkun (អាហារគុណ): elapsed-day accumulator underlying Avoman and Bodithey.
    """
    check_be_year(be_year)
    return _aharkun_numerator(be_year) // AHARKUN_DEN + 4


def aharkun_mod(be_year: int) -> int:
    check_be_year(be_year)
    return _aharkun_numerator(be_year) % AHARKUN_DEN


def kromthupul(be_year: int) -> int:
    """Kromthupul in 1..800."""
    return AHARKUN_DEN - aharkun_mod(be_year)


def is_solar_leap(be_year: int) -> bool:
    return kromthupul(be_year) <= SOLAR_LEAP_LIMIT


def avoman(be_year: int) -> int:
    """Avoman (អាវមាន) in 0..691; drives the leap-day decision."""
    ahk = aharkun(be_year)
    return (11 * ahk + 25) % AVOMAN_MOD


def bodithey(be_year: int) -> int:
    """Bodithey (បូតិថី) in 0..29; drives the leap-month decision."""
    ahk = aharkun(be_year)
    avml = (11 * ahk + 25) // AVOMAN_MOD
    return (avml + ahk + 29) % 30
