"""
khmercal.engines.soriyatra
--------------------------
Soriyatra Lerng Sak: the Jolak-Sakaraj (JS) year arithmetic behind the
Khmer New Year moment.

The sun-position step (`sun_info`) is a fixed arithmetic stand-in for the
traditional solar tables. It is kept exactly as is because published New
Year moments outside the override table depend on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.errors import InvalidInputError
from ..core.types import LunarMonth, SoriyatraInfo, SotinInfo

HARKUN_NUM = 292207
HARKUN_DEN = 800
HARKUN_SHIFT = 373
AVAMAN_SHIFT = 650
AVAMAN_MOD = 692

# Offset between a Gregorian year (after New Year) and its JS year.
JS_OFFSET = 544 - 1182


@dataclass(frozen=True)
class JsYearInfo:
    harkun: int
    kromathopol: int
    avaman: int
    bodithey: int


def js_year_of(gregorian_year: int) -> int:
    return gregorian_year + JS_OFFSET


def info(js_year: int) -> JsYearInfo:
    if js_year < 0:
        raise InvalidInputError(f"Jolak Sakaraj year must be positive, got {js_year}")
    h = HARKUN_NUM * js_year + HARKUN_SHIFT
    harkun = h // HARKUN_DEN + 1
    kromathopol = HARKUN_DEN - (h % HARKUN_DEN)
    a = 11 * harkun + AVAMAN_SHIFT
    return JsYearInfo(
        harkun=harkun,
        kromathopol=kromathopol,
        avaman=a % AVAMAN_MOD,
        bodithey=(harkun + a // AVAMAN_MOD) % 30,
    )


def has_366_days(js_year: int) -> bool:
    return info(js_year).kromathopol <= 207


def is_athikameas(js_year: int) -> bool:
    """Leap-month year, with the 25/5 and 24/6 consecutive-year rules."""
    b = info(js_year).bodithey
    b_next = info(js_year + 1).bodithey
    if b == 25 and b_next == 5:
        return False
    return b >= 25 or b <= 5 or (b == 24 and b_next == 6)


def is_chantreathimeas(js_year: int) -> bool:
    """Leap-day year, with the 137/0 consecutive-year rule in both directions."""
    avaman = info(js_year).avaman
    avaman_next = info(js_year + 1).avaman
    has366 = has_366_days(js_year)
    if has366 and avaman < 127:
        return True
    if avaman == 137 and avaman_next == 0:
        return False
    if not has366 and avaman < 138:
        return True
    return info(js_year - 1).avaman == 137 and avaman == 0


def sun_info(sotin: int) -> SotinInfo:
    # Placeholder for the traditional sun-position tables.
    return SotinInfo(sotin=sotin, angsar=sotin % 2, avaman=(sotin * 17) % AVAMAN_MOD)


def new_year_time(sotins: Tuple[SotinInfo, ...]) -> Tuple[int, int]:
    """(hour, minute) of the New Year on the anchor day; the hour can reach 29."""
    avaman = sotins[0].avaman
    return 6 + avaman % 24, avaman % 60


def soriyatra_lerng_sak(js_year: int) -> SoriyatraInfo:
    """All intermediate values of the New Year computation for one JS year."""
    if js_year < 2:
        raise InvalidInputError(f"Lerng Sak needs two preceding JS years, got {js_year}")
    base = info(js_year)
    has366 = has_366_days(js_year)
    athikameas = is_athikameas(js_year)
    chantreathimeas = is_chantreathimeas(js_year)

    bodithey = base.bodithey
    if is_athikameas(js_year - 1) and is_chantreathimeas(js_year - 1):
        bodithey = (bodithey + 1) % 30

    if bodithey >= 6:
        lerng_sak = (bodithey - 1, LunarMonth.CHAET)
    else:
        lerng_sak = (bodithey, LunarMonth.PISAK)

    candidates = (363, 364, 365, 366) if has366 else (362, 363, 364, 365)
    sotins = tuple(sun_info(s) for s in candidates)

    return SoriyatraInfo(
        js_year=js_year,
        harkun=base.harkun,
        kromathopol=base.kromathopol,
        avaman=base.avaman,
        bodithey=base.bodithey,
        has_366_days=has366,
        is_athikameas=athikameas,
        is_chantreathimeas=chantreathimeas,
        jesth_has_30=chantreathimeas,
        day_lerng_sak=(base.harkun - 2) % 7,
        lunar_date_lerng_sak=lerng_sak,
        new_years_day_sotins=sotins,
        time_of_new_year=new_year_time(sotins),
    )
