import pytest

import khmercal
from khmercal.core.errors import InvalidInputError
from khmercal.core.types import LeapType
from khmercal.engines import leap
from khmercal.engines.month_cycle import days_in_year


def test_known_years():
    assert leap.is_leap_month(2567)
    assert not leap.is_leap_day(2567)
    assert days_in_year(2567) == 384

    assert not leap.is_leap_month(2568)
    assert not leap.is_leap_day(2568)
    assert days_in_year(2568) == 354


def test_leap_month_and_day_exclusive():
    for y in range(0, 3000):
        assert not (leap.is_leap_month(y) and leap.is_leap_day(y))
        assert leap.protetin_leap(y) != LeapType.LEAP_BOTH


def test_days_in_year_matches_classification():
    for y in range(2000, 2700):
        n = days_in_year(y)
        if leap.is_leap_month(y):
            assert n == 384
        elif leap.is_leap_day(y):
            assert n == 355
        else:
            assert n == 354


def test_both_spills_leap_day_into_next_year():
    hits = 0
    for y in range(0, 3000):
        if leap.bodithey_leap(y) == LeapType.LEAP_BOTH:
            hits += 1
            assert leap.protetin_leap(y) == LeapType.LEAP_MONTH
            if leap.bodithey_leap(y + 1) == LeapType.NONE:
                assert leap.protetin_leap(y + 1) == LeapType.LEAP_DAY
    assert hits > 0


def test_year_zero_and_one():
    # year 0 is bodithey 3 (leap month) and avoman 69 (leap day)
    assert leap.bodithey_leap(0) == LeapType.LEAP_BOTH
    assert leap.protetin_leap(0) == LeapType.LEAP_MONTH
    assert leap.bodithey_leap(1) == LeapType.NONE
    assert leap.is_leap_day(1)
    assert days_in_year(1) == 355


def test_bodithey_25_then_5_rule():
    found = False
    for y in range(0, 20000):
        if leap.bodithey(y) == 25 and leap.bodithey(y + 1) == 5:
            found = True
            assert not leap.bodithey_is_leap(y)
            assert leap.bodithey_is_leap(y + 1)
    assert found


def test_bodithey_24_then_6_rule():
    for y in range(0, 20000):
        if leap.bodithey(y) == 24 and leap.bodithey(y + 1) == 6:
            assert leap.bodithey_is_leap(y)


def test_avoman_137_then_0_rule():
    for y in range(0, 20000):
        if leap.avoman(y) == 137 and leap.avoman(y + 1) == 0 and not leap.is_solar_leap(y):
            assert not leap.avoman_is_leap(y)


def test_very_large_year():
    y = 10**12
    assert leap.protetin_leap(y) in (LeapType.NONE, LeapType.LEAP_MONTH, LeapType.LEAP_DAY)
    assert days_in_year(y) in (354, 355, 384)


def test_negative_year_rejected():
    with pytest.raises(InvalidInputError):
        leap.is_leap_month(-1)
    with pytest.raises(InvalidInputError):
        khmercal.is_leap_day(-5)


def test_public_api_matches_engine():
    for y in (2560, 2567, 2568, 2570):
        assert khmercal.is_leap_month(y) == leap.is_leap_month(y)
        assert khmercal.is_leap_day(y) == leap.is_leap_day(y)
        assert khmercal.leap_type(y) == leap.protetin_leap(y)
