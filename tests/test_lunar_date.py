from datetime import date, datetime, timedelta

import pytest

import khmercal
from khmercal.core.time import to_jdn
from khmercal.core.types import KhmerLunarDay, LunarDate, LunarMonth, MoonPhase, khmer_lunar_day
from khmercal.engines.lunar_date import LunarDateFinder, LunarWalkParams, maybe_be_year
from khmercal.engines.specs import DEFAULT_WALK


def test_historical_fixture_1996():
    lunar = khmercal.find_lunar_date(date(1996, 9, 24))
    assert lunar.day == 11
    # BE 2540 carries the Asath pair, so late September is still Phatrobot
    assert lunar.month == LunarMonth.PHATROBOT
    assert lunar.lunar_day == KhmerLunarDay(count=12, phase=MoonPhase.WAXING)


@pytest.mark.parametrize("d", [date(2022, 9, 25), date(2023, 10, 14), date(2024, 10, 2), date(2025, 9, 22)])
def test_pchum_ben_dates(d):
    lunar = khmercal.find_lunar_date(d)
    assert lunar.month == LunarMonth.PHATROBOT
    assert lunar.lunar_day == KhmerLunarDay(count=15, phase=MoonPhase.WANING)


def test_epoch_is_first_day_of_boss():
    lunar = khmercal.find_lunar_date(date(1900, 1, 1))
    assert lunar == LunarDate(day=0, month=LunarMonth.BOSS, month_start_jdn=to_jdn(date(1900, 1, 1)))


def test_time_of_day_ignored():
    d = date(2024, 4, 14)
    assert khmercal.find_lunar_date(datetime(2024, 4, 14, 23, 59)) == khmercal.find_lunar_date(d)
    assert khmercal.find_lunar_date(datetime(2024, 4, 14, 0, 0)) == khmercal.find_lunar_date(d)


def test_month_start_plus_day_is_target():
    d = date(1900, 1, 1)
    end = date(2100, 1, 1)
    while d < end:
        lunar = khmercal.find_lunar_date(d)
        assert 0 <= lunar.day <= 29
        assert lunar.month_start_jdn + lunar.day == to_jdn(d)
        assert lunar.month_start + timedelta(days=lunar.day) == d
        assert khmercal.find_lunar_date(lunar.month_start + timedelta(days=lunar.day)) == lunar
        d += timedelta(days=53)


def test_input_not_mutated():
    t = datetime(2024, 6, 1, 12, 30)
    before = (t.year, t.month, t.day, t.hour, t.minute)
    khmercal.find_lunar_date(t)
    assert (t.year, t.month, t.day, t.hour, t.minute) == before


def test_walk_before_year_one():
    finder = LunarDateFinder(DEFAULT_WALK)
    target = to_jdn(date(1, 1, 1)) - 200
    lunar, trace = finder.walk(target)
    assert lunar.month_start_jdn + lunar.day == target
    assert trace.year_steps <= trace.max_year_steps


@pytest.mark.parametrize(
    "day, count, phase",
    [
        (0, 1, MoonPhase.WAXING),
        (14, 15, MoonPhase.WAXING),
        (15, 1, MoonPhase.WANING),
        (29, 15, MoonPhase.WANING),
    ],
)
def test_khmer_lunar_day(day, count, phase):
    assert khmer_lunar_day(day) == KhmerLunarDay(count=count, phase=phase)
    assert khmercal.khmer_lunar_day(day) == KhmerLunarDay(count=count, phase=phase)


def test_maybe_be_year():
    assert maybe_be_year(date(2024, 3, 15)) == 2567
    assert maybe_be_year(date(2024, 4, 30)) == 2567
    assert maybe_be_year(date(2024, 5, 1)) == 2568
    assert maybe_be_year(date(2024, 6, 15)) == 2568
    assert khmercal.maybe_be_year(datetime(2024, 6, 15, 8)) == 2568


def test_walk_params_reject_asath_pair():
    with pytest.raises(ValueError):
        LunarWalkParams(epoch=date(1900, 1, 1), epoch_month=LunarMonth.PATHAM_ASATH)
