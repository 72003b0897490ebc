from datetime import date, datetime

import pytest

from khmercal import utils
from khmercal.core.errors import InvalidInputError
from khmercal.core.types import LunarMonth, MoonPhase


def test_khmer_month_range(cal):
    days = utils.khmer_month_range(LunarMonth.MIKASIR, 2568, calendar=cal)
    assert len(days) == 29
    assert days[0]["formatted"] == "1កើត"
    assert days[14]["formatted"] == "15កើត"
    assert days[15]["formatted"] == "1រោច"
    assert days[-1]["count"] == 14 and days[-1]["phase"] == MoonPhase.WANING
    assert len(utils.khmer_month_range(LunarMonth.BOSS, 2568, calendar=cal)) == 30


def test_find_lunar_day_occurrences(cal):
    hits = utils.find_lunar_day_occurrences(15, MoonPhase.WAXING, 2024, calendar=cal)
    assert 12 <= len(hits) <= 13
    for h in hits:
        assert h["gregorian"].year == 2024
        assert cal.find_lunar_date(h["gregorian"]).day == 14
        assert "១៥កើត" in h["khmer"]
    with pytest.raises(InvalidInputError):
        utils.find_lunar_day_occurrences(16, MoonPhase.WAXING, 2024, calendar=cal)


def test_buddhist_holidays(cal):
    out = utils.buddhist_holidays(2024, calendar=cal)
    assert set(out) == {"visakha_bochea", "khmer_new_year"}
    assert out["visakha_bochea"]["date"] == cal.visakha_bochea(2024).date()
    assert out["khmer_new_year"]["moment"] == cal.new_year_moment(2024)
    assert out["visakha_bochea"]["name_en"] == "Visakha Bochea"


def test_buddhist_holidays_errors_propagate(cal):
    with pytest.raises(InvalidInputError):
        utils.buddhist_holidays(0, calendar=cal)


def test_convert_era():
    assert utils.convert_era(2024, "AD", "BE") == 2567
    assert utils.convert_era(2567, "BE", "AD") == 2024
    assert utils.convert_era(2024, "AD", "JS") == 842
    assert utils.convert_era(842, "js", "ad") == 2024
    assert utils.convert_era(2567, "BE", "JS") == 842
    with pytest.raises(InvalidInputError):
        utils.convert_era(2024, "AD", "XX")


def test_is_valid_khmer_date(cal):
    assert utils.is_valid_khmer_date(0, LunarMonth.MIKASIR, 2568, calendar=cal)
    assert utils.is_valid_khmer_date(28, LunarMonth.MIKASIR, 2568, calendar=cal)
    assert not utils.is_valid_khmer_date(29, LunarMonth.MIKASIR, 2568, calendar=cal)
    assert utils.is_valid_khmer_date(29, LunarMonth.BOSS, 2568, calendar=cal)
    assert not utils.is_valid_khmer_date(-1, LunarMonth.BOSS, 2568, calendar=cal)
    assert not utils.is_valid_khmer_date(0, LunarMonth.PATHAM_ASATH, 2568, calendar=cal)
    assert utils.is_valid_khmer_date(0, LunarMonth.PATHAM_ASATH, 2567, calendar=cal)
    assert not utils.is_valid_khmer_date(0, LunarMonth.ASATH, 2567, calendar=cal)
    assert not utils.is_valid_khmer_date(0, 14, 2567, calendar=cal)
    assert not utils.is_valid_khmer_date(0, LunarMonth.BOSS, -1, calendar=cal)


def test_season(cal):
    assert utils.season(date(1996, 9, 24), calendar=cal)["name_en"] == "Rainy Season"
    vb = cal.visakha_bochea(2024)
    assert utils.season(vb, calendar=cal) == {"name": "រដូវក្ដៅ", "name_en": "Hot Season"}


def test_diff_in_days():
    assert utils.diff_in_days(date(2024, 1, 1), date(2024, 12, 31)) == 365
    assert utils.diff_in_days(datetime(2024, 1, 2, 23), date(2024, 1, 1)) == -1
