import pytest

import khmercal
from khmercal.core.errors import InvalidInputError
from khmercal.core.types import LunarMonth
from khmercal.engines import soriyatra as sy


def test_js_year_of():
    assert sy.js_year_of(2024) == 1386
    assert sy.js_year_of(1996) == 1358


def test_info_ranges():
    for js in range(0, 2000, 11):
        i = sy.info(js)
        assert 0 <= i.avaman < 692
        assert 0 <= i.bodithey < 30
        assert 1 <= i.kromathopol <= 800
        assert i.harkun >= 1


def test_info_rejects_negative():
    with pytest.raises(InvalidInputError):
        sy.info(-1)


def test_sotin_placeholder():
    s = sy.sun_info(363)
    assert (s.angsar, s.avaman) == (1, 635)
    s = sy.sun_info(362)
    assert (s.angsar, s.avaman) == (0, 618)


@pytest.mark.parametrize("js", [1300, 1358, 1385, 1386, 1387, 1400])
def test_lerng_sak_consistency(js):
    info = sy.soriyatra_lerng_sak(js)
    assert info.js_year == js
    assert info.jesth_has_30 == info.is_chantreathimeas
    assert 0 <= info.day_lerng_sak < 7
    assert len(info.new_years_day_sotins) == 4

    day, month = info.lunar_date_lerng_sak
    assert month in (LunarMonth.CHAET, LunarMonth.PISAK)
    assert 0 <= day < 30

    if info.has_366_days:
        assert [s.sotin for s in info.new_years_day_sotins] == [363, 364, 365, 366]
        assert info.time_of_new_year == (17, 35)
        assert info.number_of_new_year_days == 3
    else:
        assert [s.sotin for s in info.new_years_day_sotins] == [362, 363, 364, 365]
        assert info.time_of_new_year == (24, 18)
        assert info.number_of_new_year_days == 4


def test_lerng_sak_needs_two_previous_years():
    with pytest.raises(InvalidInputError):
        sy.soriyatra_lerng_sak(1)
    assert sy.soriyatra_lerng_sak(2).js_year == 2


def test_public_api():
    assert khmercal.soriyatra_lerng_sak(1386) == sy.soriyatra_lerng_sak(1386)


def test_athikameas_25_then_5_rule():
    hits = 0
    for js in range(2, 5000):
        if sy.info(js).bodithey == 25 and sy.info(js + 1).bodithey == 5:
            hits += 1
            assert not sy.is_athikameas(js)
            assert sy.is_athikameas(js + 1)
    assert hits > 0


def test_athikameas_24_then_6_rule():
    hits = 0
    for js in range(2, 5000):
        if sy.info(js).bodithey == 24 and sy.info(js + 1).bodithey == 6:
            hits += 1
            assert sy.is_athikameas(js)
    assert hits > 0


def test_athikameas_plain_threshold():
    for js in range(2, 2000):
        b = sy.info(js).bodithey
        if 6 <= b <= 23:
            assert not sy.is_athikameas(js)
        elif b >= 26 or b <= 4:
            assert sy.is_athikameas(js)


def test_chantreathimeas_137_then_0_rule():
    hits = 0
    for js in range(2, 5000):
        if sy.info(js).avaman == 137 and sy.info(js + 1).avaman == 0:
            hits += 1
            assert not sy.is_chantreathimeas(js)
            # the following year keeps its leap day
            assert sy.is_chantreathimeas(js + 1)
    assert hits > 0


def test_double_leap_year_shifts_lerng_sak():
    carried = 0
    for js in range(3, 3000):
        b = sy.info(js).bodithey
        if sy.is_athikameas(js - 1) and sy.is_chantreathimeas(js - 1):
            carried += 1
            b = (b + 1) % 30
        expected = (b - 1, LunarMonth.CHAET) if b >= 6 else (b, LunarMonth.PISAK)
        assert sy.soriyatra_lerng_sak(js).lunar_date_lerng_sak == expected
    assert carried > 0
