from datetime import date, datetime

import pytest

from khmercal import format as kf
from khmercal.attributes.registry import compute_attributes
from khmercal.core.constants import ERA_YEARS
from khmercal.core.errors import InvalidInputError
from khmercal.core.types import LunarMonth


def test_digit_transliteration():
    assert kf.to_khmer_number("2024") == "២០២៤"
    assert kf.to_khmer_number(5) == "៥"
    assert kf.from_khmer_number("២០២៤") == "2024"
    assert kf.from_khmer_number("៥") == "5"
    assert kf.to_khmer_number("12:30") == "១២:៣០"


def test_format_number():
    assert kf.format_number(1234567) == "១,២៣៤,៥៦៧"
    assert kf.format_number(1234.5, 2) == "១,២៣៤.៥០"
    assert kf.format_number(1234567, thousands_sep=" ") == "១ ២៣៤ ៥៦៧"
    with pytest.raises(InvalidInputError):
        kf.format_number(1, -1)


def test_format_currency():
    assert kf.format_currency(1000) == "១,០០០ រៀល"
    assert kf.format_currency(1000, show_symbol=False) == "១,០០០"


def test_format_ordinal_and_khmer_text():
    assert kf.format_ordinal(3) == "ទី៣"
    assert kf.is_khmer_text("សួស្តី")
    assert kf.is_khmer_text("abc ក")
    assert not kf.is_khmer_text("hello")


def test_format_date_styles():
    d = date(2024, 1, 15)   # Monday
    assert kf.format_date(d, "full") == "ថ្ងៃចន្ទ ទី១៥ ខែមករា ឆ្នាំ២០២៤"
    assert kf.format_date(d, "medium") == "ទី១៥ ខែមករា ឆ្នាំ២០២៤"
    assert kf.format_date(d, "short") == "១៥/១/២០២៤"
    with pytest.raises(InvalidInputError):
        kf.format_date(d, "long")


def test_format_time():
    assert kf.format_time(datetime(2024, 1, 1, 14, 5)) == "២ម៉ោង០៥នាទីល្ងាច"
    assert kf.format_time(datetime(2024, 1, 1, 14, 5), use_24_hour=True) == "១៤ម៉ោង០៥នាទី"
    assert kf.format_time(datetime(2024, 1, 1, 0, 0)) == "១២ម៉ោង០០នាទីព្រឹក"
    assert kf.format_time(datetime(2024, 1, 1, 9, 30)) == "៩ម៉ោង៣០នាទីព្រឹក"


def test_names():
    assert kf.day_name(date(2024, 1, 14)) == "អាទិត្យ"
    assert kf.month_name(date(2024, 4, 1)) == "មេសា"
    assert kf.lunar_month_name(LunarMonth.PISAK) == "ពិសាខ"
    assert kf.lunar_month_name(13) == "ទុតិយាសាឍ"
    with pytest.raises(InvalidInputError):
        kf.lunar_month_name(14)


def test_lunar_full_1996():
    assert kf.format_lunar_date(date(1996, 9, 24)) == "ថ្ងៃអង្គារ ១២កើត ខែភទ្របទ ឆ្នាំជូត អដ្ឋស័ក ពុទ្ធសករាជ ២៥៤០"


def test_lunar_presets(cal):
    d = date(1996, 9, 24)
    assert kf.format_lunar_date(d, "short", calendar=cal) == "១២កើត ខែភទ្របទ"
    assert kf.format_lunar_date(d, "medium", calendar=cal) == "១២កើត ខែភទ្របទ ព.ស. ២៥៤០"


def test_lunar_tokens(cal):
    d = date(1996, 9, 24)
    assert kf.format_lunar_date(d, "d N m", calendar=cal) == "១២ កើត ភទ្របទ"
    assert kf.format_lunar_date(d, "D/n", calendar=cal) == "១២/ក"
    assert kf.format_lunar_date(d, "c b j", calendar=cal) == "១៩៩៦ ២៥៤០ ១៣៥៨"
    assert kf.format_lunar_date(d, "W w", calendar=cal) == "អង្គារ អ"
    assert kf.format_lunar_date(d, "M a e", calendar=cal) == "កញ្ញា ជូត នព្វស័ក"


def test_render_lunar_reuses_day_info(cal):
    info = cal.day_info(date(1996, 9, 24))
    assert kf.render_lunar(info, "short") == "១២កើត ខែភទ្របទ"


def test_era_token_matches_era_attribute(cal):
    info = cal.day_info(date(1996, 9, 24))
    era = compute_attributes(info, ["era_year"])["era_year_name"]
    assert kf.render_lunar(info, "e") == era
    # only the full preset counts the era from the Jolak Sakaraj year
    assert kf.render_lunar(info, "full").split()[4] == ERA_YEARS[info.jolak_sakaraj_year % 10]
    assert era != ERA_YEARS[info.jolak_sakaraj_year % 10]
