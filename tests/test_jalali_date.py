# tests/test_jalali_date.py

from datetime import date

import pytest

from jalcal import InvalidDate, JalaliDate
from jalcal.names import LONG_MONTHS, SHORT_MONTHS


def test_is_valid():
    assert JalaliDate(1403, 12, 30).is_valid()
    assert not JalaliDate(1402, 12, 30).is_valid()
    assert not JalaliDate(1403, 13, 1).is_valid()
    assert not JalaliDate(1403, 1, 0).is_valid()
    assert not JalaliDate(1403, 7, 31).is_valid()
    assert not JalaliDate(-1, -1, -1).is_valid()
    # outside the rule table
    assert not JalaliDate(5000, 12, 1).is_valid()
    assert not JalaliDate(5000, 1, 1).is_valid()
    assert JalaliDate(-61, 1, 1).is_valid()


def test_validate():
    d = JalaliDate(1403, 1, 1)
    assert d.validate() is d
    with pytest.raises(InvalidDate):
        JalaliDate(1403, 0, 1).validate()


def test_set_month_carries_years():
    assert JalaliDate(1400, 1, 1).set_month(13) == JalaliDate(1401, 1, 1)
    assert JalaliDate(1400, 1, 1).set_month(0) == JalaliDate(1399, 12, 1)
    assert JalaliDate(1400, 1, 1).set_month(-12) == JalaliDate(1398, 12, 1)
    assert JalaliDate(1400, 1, 1).set_month(25) == JalaliDate(1402, 1, 1)


def test_set_day_rolls_back_into_previous_year():
    assert JalaliDate(1400, 1, 1).set_day(0) == JalaliDate(1399, 12, 30)
    assert JalaliDate(1401, 1, 1).set_day(0) == JalaliDate(1400, 12, 29)
    assert JalaliDate(1403, 7, 1).set_day(-30) == JalaliDate(1403, 6, 1)


def test_set_day_rolls_forward():
    assert JalaliDate(1403, 1, 1).set_day(32) == JalaliDate(1403, 2, 1)
    assert JalaliDate(1402, 12, 1).set_day(30) == JalaliDate(1403, 1, 1)


def test_set_day_normalizes_month_first():
    assert JalaliDate(1400, 13, 1).add_days(1) == JalaliDate(1401, 1, 2)
    assert JalaliDate(1400, 0, 1).set_day(31) == JalaliDate(1400, 1, 1)


def test_normalize():
    assert JalaliDate(1400, 13, 1).normalize() == JalaliDate(1401, 1, 1)
    assert JalaliDate(1400, 1, 0).normalize() == JalaliDate(1399, 12, 30)


def test_arithmetic_mutates_and_chains():
    d = JalaliDate(1403, 1, 1)
    r = d.add_years(1).add_months(2).add_days(3)
    assert r is d
    assert d == JalaliDate(1404, 3, 4)


def test_add_days():
    assert JalaliDate(1403, 1, 1).add_days(365) == JalaliDate(1403, 12, 30)
    assert JalaliDate(1403, 1, 1).add_days(366) == JalaliDate(1404, 1, 1)
    assert JalaliDate(1400, 1, 1).add_days(-1) == JalaliDate(1399, 12, 30)
    assert JalaliDate(1399, 12, 30).add_days(1) == JalaliDate(1400, 1, 1)


def test_add_days_matches_julian_day_count():
    start = JalaliDate(1398, 11, 17)
    for n in (-800, -45, -1, 0, 1, 29, 186, 1000):
        assert start.clone().add_days(n).to_jdn() == start.to_jdn() + n


def test_add_months():
    assert JalaliDate(1403, 1, 15).add_months(-1) == JalaliDate(1402, 12, 15)
    assert JalaliDate(1403, 11, 5).add_months(14) == JalaliDate(1405, 1, 5)


def test_add_months_keeps_day_unclamped():
    d = JalaliDate(1403, 6, 31).add_months(1)
    assert d == JalaliDate(1403, 7, 31)
    assert not d.is_valid()


def test_clone_is_independent():
    d = JalaliDate(1403, 1, 1)
    c = d.clone()
    c.add_days(10)
    assert d == JalaliDate(1403, 1, 1)
    assert c == JalaliDate(1403, 1, 11)


def test_ordering():
    assert JalaliDate(1402, 12, 29) < JalaliDate(1403, 1, 1) < JalaliDate(1403, 1, 2)


def test_day_of_week():
    # 2024-03-20 was a Wednesday, 2021-03-21 a Sunday.
    assert JalaliDate(1403, 1, 1).day_of_week() == 3
    assert JalaliDate(1400, 1, 1).day_of_week() == 0
    assert JalaliDate(1402, 12, 26).day_of_week() == 6


def test_gregorian_conversions():
    assert JalaliDate.from_gregorian(date(2024, 3, 20)) == JalaliDate(1403, 1, 1)
    assert JalaliDate(1403, 1, 1).to_gregorian() == date(2024, 3, 20)
    assert JalaliDate.from_jdn(2451545) == JalaliDate(1378, 10, 11)


def test_format():
    d = JalaliDate(1403, 1, 1)
    assert d.format("YYYY/MM/DD") == "1403/01/01"
    assert d.format("YYYY MMMM") == "1403 " + LONG_MONTHS[0]
    assert d.format("DD MMMM YYYY") == "01 فروردین 1403"
    assert d.format("MMMM", SHORT_MONTHS) == SHORT_MONTHS[0]
    assert d.format("Date: YYYY-MM-DD (x)") == "Date: 1403-01-01 (x)"
    assert d.isoformat() == "1403-01-01"
    assert str(d) == "1403/01/01"


def test_format_empty_template():
    assert JalaliDate(1403, 1, 1).format("") == ""
    assert JalaliDate(1403, 1, 1).format(None) == ""


def test_format_invalid_date_fails():
    with pytest.raises(InvalidDate):
        JalaliDate(1402, 12, 30).format("YYYY/MM/DD")


def test_parse_default_layout():
    assert JalaliDate.parse("1403/01/01") == JalaliDate(1403, 1, 1)
    assert JalaliDate.parse(" 1403/1/5 ") == JalaliDate(1403, 1, 5)


def test_parse_honours_format():
    assert JalaliDate.parse("1403-02-05", "YYYY-MM-DD") == JalaliDate(1403, 2, 5)
    assert JalaliDate.parse("05.02.1403", "DD.MM.YYYY") == JalaliDate(1403, 2, 5)
    assert JalaliDate.parse("15 فروردین 1403", "DD MMMM YYYY") == JalaliDate(1403, 1, 15)
    assert JalaliDate.parse("1403-02-05", ["YYYY/MM/DD", "YYYY-MM-DD"]) == JalaliDate(1403, 2, 5)


def test_parse_packed_digits():
    assert JalaliDate.parse("14030101", "YYYYMMDD") == JalaliDate(1403, 1, 1)
    assert JalaliDate.parse("01011403", "DDMMYYYY") == JalaliDate(1403, 1, 1)
    assert JalaliDate.parse("14031225", "YYYYMMDD") == JalaliDate(1403, 12, 25)


def test_parse_does_not_check_calendar():
    d = JalaliDate.parse("1403/13/40")
    assert d == JalaliDate(1403, 13, 40)
    assert not d.is_valid()


@pytest.mark.parametrize("text", ["", "garbage", "1403/01", "1403-01-01", "1403/aa/01"])
def test_parse_malformed(text):
    with pytest.raises(InvalidDate):
        JalaliDate.parse(text)


def test_parse_bad_format():
    with pytest.raises(InvalidDate):
        JalaliDate.parse("1403/01", "YYYY/MM")
