# tests/test_jalali_day.py

import random

import pytest

from jalcal import InvalidCalendarYear, InvalidDate
from jalcal.core.time import gregorian_to_jdn
from jalcal.core.types import JalaliTriple
from jalcal.engines.jalali_day import days_in_month, days_in_year, jalali_to_jdn, jdn_to_jalali
from jalcal.engines.rules import MAX_YEAR, MIN_YEAR


@pytest.mark.parametrize(
    "jalali,gregorian",
    [
        ((1403, 1, 1), (2024, 3, 20)),
        ((1402, 1, 1), (2023, 3, 21)),
        ((1399, 12, 30), (2021, 3, 20)),
        ((1400, 1, 1), (2021, 3, 21)),
        ((1395, 10, 12), (2017, 1, 1)),
        ((1378, 10, 11), (2000, 1, 1)),
        ((1357, 11, 22), (1979, 2, 11)),
        ((1403, 6, 31), (2024, 9, 21)),
        ((1403, 7, 1), (2024, 9, 22)),
    ],
)
def test_known_dates(jalali, gregorian):
    jdn = gregorian_to_jdn(*gregorian)
    assert jalali_to_jdn(*jalali) == jdn
    assert jdn_to_jalali(jdn) == JalaliTriple(*jalali)


def test_previous_year_branch_after_leap_year():
    """Days of Esfand that fall in the next Gregorian year land in the old Jalali year."""
    assert jdn_to_jalali(gregorian_to_jdn(2021, 3, 20)) == JalaliTriple(1399, 12, 30)
    assert jdn_to_jalali(gregorian_to_jdn(2021, 1, 1)) == JalaliTriple(1399, 10, 12)
    assert jdn_to_jalali(gregorian_to_jdn(2024, 3, 19)) == JalaliTriple(1402, 12, 29)


def test_jdn_roundtrip():
    random.seed(42)
    lo = gregorian_to_jdn(700, 1, 1)
    hi = gregorian_to_jdn(3700, 12, 31)
    for _ in range(20000):
        jdn = random.randint(lo, hi)
        t = jdn_to_jalali(jdn)
        assert 1 <= t.month <= 12
        assert 1 <= t.day <= days_in_month(t.month, t.year)
        assert jalali_to_jdn(*t.as_tuple()) == jdn


def test_consecutive_days_are_consecutive():
    jdn0 = jalali_to_jdn(1399, 1, 1)
    jdn1 = jalali_to_jdn(1405, 1, 1)
    prev = jdn_to_jalali(jdn0 - 1)
    for jdn in range(jdn0, jdn1):
        t = jdn_to_jalali(jdn)
        if t.day == 1:
            assert prev.day == days_in_month(prev.month, prev.year)
        else:
            assert (t.year, t.month, t.day - 1) == prev.as_tuple()
        prev = t


@pytest.mark.parametrize("month", [0, 13, -1])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(InvalidDate):
        days_in_month(month, 1403)


def _check_roundtrip(jdn):
    t = jdn_to_jalali(jdn)
    assert 1 <= t.day <= days_in_month(t.month, t.year)
    assert jalali_to_jdn(t.year, t.month, t.day) == jdn


def test_roundtrip_at_range_edges():
    first = jalali_to_jdn(MIN_YEAR, 1, 1)
    last = jalali_to_jdn(MAX_YEAR, 12, days_in_month(12, MAX_YEAR))
    assert last - first + 1 == sum(days_in_year(y) for y in range(MIN_YEAR, MAX_YEAR + 1))

    for jdn in range(first, first + 800):
        _check_roundtrip(jdn)
    for jdn in range(last - 800, last + 1):
        _check_roundtrip(jdn)

    assert jdn_to_jalali(first) == JalaliTriple(MIN_YEAR, 1, 1)
    assert jdn_to_jalali(last) == JalaliTriple(MAX_YEAR, 12, days_in_month(12, MAX_YEAR))


def test_roundtrip_whole_range_strided():
    first = jalali_to_jdn(MIN_YEAR, 1, 1)
    last = jalali_to_jdn(MAX_YEAR, 12, days_in_month(12, MAX_YEAR))
    for jdn in range(first, last + 1, 97):
        _check_roundtrip(jdn)


def test_last_table_year_after_gregorian_new_year():
    # Dey..Esfand of the last year fall in the Gregorian year after its anchor.
    jdn = jalali_to_jdn(MAX_YEAR, 12, 1)
    assert jdn_to_jalali(jdn) == JalaliTriple(MAX_YEAR, 12, 1)


def test_outside_table_range_raises():
    first = jalali_to_jdn(MIN_YEAR, 1, 1)
    last = jalali_to_jdn(MAX_YEAR, 12, days_in_month(12, MAX_YEAR))
    with pytest.raises(InvalidCalendarYear):
        jdn_to_jalali(first - 1)
    with pytest.raises(InvalidCalendarYear):
        jdn_to_jalali(last + 1)
