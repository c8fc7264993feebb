"""
jalcal.engines.jalali_day
-------------------------
Jalali <-> Julian Day Number, composed from the rule table and the
Gregorian day converter.

The first six months have 31 days, the next five 30, and Esfand has 30 in a
leap year and 29 otherwise.
"""

from __future__ import annotations

from ..core.errors import InvalidCalendarYear, InvalidDate
from ..core.time import div_trunc, gregorian_to_jdn, jdn_to_gregorian, mod_floor
from ..core.types import JalaliTriple
from .rules import GREGORIAN_OFFSET, MAX_YEAR, MIN_YEAR, jal_cal

# Days in the first six (31-day) months, minus one.
_FIRST_HALF_LAST_OFFSET = 185


def jalali_to_jdn(jy: int, jm: int, jd: int) -> int:
    """Julian Day Number of the Jalali date jy/jm/jd. No range check on jm, jd."""
    r = jal_cal(jy)
    return (
        gregorian_to_jdn(r.gy, 3, r.march)
        + (jm - 1) * 31
        - div_trunc(jm, 7) * (jm - 7)
        + jd
        - 1
    )


def jdn_to_jalali(jdn: int) -> JalaliTriple:
    """Jalali date covering the given Julian Day Number."""
    gy = jdn_to_gregorian(jdn)[0]
    jy = gy - GREGORIAN_OFFSET
    if jy > MAX_YEAR:
        # Tail of the last table year, past the Gregorian new year.
        r = jal_cal(MAX_YEAR)
        k = jdn - gregorian_to_jdn(r.gy, 3, r.march)
        if k >= days_in_year(MAX_YEAR):
            raise InvalidCalendarYear(jy)
        return JalaliTriple(MAX_YEAR, 7 + div_trunc(k - 186, 30), mod_floor(k - 186, 30) + 1)
    r = jal_cal(jy)

    # Days elapsed since 1 Farvardin.
    k = jdn - gregorian_to_jdn(gy, 3, r.march)
    if k >= 0:
        if k <= _FIRST_HALF_LAST_OFFSET:
            return JalaliTriple(jy, 1 + div_trunc(k, 31), mod_floor(k, 31) + 1)
        k -= _FIRST_HALF_LAST_OFFSET + 1
    else:
        # Still in the previous Jalali year.
        jy -= 1
        if jy < MIN_YEAR:
            raise InvalidCalendarYear(jy)
        k += 179
        if r.leap == 1:
            k += 1

    return JalaliTriple(jy, 7 + div_trunc(k, 30), mod_floor(k, 30) + 1)


def days_in_month(month: int, year: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidDate(f"Invalid Jalali month {month}", month)
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if jal_cal(year).leap == 0 else 29


def is_leap_year(year: int) -> bool:
    return jal_cal(year).leap == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365
