"""
jalcal.engines.rules
--------------------
The 33-year intercalation rule of the Jalali calendar.

Leap years follow 33-year cycles whose phase resets at historical break
points derived from equinox observations. For a given Jalali year the rule
yields its position in the local leap cycle and the March day (Gregorian)
of its first day, 1 Farvardin.

See:
  http://www.astro.uni.torun.pl/~kb/Papers/EMP/PersianC-EMP.htm
  http://www.fourmilab.ch/documents/calendar/
"""

from __future__ import annotations

from typing import Tuple

from ..core.errors import InvalidCalendarYear
from ..core.time import div_trunc, mod_floor
from ..core.types import CalendarRuleResult

# Jalali years starting the 33-year rule.
BREAKS: Tuple[int, ...] = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181,
    1210, 1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)

MIN_YEAR = BREAKS[0]
MAX_YEAR = BREAKS[-1] - 1

# Offset between Jalali and Gregorian year numbers at the start of the year.
GREGORIAN_OFFSET = 621


def jal_cal(jy: int) -> CalendarRuleResult:
    """
    Rule-table lookup for Jalali year jy (MIN_YEAR..MAX_YEAR).

    Returns:
      leap:  years since the last leap year (0 to 4), 0 marks a leap year
      gy:    Gregorian year of the beginning of jy
      march: March day of 1 Farvardin of jy
    """
    if jy < BREAKS[0] or jy >= BREAKS[-1]:
        raise InvalidCalendarYear(jy)

    gy = jy + GREGORIAN_OFFSET
    leap_j = -14
    jp = BREAKS[0]
    jump = 0

    # Find the limiting break years for jy.
    for jm in BREAKS[1:]:
        jump = jm - jp
        if jy < jm:
            break
        leap_j += div_trunc(jump, 33) * 8 + div_trunc(mod_floor(jump, 33), 4)
        jp = jm

    n = jy - jp

    # Leap years from AD 621 to the beginning of jy, Persian count.
    leap_j += div_trunc(n, 33) * 8 + div_trunc(mod_floor(n, 33) + 3, 4)
    if mod_floor(jump, 33) == 4 and jump - n == 4:
        leap_j += 1

    # The same in the Gregorian calendar, up to gy.
    leap_g = div_trunc(gy, 4) - div_trunc((div_trunc(gy, 100) + 1) * 3, 4) - 150

    march = 20 + leap_j - leap_g

    # Years since the last leap year.
    if jump - n < 6:
        n = n - jump + div_trunc(jump + 4, 33) * 33
    raw = mod_floor(n + 1, 33) - 1
    leap = 4 if raw == -1 else mod_floor(raw, 4)

    return CalendarRuleResult(leap=leap, gy=gy, march=march)


def supported_range() -> Tuple[int, int]:
    """Inclusive (first, last) Jalali years accepted by jal_cal."""
    return MIN_YEAR, MAX_YEAR
