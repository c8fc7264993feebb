"""jalcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    DATE_FORMATS,
    FIRST_DAY_OF_WEEK,
    from_gregorian,
    to_gregorian,
    days_in_month,
    create_date,
    today,
    invalid,
    deserialize,
    to_iso8601,
)
from .core.errors import JalaliError, InvalidCalendarYear, InvalidDate
from .core.time import div_trunc, mod_floor, gregorian_to_jdn, jdn_to_gregorian
from .core.types import CalendarRuleResult, JalaliTriple
from .engines.rules import BREAKS, MIN_YEAR, MAX_YEAR, jal_cal
from .engines.jalali_day import jalali_to_jdn, jdn_to_jalali, is_leap_year, days_in_year
from .jalali_date import JalaliDate

__all__ = [
    "DATE_FORMATS",
    "FIRST_DAY_OF_WEEK",
    "from_gregorian",
    "to_gregorian",
    "days_in_month",
    "create_date",
    "today",
    "invalid",
    "deserialize",
    "to_iso8601",
    "JalaliError",
    "InvalidCalendarYear",
    "InvalidDate",
    "div_trunc",
    "mod_floor",
    "gregorian_to_jdn",
    "jdn_to_gregorian",
    "CalendarRuleResult",
    "JalaliTriple",
    "BREAKS",
    "MIN_YEAR",
    "MAX_YEAR",
    "jal_cal",
    "jalali_to_jdn",
    "jdn_to_jalali",
    "is_leap_year",
    "days_in_year",
    "JalaliDate",
]
