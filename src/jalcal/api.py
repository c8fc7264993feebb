from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence, Tuple

from .core.errors import InvalidDate
from .engines import jalali_day
from .jalali_date import JalaliDate, ParseFormat
from . import names

# Parse/display templates consumed by date-picker front-ends.
DATE_FORMATS: Dict[str, Dict[str, str]] = {
    "parse": {
        "date_input": "YYYY/MM/DD",
    },
    "display": {
        "date_input": "YYYY/MM/DD",
        "month_year_label": "YYYY MMMM",
        "date_a11y_label": "YYYY/MM/DD",
        "month_year_a11y_label": "YYYY MMMM",
    },
}

# Saturday, in the 0 = Sunday convention of day_of_week().
FIRST_DAY_OF_WEEK = 6

# ============================================================
# Conversion facade
# ============================================================

def from_gregorian(d: date) -> JalaliDate:
    """Gregorian date (or datetime, clock part ignored) -> JalaliDate."""
    return JalaliDate.from_gregorian(d)

def to_gregorian(jd: JalaliDate) -> date:
    """JalaliDate -> Gregorian date. The result carries no clock time."""
    return jd.to_gregorian()

def days_in_month(month: int, year: int) -> int:
    return jalali_day.days_in_month(month, year)

# ============================================================
# Date-provider operations
# ============================================================

def get_year(d: JalaliDate) -> int:
    return d.year

def get_month(d: JalaliDate) -> int:
    return d.month

def get_date(d: JalaliDate) -> int:
    return d.day

def get_day_of_week(d: JalaliDate) -> int:
    return d.day_of_week()

def get_month_names(style: str = "long") -> Tuple[str, ...]:
    return names.month_names(style)

def get_date_names() -> Tuple[str, ...]:
    return names.DATE_NAMES

def get_day_of_week_names(style: str = "long") -> Tuple[str, ...]:
    return names.weekday_names(style)

def get_year_name(d: JalaliDate) -> str:
    return str(d.year)

def get_first_day_of_week() -> int:
    return FIRST_DAY_OF_WEEK

def get_num_days_in_month(d: JalaliDate) -> int:
    return jalali_day.days_in_month(d.month, d.year)

def clone(d: JalaliDate) -> JalaliDate:
    return d.clone()

def create_date(year: int, month: int, day: int) -> JalaliDate:
    """Build a JalaliDate from 1-based components, failing on a non-existent day."""
    if not 1 <= month <= 12:
        raise InvalidDate(f'Invalid month "{month}". Month has to be between 1 and 12.', month)
    if day < 1:
        raise InvalidDate(f'Invalid date "{day}". Date has to be greater than 0.', day)
    result = JalaliDate(year, month, day)
    if not result.is_valid():
        raise InvalidDate(f'Invalid date "{day}" for month "{month}" of year {year}.', result)
    return result

def today() -> JalaliDate:
    return JalaliDate.today()

def parse(value: Any, parse_format: ParseFormat = None) -> Optional[JalaliDate]:
    if isinstance(value, str):
        return JalaliDate.parse(value, parse_format)
    return None

def format(d: JalaliDate, display_format: str, month_names: Sequence[str] = names.LONG_MONTHS) -> str:
    d = d.clone()
    if not d.is_valid():
        raise InvalidDate("Cannot format invalid date.", d)
    return d.format(display_format, month_names)

def add_calendar_years(d: JalaliDate, years: int) -> JalaliDate:
    return d.clone().add_years(years)

def add_calendar_months(d: JalaliDate, months: int) -> JalaliDate:
    return d.clone().add_months(months)

def add_calendar_days(d: JalaliDate, days: int) -> JalaliDate:
    return d.clone().add_days(days)

def to_iso8601(d: JalaliDate) -> str:
    return d.clone().format("YYYY-MM-DD")

def is_date_instance(obj: Any) -> bool:
    return isinstance(obj, JalaliDate)

def is_valid(d: JalaliDate) -> bool:
    return d.is_valid()

def invalid() -> JalaliDate:
    return JalaliDate(-1, -1, -1)

def deserialize(value: Any) -> Optional[JalaliDate]:
    """
    Accept a Gregorian date, a JalaliDate, or a Jalali ISO string
    (YYYY-MM-DD); empty strings and None give None. Anything else gives
    the invalid() sentinel.
    """
    if value is None:
        return None
    if isinstance(value, JalaliDate):
        return value.clone() if value.is_valid() else invalid()
    if isinstance(value, date):
        return from_gregorian(value)
    if isinstance(value, str):
        if not value:
            return None
        try:
            d = JalaliDate.parse(value, "YYYY-MM-DD")
        except InvalidDate:
            return invalid()
        return d if d.is_valid() else invalid()
    return invalid()
