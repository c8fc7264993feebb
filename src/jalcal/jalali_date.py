"""
jalcal.jalali_date
------------------
Mutable Jalali (year, month, day) holder with calendar arithmetic.

Validity is a predicate, not a construction invariant: a JalaliDate may hold
any integers (the sentinel for "no date" is JalaliDate(-1, -1, -1)). The
setters and add_* methods mutate the instance and return it so calls chain;
use clone() first to keep the original.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Dict, Optional, Sequence, Union

from .core.errors import InvalidDate
from .core import time as _time
from .core.time import mod_floor
from .engines.jalali_day import days_in_month, jalali_to_jdn, jdn_to_jalali
from .engines.rules import MAX_YEAR, MIN_YEAR
from .names import LONG_MONTHS

DEFAULT_PARSE_FORMAT = "YYYY/MM/DD"

# Longest token first so MMMM is never read as MM twice.
_TOKEN_RE = re.compile(r"(YYYY|MMMM|MM|DD)")

ParseFormat = Union[str, Sequence[str], None]


@dataclass(order=True)
class JalaliDate:
    year: int
    month: int
    day: int

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def from_gregorian(cls, d: date) -> "JalaliDate":
        t = jdn_to_jalali(_time.to_jdn(d))
        return cls(t.year, t.month, t.day)

    @classmethod
    def from_jdn(cls, jdn: int) -> "JalaliDate":
        t = jdn_to_jalali(jdn)
        return cls(t.year, t.month, t.day)

    @classmethod
    def today(cls) -> "JalaliDate":
        return cls.from_gregorian(date.today())

    @classmethod
    def parse(
        cls,
        text: str,
        parse_format: ParseFormat = None,
        *,
        month_names: Sequence[str] = LONG_MONTHS,
    ) -> "JalaliDate":
        """
        Read a date laid out by a YYYY/MM/DD/MMMM template.

        parse_format may be a single template or a sequence tried in order;
        None means "YYYY/MM/DD". Only the layout is checked, not whether the
        result is a real calendar day (see is_valid).
        """
        if parse_format is None:
            formats: Sequence[str] = (DEFAULT_PARSE_FORMAT,)
        elif isinstance(parse_format, str):
            formats = (parse_format,)
        else:
            formats = tuple(parse_format)

        value = text.strip()
        for fmt in formats:
            m = _compile_format(fmt, month_names).fullmatch(value)
            if m is None:
                continue
            fields = m.groupdict()
            if fields.get("month_name") is not None:
                month = list(month_names).index(fields["month_name"]) + 1
            else:
                month = int(fields["month"])
            return cls(int(fields["year"]), month, int(fields["day"]))

        raise InvalidDate(f"Cannot parse {text!r} with format {parse_format!r}", text)

    def clone(self) -> "JalaliDate":
        return JalaliDate(self.year, self.month, self.day)

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------

    def is_valid(self) -> bool:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            return False
        if not 1 <= self.month <= 12:
            return False
        return 1 <= self.day <= days_in_month(self.month, self.year)

    def validate(self) -> "JalaliDate":
        if not self.is_valid():
            raise InvalidDate(f"Invalid Jalali date {self.year}/{self.month}/{self.day}", self)
        return self

    # ---------------------------------------------------------
    # Calendar arithmetic (in place)
    # ---------------------------------------------------------

    def set_month(self, month: int) -> "JalaliDate":
        """Set month, carrying whole years so month ends up in 1..12."""
        self.year += (month - 1) // 12
        self.month = mod_floor(month - 1, 12) + 1
        return self

    def set_day(self, day: int) -> "JalaliDate":
        """Set day, rolling months backward/forward until day fits."""
        self.set_month(self.month)
        m_days = days_in_month(self.month, self.year)
        if day <= 0:
            while day <= 0:
                self.set_month(self.month - 1)
                day += days_in_month(self.month, self.year)
        else:
            while day > m_days:
                day -= m_days
                self.set_month(self.month + 1)
                m_days = days_in_month(self.month, self.year)
        self.day = day
        return self

    def normalize(self) -> "JalaliDate":
        self.set_month(self.month)
        return self.set_day(self.day)

    def add_years(self, years: int) -> "JalaliDate":
        self.year += years
        return self

    def add_months(self, months: int) -> "JalaliDate":
        return self.set_month(self.month + months)

    def add_days(self, days: int) -> "JalaliDate":
        return self.set_day(self.day + days)

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def to_jdn(self) -> int:
        return jalali_to_jdn(self.year, self.month, self.day)

    def to_gregorian(self) -> date:
        return _time.from_jdn(self.to_jdn())

    def day_of_week(self) -> int:
        """0 = Sunday ... 6 = Saturday."""
        return self.to_gregorian().isoweekday() % 7

    # ---------------------------------------------------------
    # Formatting
    # ---------------------------------------------------------

    def format(self, template: Optional[str], month_names: Sequence[str] = LONG_MONTHS) -> str:
        """
        Substitute YYYY, MMMM, MM and DD in template; other text is kept.
        """
        if not template:
            return ""
        self.validate()
        values: Dict[str, str] = {
            "YYYY": f"{self.year:04d}" if self.year >= 0 else str(self.year),
            "MMMM": month_names[self.month - 1],
            "MM": f"{self.month:02d}",
            "DD": f"{self.day:02d}",
        }
        return _TOKEN_RE.sub(lambda m: values[m.group(0)], template)

    def isoformat(self) -> str:
        return self.format("YYYY-MM-DD")

    def __str__(self) -> str:
        return f"{self.year}/{self.month:02d}/{self.day:02d}"


def _compile_format(fmt: str, month_names: Sequence[str]) -> "re.Pattern[str]":
    names = sorted(month_names, key=len, reverse=True)
    groups = {
        "YYYY": r"(?P<year>[-+]?\d{1,4})",
        "MMMM": "(?P<month_name>" + "|".join(re.escape(n) for n in names) + ")",
        "MM": r"(?P<month>\d{1,2})",
        "DD": r"(?P<day>\d{1,2})",
    }
    parts = []
    seen = set()
    for piece in _TOKEN_RE.split(fmt):
        if piece in groups:
            if piece in seen:
                raise InvalidDate(f"Token {piece} repeated in format {fmt!r}", fmt)
            seen.add(piece)
            parts.append(groups[piece])
        else:
            parts.append(re.escape(piece))
    if "YYYY" not in seen or "DD" not in seen or not seen & {"MM", "MMMM"}:
        raise InvalidDate(f"Format {fmt!r} needs YYYY, MM or MMMM, and DD", fmt)
    if {"MM", "MMMM"} <= seen:
        raise InvalidDate(f"Format {fmt!r} has both MM and MMMM", fmt)
    return re.compile("".join(parts))
