from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class CalendarRuleResult:
    """Per-year output of the 33-year intercalation rule."""
    leap: int    # 0..4, 0 marks a 366-day year
    gy: int      # Gregorian year in which the Jalali year begins
    march: int   # March day of 1 Farvardin

    @property
    def leap_index(self) -> int:
        return self.leap

    @property
    def anchor_gregorian_year(self) -> int:
        return self.gy

    @property
    def new_year_march_day(self) -> int:
        return self.march

@dataclass(frozen=True)
class JalaliTriple:
    year: int
    month: int
    day: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)
