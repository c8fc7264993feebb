"""Static Persian name tables. Pure data, passed into formatting by callers."""

from __future__ import annotations
from typing import Dict, Tuple

LONG_MONTHS: Tuple[str, ...] = (
    "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
    "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
)

SHORT_MONTHS: Tuple[str, ...] = (
    "فرو", "اردی", "خرد", "تیر", "مرد", "شهر",
    "مهر", "آبان", "آذر", "دی", "بهمن", "اسف",
)

NARROW_MONTHS: Tuple[str, ...] = (
    "فر", "ار", "خر", "تی", "مر", "شه",
    "مه", "آ", "آذ", "دی", "به", "اس",
)

# Sunday first, matching day_of_week() (0 = Sunday).
LONG_WEEKDAYS: Tuple[str, ...] = (
    "یکشنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنجشنبه", "جمعه", "شنبه",
)

SHORT_WEEKDAYS: Tuple[str, ...] = ("یک", "دو", "سه", "چهار", "پنج", "جمعه", "شنبه")

NARROW_WEEKDAYS: Tuple[str, ...] = ("ی", "د", "س", "چ", "پ", "ج", "ش")

DATE_NAMES: Tuple[str, ...] = tuple(str(i) for i in range(1, 32))

_MONTHS: Dict[str, Tuple[str, ...]] = {
    "long": LONG_MONTHS,
    "short": SHORT_MONTHS,
    "narrow": NARROW_MONTHS,
}

_WEEKDAYS: Dict[str, Tuple[str, ...]] = {
    "long": LONG_WEEKDAYS,
    "short": SHORT_WEEKDAYS,
    "narrow": NARROW_WEEKDAYS,
}


def month_names(style: str = "long") -> Tuple[str, ...]:
    if style not in _MONTHS:
        raise ValueError(f"Unknown name style '{style}'. Available: {sorted(_MONTHS)}")
    return _MONTHS[style]


def weekday_names(style: str = "long") -> Tuple[str, ...]:
    if style not in _WEEKDAYS:
        raise ValueError(f"Unknown name style '{style}'. Available: {sorted(_WEEKDAYS)}")
    return _WEEKDAYS[style]
