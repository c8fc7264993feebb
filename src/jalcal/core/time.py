"""
jalcal.core.time
----------------
Integer division primitives and the Gregorian <-> Julian Day Number map.

The two primitives round differently on purpose: quotients truncate toward
zero while remainders are floored. They do not form a matched pair for
negative dividends and must not be merged.
"""

from __future__ import annotations
from datetime import date
from typing import Tuple


def div_trunc(a: int, b: int) -> int:
    """Quotient truncated toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def mod_floor(a: int, b: int) -> int:
    """a - b * floor(a / b); lies in [0, b) for b > 0."""
    return a - b * (a // b)


def gregorian_to_jdn(gy: int, gm: int, gd: int) -> int:
    """
    Julian Day Number of a proleptic Gregorian date.

    March is month 1 of the computing year. No validation: out-of-range
    months and days still map to a definite integer.
    """
    jdn = (
        div_trunc((gy + div_trunc(gm - 8, 6) + 100100) * 1461, 4)
        + div_trunc(153 * mod_floor(gm + 9, 12) + 2, 5)
        + gd
        - 34840408
    )
    return jdn - div_trunc(div_trunc(gy + 100100 + div_trunc(gm - 8, 6), 100) * 3, 4) + 752


def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    """
    Inverse of gregorian_to_jdn.

    Years are astronomical: 0 is 1 BC, -1 is 2 BC, and so on.
    """
    j = 4 * jdn + 139361631
    j = j + div_trunc(div_trunc(4 * jdn + 183187720, 146097) * 3, 4) * 4 - 3908
    i = div_trunc(mod_floor(j, 1461), 4) * 5 + 308
    gd = div_trunc(mod_floor(i, 153), 5) + 1
    gm = mod_floor(div_trunc(i, 153), 12) + 1
    gy = div_trunc(j, 1461) - 100100 + div_trunc(8 - gm, 6)
    return gy, gm, gd


def to_jdn(d: date) -> int:
    """Convert a Python date (or datetime, clock part ignored) to JDN."""
    return gregorian_to_jdn(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    """JDN -> Python date. Raises ValueError outside years 1..9999."""
    return date(*jdn_to_gregorian(jdn))
