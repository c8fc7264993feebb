"""Diagnostics package.

- pretty_month, new_years_table, round_trip: plain-text, no extras needed
- leap_years, nowruz_scatter: plots, need numpy and matplotlib
  (pip install "jalcal[diagnostics]")
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_years", "nowruz_scatter"]
