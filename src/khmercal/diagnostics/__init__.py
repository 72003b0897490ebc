"""Diagnostics package.

- text tools: pretty_month, new_years_table, round_trip
- plots (numpy + matplotlib, ``khmercal[diagnostics]``): leap_years, new_year_scatter
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_years", "new_year_scatter"]
