"""Mini README: Utility helpers for VIP Finance.

Currently exports the display formatting helpers used by the CLI reports.
"""

from .formatting import (
    current_month,
    format_currency,
    format_grid_date,
    format_percentage,
    month_range,
    parse_year_month,
)

__all__ = [
    "current_month",
    "format_currency",
    "format_grid_date",
    "format_percentage",
    "month_range",
    "parse_year_month",
]
