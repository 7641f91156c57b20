"""Mini README: Display formatting helpers.

Structure:
    * format_currency - whole shekels with thousands separators.
    * format_grid_date - ``DD.MM.YYYY`` as used in the salary grid rows.
    * format_percentage - one decimal place with a percent sign.
    * current_month - ``YYYY-MM`` label of today's period.
    * month_range - first and last ISO date of a ``YYYY-MM`` period.

Kept free of web framework imports; the CLI ``summary`` command is the main
consumer.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Tuple, Union

from ..salaries.table import days_in_month

Number = Union[int, float, Decimal]


def format_currency(amount: Number, symbol: str = "₪") -> str:
    """Return ``amount`` rounded to whole units, e.g. ``₪12,500``."""

    rounded = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(int(rounded)):,}"


def format_grid_date(value: Union[str, date]) -> str:
    parsed = value if isinstance(value, date) else date.fromisoformat(value)
    return parsed.strftime("%d.%m.%Y")


def format_percentage(value: Number) -> str:
    return f"{float(value):.1f}%"


def current_month(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"{today.year}-{today.month:02d}"


def parse_year_month(year_month: str) -> Tuple[int, int]:
    """Split ``YYYY-MM`` into integers, raising ``ValueError`` when malformed."""

    try:
        year_text, month_text = year_month.split("-")
        year, month = int(year_text), int(month_text)
    except ValueError as error:
        raise ValueError(f"Expected YYYY-MM, got {year_month!r}") from error
    days_in_month(year, month)
    return year, month


def month_range(year_month: str) -> Tuple[str, str]:
    """Return the first and last ISO dates of ``year_month``."""

    year, month = parse_year_month(year_month)
    return (
        date(year, month, 1).isoformat(),
        date(year, month, days_in_month(year, month)).isoformat(),
    )
