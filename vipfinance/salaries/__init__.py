"""Mini README: Field-worker salary package for VIP Finance.

``table`` holds the immutable ``SalaryTable`` value and the pure update and
total functions; ``grid`` persists tables per year and month.
"""

from .grid import DOCUMENT_KEY, SalaryGrid
from .table import (
    SalaryTable,
    add_worker,
    coerce_amount,
    days_in_month,
    grand_total,
    period_dates,
    placeholder_table,
    set_amount,
    table_summary,
    total_for_date,
    total_for_worker,
)

__all__ = [
    "DOCUMENT_KEY",
    "SalaryGrid",
    "SalaryTable",
    "add_worker",
    "coerce_amount",
    "days_in_month",
    "grand_total",
    "period_dates",
    "placeholder_table",
    "set_amount",
    "table_summary",
    "total_for_date",
    "total_for_worker",
]
