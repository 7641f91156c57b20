"""Mini README: Reporting helpers for the finance dashboard.

The ``summary`` module turns stored records and salary tables into the
figures the dashboard charts display.
"""

from .summary import FinanceSummary

__all__ = ["FinanceSummary"]
