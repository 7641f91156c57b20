"""Mini README: Derived figures feeding the dashboard charts.

Structure:
    * FinanceSummary - aggregates the record store and salary grid.

The dashboard shows income against expenses per month, the share of each
expense category, what each field worker earned in the selected month, how
much customers still owe and the advances per employee. Nothing here is
stored; every figure is recomputed from the records on request. Records
with unparseable dates are skipped (logged at debug level) and unparseable
amounts count as zero, so one bad entry never blanks a chart.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..logging_utils import get_logger
from ..records import RecordStore
from ..salaries import SalaryGrid, total_for_worker
from ..salaries.table import ZERO, coerce_amount

LOGGER = get_logger(__name__)


def _parse_day(value: Any) -> Optional[date]:
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        return None


def _as_number(amount: Decimal) -> float:
    return float(amount)


class FinanceSummary:
    """Compute dashboard aggregates from the live stores."""

    def __init__(self, store: RecordStore, grid: SalaryGrid) -> None:
        self._store = store
        self._grid = grid

    def _dated_amounts(self, collection: str, date_field: str = "date") -> Iterable[Tuple[date, Decimal]]:
        for record in self._store.list(collection):
            day = _parse_day(record.get(date_field))
            if day is None:
                LOGGER.debug("Skipping %s record %s without a valid date", collection, record.get("id"))
                continue
            yield day, coerce_amount(record.get("amount"))

    def monthly_totals(self, year: int) -> List[Dict[str, Any]]:
        """Return income and expenses for each month of ``year``."""

        income = [ZERO] * 12
        expenses = [ZERO] * 12
        for day, amount in self._dated_amounts("income"):
            if day.year == year:
                income[day.month - 1] += amount
        for day, amount in self._dated_amounts("expenses"):
            if day.year == year:
                expenses[day.month - 1] += amount
        return [
            {"month": index + 1, "income": _as_number(income[index]), "expenses": _as_number(expenses[index])}
            for index in range(12)
        ]

    def expense_breakdown(self) -> List[Dict[str, Any]]:
        """Return each expense category's percentage of total spending."""

        totals: Dict[str, Decimal] = {}
        for record in self._store.list("expenses"):
            category = str(record.get("category") or "Uncategorised")
            totals[category] = totals.get(category, ZERO) + coerce_amount(record.get("amount"))
        overall = sum(totals.values(), ZERO)
        if overall == ZERO:
            return []
        breakdown = [
            {"name": name, "value": round(float(amount / overall * 100), 1)}
            for name, amount in totals.items()
        ]
        return sorted(breakdown, key=lambda entry: entry["value"], reverse=True)

    def worker_totals(self, year: int, month: int) -> List[Dict[str, Any]]:
        table = self._grid.get_table(year, month)
        return [
            {"name": worker, "salary": _as_number(total_for_worker(table, worker))}
            for worker in table.workers
        ]

    def outstanding_total(self) -> float:
        records = self._store.list("outstandingCustomers")
        return _as_number(sum((coerce_amount(record.get("amount")) for record in records), ZERO))

    def advances_by_employee(self) -> Dict[str, float]:
        totals: Dict[str, Decimal] = {}
        for record in self._store.list("advances"):
            employee = str(record.get("employee") or "Unknown")
            totals[employee] = totals.get(employee, ZERO) + coerce_amount(record.get("amount"))
        return {employee: _as_number(amount) for employee, amount in sorted(totals.items())}

    def snapshot(self, year: int, month: int) -> Dict[str, Any]:
        """Collect every dashboard figure for the selected period."""

        if not 1 <= month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {month}")
        monthly = self.monthly_totals(year)
        current = monthly[month - 1]
        payload = {
            "year": year,
            "month": month,
            "income": current["income"],
            "expenses": current["expenses"],
            "net": current["income"] - current["expenses"],
            "monthly_totals": monthly,
            "expense_breakdown": self.expense_breakdown(),
            "worker_totals": self.worker_totals(year, month),
            "outstanding_total": self.outstanding_total(),
            "advances_by_employee": self.advances_by_employee(),
        }
        LOGGER.debug(
            "Dashboard snapshot %s-%02d -> income: %.2f expenses: %.2f outstanding: %.2f",
            year,
            month,
            payload["income"],
            payload["expenses"],
            payload["outstanding_total"],
        )
        return payload
