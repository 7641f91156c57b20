"""Mini README: Field-worker salary tables and their pure operations.

Structure:
    * SalaryTable - one month's roster plus per-day, per-worker amounts.
    * coerce_amount - permissive conversion of form input to ``Decimal``.
    * days_in_month / period_dates - calendar helpers for a salary period.
    * placeholder_table - default table for a month nobody has saved yet.
    * set_amount / add_worker - pure updates returning a new table.
    * total_for_worker / total_for_date / grand_total - exact aggregates.

Tables are immutable values. Every update returns a fresh table so the UI can
compare the before and after states and nothing half-applied is ever
visible. Amounts are ``Decimal`` so the grand total equals both the sum of
the worker totals and the sum of the daily totals to the last agora.

Invariants held by every table produced here:
    * the roster has no duplicate names;
    * every date key lies inside the table's year and month;
    * every date row has exactly one cell per roster worker.
"""

from __future__ import annotations

import calendar
import math
import random
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

ZERO = Decimal("0")
CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("1e12")
PLACEHOLDER_RANGE = (250, 310)

DateLike = Union[str, date]


@dataclass(frozen=True, slots=True)
class SalaryTable:
    """Daily salary grid for one calendar month."""

    year: int
    month: int
    workers: Tuple[str, ...]
    data: Dict[str, Dict[str, Decimal]]

    @property
    def period_key(self) -> Tuple[str, str]:
        """Return the (year, month) keys used in the stored document."""

        return str(self.year), str(self.month)

    @property
    def dates(self) -> List[str]:
        return sorted(self.data)

    def as_document(self) -> Dict[str, Any]:
        """Export the table as JSON-ready ``{workers, data}``."""

        return {
            "workers": list(self.workers),
            "data": {
                day: {worker: _json_number(amount) for worker, amount in row.items()}
                for day, row in sorted(self.data.items())
            },
        }

    @classmethod
    def from_document(cls, year: int, month: int, document: Mapping[str, Any]) -> "SalaryTable":
        """Build a table from its stored form, restoring the invariants.

        Missing cells become zero; cells for workers that are not on the
        roster are dropped. Dates outside the period and entries of the
        wrong shape raise ``ValueError``.
        """

        _check_period(year, month)
        if not isinstance(document, Mapping):
            raise ValueError(f"Salary table {year}-{month:02d} must be a mapping")
        raw_workers = document.get("workers") or []
        raw_data = document.get("data") or {}
        if not isinstance(raw_workers, list):
            raise ValueError(f"Workers for {year}-{month:02d} must be a list")
        if not isinstance(raw_data, Mapping):
            raise ValueError(f"Salary data for {year}-{month:02d} must map dates to rows")
        workers = _unique_roster(raw_workers)
        data: Dict[str, Dict[str, Decimal]] = {}
        for raw_day, raw_row in raw_data.items():
            day = _normalise_date(raw_day, year, month)
            raw_row = raw_row or {}
            if not isinstance(raw_row, Mapping):
                raise ValueError(f"Salary row {day} must map workers to amounts")
            extra = set(raw_row) - set(workers)
            if extra:
                LOGGER.warning(
                    "Dropping cells for workers not on the %s-%02d roster: %s",
                    year,
                    month,
                    sorted(extra),
                )
            data[day] = {worker: coerce_amount(raw_row.get(worker)) for worker in workers}
        return cls(year=year, month=month, workers=workers, data=data)


def _json_number(amount: Decimal) -> Union[int, float]:
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)


def _parse_amount(value: Any) -> Decimal:
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value)) if math.isfinite(value) else ZERO
    text = str(value).strip().replace(",", "")
    if not text:
        return ZERO
    try:
        amount = Decimal(text)
    except InvalidOperation:
        LOGGER.debug("Coercing unparseable amount %r to zero", value)
        return ZERO
    return amount if amount.is_finite() else ZERO


def coerce_amount(value: Any) -> Decimal:
    """Convert user input to a two-place ``Decimal``; blank or unparseable input is zero.

    Amounts are rounded half-up to two decimal places. Magnitudes of
    ``MAX_AMOUNT`` or more are treated as unparseable, which keeps every cell
    exactly representable as a JSON number.
    """

    amount = _parse_amount(value)
    if abs(amount) >= MAX_AMOUNT:
        LOGGER.warning("Coercing out-of-range amount %r to zero", value)
        return ZERO
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def _check_period(year: int, month: int) -> None:
    if not 1 <= int(month) <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    if int(year) < 1:
        raise ValueError(f"Year must be positive, got {year}")


def days_in_month(year: int, month: int) -> int:
    """Return the number of calendar days, counting 29 February in leap years."""

    _check_period(year, month)
    return calendar.monthrange(year, month)[1]


def period_dates(year: int, month: int) -> List[str]:
    """Return every ISO date of the month in order."""

    return [date(year, month, day).isoformat() for day in range(1, days_in_month(year, month) + 1)]


def _normalise_date(value: DateLike, year: int, month: int) -> str:
    if isinstance(value, datetime):
        parsed = value.date()
    elif isinstance(value, date):
        parsed = value
    else:
        try:
            parsed = date.fromisoformat(str(value))
        except ValueError as error:
            raise ValueError(f"Salary dates must be ISO formatted, got {value!r}") from error
    if (parsed.year, parsed.month) != (year, month):
        raise ValueError(f"Date {parsed.isoformat()} is outside {year}-{month:02d}")
    return parsed.isoformat()


def _unique_roster(names: Iterable[str]) -> Tuple[str, ...]:
    roster: List[str] = []
    for name in names:
        cleaned = str(name).strip()
        if cleaned and cleaned not in roster:
            roster.append(cleaned)
    return tuple(roster)


def placeholder_table(
    year: int,
    month: int,
    roster: Iterable[str],
    rng: Optional[random.Random] = None,
) -> SalaryTable:
    """Synthesise a month with placeholder amounts for every day and worker."""

    workers = _unique_roster(roster)
    rng = rng or random.Random(f"{year}-{month:02d}")
    low, high = PLACEHOLDER_RANGE
    data = {
        day: {worker: Decimal(rng.randint(low, high)) for worker in workers}
        for day in period_dates(year, month)
    }
    LOGGER.debug("Synthesised placeholder salary table for %s-%02d", year, month)
    return SalaryTable(year=year, month=month, workers=workers, data=data)


def set_amount(table: SalaryTable, day: DateLike, worker: str, amount: Any) -> SalaryTable:
    """Return a copy of ``table`` with one cell replaced."""

    key = _normalise_date(day, table.year, table.month)
    if worker not in table.workers:
        raise ValueError(f"Worker '{worker}' is not on the roster")
    data = {existing: dict(row) for existing, row in table.data.items()}
    row = data.setdefault(key, {name: ZERO for name in table.workers})
    row[worker] = coerce_amount(amount)
    return SalaryTable(year=table.year, month=table.month, workers=table.workers, data=data)


def add_worker(table: SalaryTable, name: str) -> SalaryTable:
    """Append ``name`` to the roster with a zero cell on every existing date.

    Blank names and names already on the roster raise ``ValueError``.
    """

    cleaned = (name or "").strip()
    if not cleaned:
        raise ValueError("Worker name must not be blank")
    if cleaned in table.workers:
        raise ValueError(f"Worker '{cleaned}' is already on the roster")
    data = {day: {**row, cleaned: ZERO} for day, row in table.data.items()}
    LOGGER.info("Added worker '%s' to %s-%02d", cleaned, table.year, table.month)
    return SalaryTable(
        year=table.year,
        month=table.month,
        workers=(*table.workers, cleaned),
        data=data,
    )


def total_for_worker(table: SalaryTable, name: str) -> Decimal:
    if name not in table.workers:
        raise ValueError(f"Worker '{name}' is not on the roster")
    return sum((row.get(name, ZERO) for row in table.data.values()), ZERO)


def total_for_date(table: SalaryTable, day: DateLike) -> Decimal:
    key = _normalise_date(day, table.year, table.month)
    row = table.data.get(key, {})
    return sum((row.get(worker, ZERO) for worker in table.workers), ZERO)


def grand_total(table: SalaryTable) -> Decimal:
    """Sum every cell once; equals both the worker and the date totals."""

    return sum(
        (row.get(worker, ZERO) for row in table.data.values() for worker in table.workers),
        ZERO,
    )


def table_summary(table: SalaryTable) -> Dict[str, Any]:
    """Return the table with its row, column and grand totals for display."""

    payload = {"year": table.year, "month": table.month, **table.as_document()}
    payload["worker_totals"] = {
        worker: _json_number(total_for_worker(table, worker)) for worker in table.workers
    }
    payload["date_totals"] = {day: _json_number(total_for_date(table, day)) for day in table.dates}
    payload["grand_total"] = _json_number(grand_total(table))
    return payload
