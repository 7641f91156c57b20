"""Mini README: Persisted salary grid keyed by year and month.

Structure:
    * SalaryGrid - loads, synthesises and saves ``SalaryTable`` values.

All months share one document stored under ``fieldWorkerSalaries`` with the
shape ``{year: {month: {workers, data}}}``. Saving a table rewrites its
period wholesale (last write wins) and leaves other periods untouched. A
month that was never saved is synthesised from the default roster with
placeholder amounts; it is not written until someone saves it.
"""

from __future__ import annotations

import random
from typing import Any, Dict, Iterable, Optional

from ..configuration import DEFAULT_ROSTER
from ..errors import PersistenceError
from ..logging_utils import get_logger
from ..persistence import PersistenceAdapter
from .table import SalaryTable, placeholder_table

LOGGER = get_logger(__name__)

DOCUMENT_KEY = "fieldWorkerSalaries"


class SalaryGrid:
    """Read and write monthly salary tables through a persistence adapter."""

    def __init__(
        self,
        adapter: PersistenceAdapter,
        roster: Optional[Iterable[str]] = None,
        *,
        placeholder_seed: Optional[str] = None,
    ) -> None:
        self._adapter = adapter
        self.roster = list(roster) if roster is not None else list(DEFAULT_ROSTER)
        self._placeholder_seed = placeholder_seed
        LOGGER.debug("Salary grid initialised with roster %s", self.roster)

    def load_document(self) -> Dict[str, Any]:
        """Return the whole ``{year: {month: table}}`` document."""

        document = self._adapter.get(DOCUMENT_KEY)
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise PersistenceError(DOCUMENT_KEY, "stored salaries are not a mapping")
        for year_key, months in document.items():
            if not isinstance(months, dict):
                raise PersistenceError(DOCUMENT_KEY, f"stored year {year_key} is not a mapping")
        return document

    def replace_document(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and store a complete salary document, replacing the old one."""

        normalised: Dict[str, Dict[str, Any]] = {}
        for year_key, months in document.items():
            if not isinstance(months, dict):
                raise ValueError(f"Salary year {year_key} must map months to tables")
            for month_key, table_document in months.items():
                table = SalaryTable.from_document(int(year_key), int(month_key), table_document)
                normalised.setdefault(table.period_key[0], {})[table.period_key[1]] = table.as_document()
        self._adapter.set(DOCUMENT_KEY, normalised)
        LOGGER.info("Replaced salary document (%s years)", len(normalised))
        return normalised

    def _rng_for(self, year: int, month: int) -> random.Random:
        seed = f"{year}-{month:02d}"
        if self._placeholder_seed is not None:
            seed = f"{self._placeholder_seed}-{seed}"
        return random.Random(seed)

    def get_table(self, year: int, month: int) -> SalaryTable:
        """Return the saved table for the period or a placeholder default.

        A stored period that cannot be read back as a table raises
        ``PersistenceError``.
        """

        stored = self.load_document().get(str(year), {}).get(str(month))
        if stored is not None:
            LOGGER.debug("Loaded salary table %s-%02d", year, month)
            try:
                return SalaryTable.from_document(year, month, stored)
            except ValueError as error:
                raise PersistenceError(DOCUMENT_KEY, str(error)) from error
        return placeholder_table(year, month, self.roster, rng=self._rng_for(year, month))

    def save(self, table: SalaryTable) -> None:
        """Persist ``table`` for its period, replacing whatever was there."""

        document = self.load_document()
        year_key, month_key = table.period_key
        updated = {key: dict(value) for key, value in document.items()}
        updated.setdefault(year_key, {})[month_key] = table.as_document()
        self._adapter.set(DOCUMENT_KEY, updated)
        LOGGER.info("Saved salary table %s-%02d for %s workers", table.year, table.month, len(table.workers))
