"""Mini README: Generic CRUD store for flat bookkeeping records.

Structure:
    * RecordStore - list/get/create/update/delete over keyed collections.
    * generate_token_id - string id generator for the ``token`` strategy.

Each collection is a JSON list of dictionaries stored under the collection
name through an injected ``PersistenceAdapter``. The store keeps no copy of
its own: every mutation reads the current list, builds the new list, hands it
to the adapter and only then returns. When the adapter raises, nothing has
changed and the ``PersistenceError`` reaches the caller. Required-field
validation is the caller's job; the store accepts whatever fields it is
given.
"""

from __future__ import annotations

import random
import string
import time
from typing import Any, Dict, List

from ..errors import NotFoundError, PersistenceError
from ..logging_utils import get_logger
from ..persistence import PersistenceAdapter
from .collections import collection_spec, sort_for_display

LOGGER = get_logger(__name__)

Record = Dict[str, Any]

_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def generate_token_id(prefix: str) -> str:
    """Return ``<prefix>-<base36 millis><3 random base36 chars>``."""

    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(_BASE36, k=3))
    return f"{prefix}-{_to_base36(millis)}{suffix}"


def _same_id(left: Any, right: Any) -> bool:
    return str(left) == str(right)


class RecordStore:
    """Manage keyed record collections on top of a persistence adapter."""

    def __init__(self, adapter: PersistenceAdapter, *, id_strategy: str = "sequential") -> None:
        if id_strategy not in {"sequential", "token"}:
            raise ValueError(f"Unsupported id strategy: {id_strategy}")
        self._adapter = adapter
        self.id_strategy = id_strategy
        LOGGER.debug(
            "Record store initialised with backend '%s' and %s ids",
            adapter.backend_name,
            id_strategy,
        )

    def _load(self, collection: str) -> List[Record]:
        """Read a collection, propagating backend failures."""

        value = self._adapter.get(collection)
        if value is None:
            return []
        if not isinstance(value, list):
            raise PersistenceError(collection, "stored value is not a list of records")
        return value

    def _persist(self, collection: str, records: List[Record]) -> None:
        self._adapter.set(collection, records)

    def _next_id(self, collection: str, records: List[Record]) -> Any:
        existing = [record.get("id") for record in records]
        if self.id_strategy == "token":
            prefix = collection_spec(collection).id_prefix
            taken = {str(identifier) for identifier in existing}
            candidate = generate_token_id(prefix)
            while candidate in taken:
                candidate = generate_token_id(prefix)
            return candidate
        numeric = [
            identifier
            for identifier in existing
            if isinstance(identifier, int) and not isinstance(identifier, bool)
        ]
        return max(numeric, default=0) + 1

    def list(self, collection: str) -> List[Record]:
        """Return every record in stored order; empty when unavailable."""

        try:
            records = self._load(collection)
        except PersistenceError as error:
            LOGGER.error("Listing %s failed, returning no records: %s", collection, error)
            return []
        LOGGER.debug("Listed %s %s records", len(records), collection)
        return records

    def list_for_display(self, collection: str) -> List[Record]:
        """Return records ordered by their business date for tables."""

        return sort_for_display(collection, self.list(collection))

    def get(self, collection: str, record_id: Any) -> Record:
        """Retrieve one record, raising ``NotFoundError`` when missing."""

        for record in self._load(collection):
            if _same_id(record.get("id"), record_id):
                return record
        raise NotFoundError(collection, record_id)

    def create(self, collection: str, fields: Dict[str, Any]) -> Record:
        """Assign an id, append the record and persist the collection."""

        records = self._load(collection)
        record = {key: value for key, value in fields.items() if key != "id"}
        record = {"id": self._next_id(collection, records), **record}
        self._persist(collection, [*records, record])
        LOGGER.info("Created %s record %s", collection, record["id"])
        return record

    def update(self, collection: str, record_id: Any, fields: Dict[str, Any]) -> Record:
        """Replace the record matching ``record_id`` with ``fields``."""

        records = self._load(collection)
        index = self._index_of(collection, records, record_id)
        replacement = {key: value for key, value in fields.items() if key != "id"}
        replacement = {"id": records[index].get("id"), **replacement}
        updated = list(records)
        updated[index] = replacement
        self._persist(collection, updated)
        LOGGER.info("Updated %s record %s", collection, replacement["id"])
        return replacement

    def delete(self, collection: str, record_id: Any) -> None:
        """Remove the record matching ``record_id``; other records keep their order."""

        records = self._load(collection)
        index = self._index_of(collection, records, record_id)
        remaining = records[:index] + records[index + 1 :]
        self._persist(collection, remaining)
        LOGGER.info("Deleted %s record %s", collection, record_id)

    @staticmethod
    def _index_of(collection: str, records: List[Record], record_id: Any) -> int:
        for index, record in enumerate(records):
            if _same_id(record.get("id"), record_id):
                return index
        LOGGER.warning("%s record %s not found", collection, record_id)
        raise NotFoundError(collection, record_id)

    def backend_metadata(self) -> Dict[str, str]:
        return self._adapter.metadata()
