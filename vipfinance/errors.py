"""Mini README: Domain exceptions shared by the store, grid and adapters.

Structure:
    * NotFoundError - a record id does not exist in its collection.
    * PersistenceError - the storage backend failed to read or write.

Invalid input that is the caller's fault (unknown roster names, dates
outside a salary period) keeps raising the built-in ``ValueError``.
"""

from __future__ import annotations


class NotFoundError(KeyError):
    """Raised when update, delete or get references an unknown record id."""

    def __init__(self, collection: str, record_id: object) -> None:
        super().__init__(f"{collection} record {record_id} not found")
        self.collection = collection
        self.record_id = record_id

    def __str__(self) -> str:
        return self.args[0]


class PersistenceError(RuntimeError):
    """Raised when a storage backend cannot complete a get or set."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"Storage failure for '{key}': {message}")
        self.key = key
