"""Mini README: Abstract persistence contract consumed by the store and grid.

Structure:
    * PersistenceAdapter - keyed JSON document interface (``get``/``set``).

The record store and the salary grid only ever talk to this interface. They
do not know whether documents live in a simulated API held in memory or in
local JSON files. Concrete backends live in ``backends`` and announce
themselves to the registry when imported.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class PersistenceAdapter(ABC):
    """Base interface for keyed document storage backends."""

    backend_name: str = "generic"

    @classmethod
    @abstractmethod
    def from_settings(cls, settings: Any) -> "PersistenceAdapter":
        """Build the backend from a ``VipFinanceSettings`` instance."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the JSON value stored under ``key`` or ``None`` when absent.

        Raises ``PersistenceError`` when the backend cannot be read.
        """

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Replace the JSON value stored under ``key``.

        Raises ``PersistenceError`` when the write does not complete. A failed
        write must leave the previously stored value readable.
        """

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for status displays."""

        return {"backend": self.backend_name}
