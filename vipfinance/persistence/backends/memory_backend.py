"""Mini README: In-memory backend standing in for the mock HTTP API.

Structure:
    * MemoryAdapter - dict-backed document store with simulated failures.

Values are deep-copied on the way in and out so callers can never mutate the
stored state behind the adapter's back. ``fail_writes`` simulates a network
error; the previous value stays readable.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Optional

from ..base import PersistenceAdapter
from ..demo_data import demo_documents
from ..registry import REGISTRY
from ...errors import PersistenceError
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)


class MemoryAdapter(PersistenceAdapter):
    """Mock API backend keeping JSON documents in process memory."""

    backend_name = "memory"

    def __init__(
        self,
        documents: Optional[Dict[str, Any]] = None,
        *,
        fail_writes: bool = False,
    ) -> None:
        self._documents: Dict[str, Any] = copy.deepcopy(documents) if documents else {}
        self.fail_writes = fail_writes
        LOGGER.debug("Memory backend initialised with keys: %s", sorted(self._documents))

    @classmethod
    def from_settings(cls, settings: Any) -> "MemoryAdapter":
        documents = demo_documents() if settings.seed_demo_data else None
        return cls(documents)

    def get(self, key: str) -> Optional[Any]:
        LOGGER.debug("GET %s", key)
        return copy.deepcopy(self._documents.get(key))

    def set(self, key: str, value: Any) -> None:
        if self.fail_writes:
            LOGGER.error("Simulated write failure for %s", key)
            raise PersistenceError(key, "simulated network error")
        LOGGER.debug("SET %s", key)
        self._documents[key] = copy.deepcopy(value)


REGISTRY.register(MemoryAdapter)
