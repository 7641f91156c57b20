"""Mini README: Backend registry for persistence adapters.

Structure:
    * AdapterRegistry - maps backend names to ``PersistenceAdapter`` classes.

Settings name a backend (``memory`` or ``local``); the registry resolves the
name and builds the adapter so the rest of the application never imports a
concrete backend directly.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Type

from .base import PersistenceAdapter
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class AdapterRegistry:
    """Simple registry for mapping backend identifiers to adapter classes."""

    def __init__(self) -> None:
        self._adapters: Dict[str, Type[PersistenceAdapter]] = {}

    def register(self, adapter: Type[PersistenceAdapter]) -> None:
        """Register a new adapter class with the registry."""

        identifier = adapter.backend_name.lower()
        LOGGER.debug("Registering persistence backend '%s'", identifier)
        self._adapters[identifier] = adapter

    def available_backends(self) -> Iterable[str]:
        """Return backend identifiers in sorted order."""

        return sorted(self._adapters.keys())

    def create(self, identifier: str, settings: Any) -> PersistenceAdapter:
        """Instantiate the backend matching the identifier."""

        adapter_cls = self._adapters.get(identifier.strip().lower())
        if not adapter_cls:
            raise KeyError(f"Unknown persistence backend '{identifier}'")
        LOGGER.info("Creating persistence backend '%s'", identifier)
        return adapter_cls.from_settings(settings)


REGISTRY = AdapterRegistry()
