"""Mini README: Persistence subsystem package initialiser.

Re-exports the adapter contract, the registry and the built-in backends.
The package is divided into ``base`` for the abstract interface,
``registry`` for backend lookup and ``backends`` for the concrete stores.
"""

from .base import PersistenceAdapter
from .registry import AdapterRegistry, REGISTRY
from .backends import LocalStorageAdapter, MemoryAdapter

__all__ = [
    "AdapterRegistry",
    "LocalStorageAdapter",
    "MemoryAdapter",
    "PersistenceAdapter",
    "REGISTRY",
]
