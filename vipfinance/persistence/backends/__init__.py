"""Mini README: Concrete persistence backends.

Each backend subclasses ``PersistenceAdapter`` and calls
``REGISTRY.register`` during module import so settings can select it by name.
"""

from .local_backend import LocalStorageAdapter
from .memory_backend import MemoryAdapter

__all__ = ["LocalStorageAdapter", "MemoryAdapter"]
