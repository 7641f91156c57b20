"""Mini README: Record store package for VIP Finance.

Groups the generic CRUD store, the catalogue of known collections and the
operation outcome helpers consumed by the interface layer.
"""

from .collections import COLLECTIONS, CollectionSpec, collection_spec, sort_for_display
from .outcome import OperationOutcome, OperationStatus, run_operation
from .store import RecordStore, generate_token_id

__all__ = [
    "COLLECTIONS",
    "CollectionSpec",
    "OperationOutcome",
    "OperationStatus",
    "RecordStore",
    "collection_spec",
    "generate_token_id",
    "run_operation",
    "sort_for_display",
]
