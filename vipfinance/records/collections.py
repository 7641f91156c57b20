"""Mini README: Catalogue of the bookkeeping collections.

Structure:
    * CollectionSpec - id prefix and display ordering for one collection.
    * COLLECTIONS - the four collections the dashboard manages.
    * collection_spec - lookup with a neutral fallback for ad-hoc collections.
    * sort_for_display - order records by their business date.

The store accepts any collection name; this catalogue only adds the
presentation rules (newest transactions first, nearest due date first) and
the prefixes used for token ids.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List


@dataclass(frozen=True, slots=True)
class CollectionSpec:
    """Presentation metadata for a record collection."""

    name: str
    id_prefix: str
    date_field: str = "date"
    newest_first: bool = True


COLLECTIONS: Dict[str, CollectionSpec] = {
    spec.name: spec
    for spec in (
        CollectionSpec("income", "inc"),
        CollectionSpec("expenses", "exp"),
        CollectionSpec("advances", "adv"),
        CollectionSpec("outstandingCustomers", "oc", date_field="due_date", newest_first=False),
    )
}


def collection_spec(name: str) -> CollectionSpec:
    """Return the catalogue entry for ``name`` or a default derived from it."""

    if name in COLLECTIONS:
        return COLLECTIONS[name]
    return CollectionSpec(name=name, id_prefix=name[:3].lower() or "rec")


def sort_for_display(name: str, records: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Sort records by the collection's date field.

    ISO date strings sort lexically. Records missing the field sort last in
    either direction.
    """

    spec = collection_spec(name)
    records = list(records)
    dated = [record for record in records if record.get(spec.date_field)]
    undated = [record for record in records if not record.get(spec.date_field)]
    dated.sort(key=lambda record: str(record[spec.date_field]), reverse=spec.newest_first)
    return dated + undated
