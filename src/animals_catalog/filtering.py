from __future__ import annotations
from typing import List, Mapping, Sequence, TypeVar

R = TypeVar("R", bound=Mapping[str, str])

SEARCH_FIELDS = ("name", "location", "description")

def matches_query(record: Mapping[str, str], query: str) -> bool:
    """Case-insensitive substring match against name, location or description."""
    q = query.lower()
    return any(q in (record.get(f) or "").lower() for f in SEARCH_FIELDS)

def matches_category(record: Mapping[str, str], category: str) -> bool:
    return category == "" or record.get("category") == category

def compute_filtered_view(records: Sequence[R], query: str, category: str) -> List[R]:
    """
    Derived view of `records`: text match AND category match.
    An empty query or empty category lets every record through that gate.
    Pure: never mutates `records` and keeps their order.
    """
    return [r for r in records if matches_query(r, query) and matches_category(r, category)]
