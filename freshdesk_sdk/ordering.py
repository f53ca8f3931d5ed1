"""Opt-in ordering helpers for fetched records.

Records come back in server order; nothing in the SDK sorts them for you.
"""

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any, TypeVar

RecordT = TypeVar("RecordT")

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _by_id(record: Any) -> int:
    return record.id


def _by_created_at(record: Any) -> datetime:
    created_at = record.created_at
    if created_at is None:
        return _EPOCH
    if created_at.tzinfo is None:
        return created_at.replace(tzinfo=timezone.utc)
    return created_at


def sort_by_id(records: Iterable[RecordT]) -> list[RecordT]:
    """Return the records sorted by ascending id."""
    return sorted(records, key=_by_id)


def sort_by_created_desc(records: Iterable[RecordT]) -> list[RecordT]:
    """Return the records newest first; records without created_at go last."""
    return sorted(records, key=_by_created_at, reverse=True)
