"""Client-side collection statistics (the backend has no stable stats endpoint)."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from admin_console.application.adapters.base import EntityAdapter


@dataclass(frozen=True)
class CollectionStats:
    total: int
    by_status: dict[str, int]
    by_group: dict[str, int] = field(default_factory=dict)


def _plain(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return "" if value is None else str(value)


def summarize(entities: Iterable[Any], adapter: EntityAdapter) -> CollectionStats:
    """Count entities per legal status (zeros included) and per ``group_field``."""
    entities = list(entities)
    by_status = {status.value: 0 for status in adapter.legal_statuses}
    for entity in entities:
        status = adapter.normalize_status(getattr(entity, "status", None))
        by_status[status.value] += 1

    by_group: dict[str, int] = {}
    if adapter.group_field:
        counts = Counter(_plain(getattr(entity, adapter.group_field, "")) for entity in entities)
        by_group = dict(sorted(counts.items()))

    return CollectionStats(total=len(entities), by_status=by_status, by_group=by_group)
