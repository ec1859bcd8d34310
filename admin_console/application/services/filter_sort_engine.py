"""Filter/sort engine — derives the visible, ordered slice of a collection.

Everything here is pure and synchronous. The derived view for a fixed
collection and criteria is always the same list in the same order: ties
on the sort key keep collection order, in both directions.
"""

import locale
import math
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, TypeVar

from admin_console.application.adapters.base import SortKind

E = TypeVar("E")

ALL = "all"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class FilterSortCriteria:
    """Transient list criteria. Every ``with_*`` returns a new instance."""

    search_text: str = ""
    field_filters: Mapping[str, str] = field(default_factory=dict)
    sort_field: str = ""
    sort_direction: SortDirection = SortDirection.ASC

    def with_search(self, text: str) -> "FilterSortCriteria":
        return replace(self, search_text=text)

    def with_filter(self, field_name: str, value: Any) -> "FilterSortCriteria":
        filters = dict(self.field_filters)
        filters[field_name] = _plain(value) if value is not None else ALL
        return replace(self, field_filters=filters)

    def with_sort(self, field_name: str) -> "FilterSortCriteria":
        """Select a sort column: same column toggles, a new column starts ascending."""
        if field_name == self.sort_field:
            direction = (
                SortDirection.DESC
                if self.sort_direction is SortDirection.ASC
                else SortDirection.ASC
            )
            return replace(self, sort_direction=direction)
        return replace(self, sort_field=field_name, sort_direction=SortDirection.ASC)

    def active_filters(self) -> dict[str, str]:
        return {
            name: value
            for name, value in self.field_filters.items()
            if value not in (ALL, "")
        }


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if value is None:
        return ""
    return value


def _text_key(value: Any) -> str:
    return locale.strxfrm(str(_plain(value)).casefold())


def _numeric_key(value: Any) -> float:
    try:
        number = float(_plain(value))
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(number) else number


def _rank_key(order: Sequence[str]) -> Callable[[Any], int]:
    """Position in ``order``; values outside it sort after every ranked one."""
    positions = {value.casefold(): index for index, value in enumerate(order)}

    def key(value: Any) -> int:
        return positions.get(str(_plain(value)).strip().casefold(), len(positions))

    return key


def matches_search(entity: Any, search_text: str, search_fields: Iterable[str]) -> bool:
    """Case-insensitive substring match against any of ``search_fields``."""
    if not search_text:
        return True
    needle = search_text.casefold()
    return any(
        needle in str(_plain(getattr(entity, name, ""))).casefold()
        for name in search_fields
    )


def matches_filters(entity: Any, filters: Mapping[str, str]) -> bool:
    return all(
        str(_plain(getattr(entity, name, ""))) == str(expected)
        for name, expected in filters.items()
    )


def view(
    collection: Iterable[E],
    criteria: FilterSortCriteria,
    *,
    search_fields: Iterable[str],
    sort_fields: Mapping[str, SortKind],
    sort_ranks: Mapping[str, Sequence[str]] | None = None,
) -> list[E]:
    """Filter ``collection`` by ``criteria`` and order it by the active sort field."""
    search_fields = tuple(search_fields)
    filters = criteria.active_filters()
    visible = [
        entity
        for entity in collection
        if matches_search(entity, criteria.search_text, search_fields)
        and matches_filters(entity, filters)
    ]

    kind = sort_fields.get(criteria.sort_field)
    if kind is None:
        return visible

    sort_field = criteria.sort_field
    if kind is SortKind.RANK:
        key_fn = _rank_key((sort_ranks or {}).get(sort_field, ()))
    elif kind is SortKind.NUMERIC:
        key_fn = _numeric_key
    else:
        key_fn = _text_key
    # sorted() is stable and keeps ties in input order with reverse=True as well
    return sorted(
        visible,
        key=lambda entity: key_fn(getattr(entity, sort_field, None)),
        reverse=criteria.sort_direction is SortDirection.DESC,
    )


def distinct_values(collection: Iterable[Any], field_name: str) -> list[str]:
    """Sorted non-empty distinct values of one field, for filter option lists."""
    values = {
        str(_plain(getattr(entity, field_name, "")))
        for entity in collection
    }
    values.discard("")
    return sorted(values, key=_text_key)


def total_pages(count: int, page_size: int) -> int:
    if page_size <= 0:
        return 1
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, count: int, page_size: int) -> int:
    return min(max(1, page), total_pages(count, page_size))


def paginate(items: list[E], page: int, page_size: int) -> list[E]:
    """One 1-based page of ``items``; out-of-range pages are clamped."""
    if page_size <= 0:
        return list(items)
    page = clamp_page(page, len(items), page_size)
    start = (page - 1) * page_size
    return items[start : start + page_size]
