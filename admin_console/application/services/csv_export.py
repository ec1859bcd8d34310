"""CSV export of a derived list view."""

import csv
import io
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any


def _cell(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return "" if value is None else value


def render_csv(entities: Iterable[Any], columns: Sequence[str]) -> str:
    """Render ``entities`` as CSV with a header row of ``columns``.

    Raises ValueError when there is nothing to export.
    """
    rows = list(entities)
    if not rows:
        raise ValueError("No data to export")

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(columns)
    for entity in rows:
        writer.writerow([_cell(getattr(entity, column, "")) for column in columns])
    return buffer.getvalue()
