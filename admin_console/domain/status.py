"""Status invariant guard — repairs out-of-range status values.

Every entity status is a small closed ``str`` Enum. Values that arrive from
the server or from a stale UI control are mapped onto a legal member; an
unknown value becomes the entity's fallback. Nothing here raises.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

S = TypeVar("S", bound=Enum)


def _canonical(raw: Any) -> str | None:
    if isinstance(raw, Enum):
        raw = raw.value
    if not isinstance(raw, str):
        return None
    return raw.strip().lower()


def normalize_status(
    raw: Any,
    status_type: type[S],
    fallback: S,
    aliases: Mapping[str, S] | None = None,
) -> S:
    """Map an arbitrary value onto a member of ``status_type``.

    Accepts enum members, their string values (case- and whitespace-insensitive)
    and any spelling listed in ``aliases``. Everything else yields ``fallback``.
    """
    if isinstance(raw, status_type):
        return raw

    key = _canonical(raw)
    if key is None:
        return fallback

    for member in status_type:
        if member.value == key:
            return member

    if aliases:
        aliased = aliases.get(key)
        if aliased is not None:
            return aliased

    return fallback


def is_legal_status(raw: Any, status_type: type[Enum]) -> bool:
    """True when ``raw`` is already a member of ``status_type``."""
    return isinstance(raw, status_type)
