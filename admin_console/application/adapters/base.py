"""Generic entity adapter — the per-entity configuration of the list core.

One ``EntityAdapter`` describes everything the generic controllers need to
know about an entity type: its dataclass and wire schema, the status enum
and its fallback, which fields are searched, filtered and sorted, how a
fresh draft looks and which validation rules guard a submit.
"""

import dataclasses
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from admin_console.application.schemas import WireRecord
from admin_console.domain.validation import FieldRule
from admin_console.domain.status import normalize_status

E = TypeVar("E")
S = TypeVar("S", bound=Enum)


class SortKind(str, Enum):
    TEXT = "text"
    NUMERIC = "numeric"
    RANK = "rank"           # position in ``EntityAdapter.sort_ranks``


class ViewMode(str, Enum):
    """Where "view" opens: the read-only form or a separate detail panel."""

    FORM = "form"
    DETAIL = "detail"


@dataclass(frozen=True)
class EntityAdapter(Generic[E, S]):
    name: str                       # translation namespace, e.g. "clients"
    label: str                      # singular label key, e.g. "client"
    resource: str                   # REST path segment under the API root
    entity_type: type[E]
    wire_type: type[WireRecord]
    status_type: type[S]
    search_fields: tuple[str, ...]
    filter_fields: tuple[str, ...]
    sort_fields: Mapping[str, SortKind]
    default_sort: str
    validation_rules: tuple[FieldRule, ...] = ()
    export_fields: tuple[str, ...] = ()
    status_aliases: Mapping[str, S] = field(default_factory=dict)
    status_to_wire: Mapping[S, str] = field(default_factory=dict)
    write_only_fields: tuple[str, ...] = ()
    draft_defaults: Callable[[], Mapping[str, Any]] | None = None
    view_mode: ViewMode = ViewMode.FORM
    group_field: str | None = None
    sort_ranks: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        known = set(self.field_names)
        configured = {
            *self.search_fields,
            *self.filter_fields,
            *self.sort_fields,
            *self.export_fields,
            *self.write_only_fields,
            *(rule.field for rule in self.validation_rules),
        }
        if self.group_field:
            configured.add(self.group_field)
        unknown = configured - known
        if unknown:
            raise ValueError(
                f"{self.entity_type.__name__} adapter references unknown fields: "
                f"{', '.join(sorted(unknown))}"
            )
        if "status" not in known or "id" not in known:
            raise ValueError(f"{self.entity_type.__name__} must declare 'id' and 'status'")
        unranked = [
            name
            for name, kind in self.sort_fields.items()
            if kind is SortKind.RANK and not self.sort_ranks.get(name)
        ]
        if unranked:
            raise ValueError(
                f"{self.entity_type.__name__} rank sort fields need an order: "
                f"{', '.join(sorted(unranked))}"
            )

    # ── Field metadata ──────────────────────────────────────────────

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(self.entity_type))

    @property
    def editable_fields(self) -> tuple[str, ...]:
        return tuple(name for name in self.field_names if name != "id")

    @property
    def fallback_status(self) -> S:
        return next(iter(self.status_type))

    @property
    def legal_statuses(self) -> tuple[S, ...]:
        return tuple(self.status_type)

    def _field_defaults(self) -> dict[str, Any]:
        defaults: dict[str, Any] = {}
        for f in dataclasses.fields(self.entity_type):
            if f.default is not dataclasses.MISSING:
                defaults[f.name] = f.default
            elif f.default_factory is not dataclasses.MISSING:
                defaults[f.name] = f.default_factory()
            else:
                defaults[f.name] = ""
        return defaults

    # ── Status guard ────────────────────────────────────────────────

    def normalize_status(self, raw: Any) -> S:
        return normalize_status(raw, self.status_type, self.fallback_status, self.status_aliases)

    def guard(self, entity: E) -> E:
        """Return ``entity`` with a legal status (a copy only when a repair is needed)."""
        status = self.normalize_status(getattr(entity, "status", None))
        if getattr(entity, "status", None) is status:
            return entity
        return dataclasses.replace(entity, status=status)

    def encode_status(self, status: Any) -> str:
        member = self.normalize_status(status)
        return self.status_to_wire.get(member, member.value)

    # ── Drafts ──────────────────────────────────────────────────────

    def new_draft(self) -> E:
        """Entity-shaped defaults for a create form."""
        values = self._field_defaults()
        if self.draft_defaults is not None:
            values.update(self.draft_defaults())
        values["id"] = ""
        values["status"] = self.fallback_status
        return self.entity_type(**values)

    def copy_for_form(self, entity: E) -> E:
        """Full copy of ``entity`` with a legal status and no ``None`` fields."""
        defaults = self._field_defaults()
        values = {
            name: defaults[name] if value is None else value
            for name, value in dataclasses.asdict(entity).items()
        }
        for name in self.write_only_fields:
            values[name] = defaults[name]
        values["status"] = self.normalize_status(values.get("status"))
        return self.entity_type(**values)

    # ── Wire mapping ────────────────────────────────────────────────

    def hydrate(self, payload: Mapping[str, Any]) -> E:
        """Build an entity from an untyped response record."""
        wire = self.wire_type.model_validate(dict(payload))
        defaults = self._field_defaults()
        values: dict[str, Any] = {}
        for name in self.field_names:
            if name in self.write_only_fields:
                values[name] = defaults[name]
                continue
            value = getattr(wire, name, None)
            if value is None or (value == "" and defaults[name] != ""):
                value = defaults[name]
            values[name] = value
        values["status"] = self.normalize_status(getattr(wire, "status", None))
        return self.entity_type(**values)

    def to_payload(self, entity: E) -> dict[str, Any]:
        """Request body for create/update — no id, server status vocabulary."""
        values = {
            name: value
            for name, value in dataclasses.asdict(entity).items()
            if name not in self.write_only_fields
        }
        values["status"] = None
        wire = self.wire_type.model_validate(values)
        body = wire.model_dump(by_alias=True, exclude={"id"})
        body["status"] = self.encode_status(getattr(entity, "status", None))
        for name in self.write_only_fields:
            secret = getattr(entity, name, "")
            if secret:
                body[name] = secret
        return body
