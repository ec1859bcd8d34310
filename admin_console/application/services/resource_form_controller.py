"""Resource form controller — the single create/edit/view modal of a list page.

States::

    CLOSED ──open_create──▶ CREATING ──submit──▶ SUBMITTING ──▶ CLOSED
    CLOSED ──open_edit────▶ EDITING  ──submit──▶ SUBMITTING ──▶ CLOSED
    CLOSED ──open_view────▶ VIEWING  ──cancel──▶ CLOSED

A failed repository call returns SUBMITTING to CREATING/EDITING with the
draft untouched. A failed validation never leaves CREATING/EDITING.
"""

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from admin_console.application.adapters.base import EntityAdapter
from admin_console.application.interfaces import (
    EntityRepository,
    Notifier,
    Severity,
    Translator,
)
from admin_console.domain.exceptions import (
    InvalidFormTransitionError,
    RepositoryError,
    UnknownFieldError,
)
from admin_console.domain.validation import FieldRule

logger = logging.getLogger(__name__)

E = TypeVar("E")


class FormState(str, Enum):
    CLOSED = "closed"
    CREATING = "creating"
    EDITING = "editing"
    VIEWING = "viewing"
    SUBMITTING = "submitting"


_EDITABLE = (FormState.CREATING, FormState.EDITING)


@dataclass(frozen=True)
class FormOutcome(Generic[E]):
    """A confirmed write, handed to the list controller for reconciliation."""

    created: bool
    entity: E               # the record as echoed by the repository
    submitted: E            # the draft as sent, status already normalized
    entity_id: str          # id the write applies to


def validate_draft(
    draft: Any,
    rules: tuple[FieldRule, ...],
    translator: Translator,
    *,
    creating: bool,
) -> dict[str, str]:
    """Return ``{field: message}`` for every field that fails a rule."""
    errors: dict[str, str] = {}
    for rule in rules:
        if rule.field in errors or not rule.applies(creating):
            continue
        if not rule.is_valid(getattr(draft, rule.field, None)):
            params = {**rule.params(), "field": field_label(rule.field, translator)}
            errors[rule.field] = translator.translate(rule.message_key, params)
    return errors


def field_label(field_name: str, translator: Translator) -> str:
    """Display label for a draft field; the raw name when no ``fields.*`` key exists."""
    key = f"fields.{field_name}"
    label = translator.translate(key)
    return field_name if label == key else label


class ResourceFormController(Generic[E]):
    """Owns the form draft for one entity type. Depends on the repository port (DI)."""

    def __init__(
        self,
        adapter: EntityAdapter,
        repository: EntityRepository[E],
        *,
        notifier: Notifier,
        translator: Translator,
    ):
        self._adapter = adapter
        self._repository = repository
        self._notifier = notifier
        self._translator = translator
        self._state = FormState.CLOSED
        self._draft: E | None = None
        self._editing_id: str | None = None
        self._errors: dict[str, str] = {}
        self._disposed = False

    # ── Read-only state ─────────────────────────────────────────────

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is not FormState.CLOSED

    @property
    def is_read_only(self) -> bool:
        return self._state is FormState.VIEWING

    @property
    def editing_id(self) -> str | None:
        return self._editing_id

    @property
    def draft(self) -> E | None:
        """A copy of the draft; edits go through :meth:`set_field`."""
        if self._draft is None:
            return None
        return dataclasses.replace(self._draft)

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    # ── Transitions ─────────────────────────────────────────────────

    def open_create(self) -> None:
        self._require_not_submitting("open the form")
        self._open(FormState.CREATING, self._adapter.new_draft(), None)

    def open_edit(self, entity: E) -> None:
        self._require_not_submitting("open the form")
        draft = self._adapter.copy_for_form(entity)
        self._open(FormState.EDITING, draft, draft.id)

    def open_view(self, entity: E) -> None:
        self._require_not_submitting("open the form")
        draft = self._adapter.copy_for_form(entity)
        self._open(FormState.VIEWING, draft, draft.id)

    def set_field(self, name: str, value: Any) -> None:
        """Change one draft field. The collection is never touched."""
        if self._state not in _EDITABLE:
            raise InvalidFormTransitionError("edit fields", self._state.value)
        if name not in self._adapter.editable_fields:
            raise UnknownFieldError(self._adapter.entity_type.__name__, name)
        setattr(self._draft, name, value)
        self._errors.pop(name, None)

    def cancel(self) -> None:
        """Discard the draft without any repository call."""
        self._require_not_submitting("cancel")
        if self._state is not FormState.CLOSED:
            logger.debug("Form for %s cancelled from %s", self._adapter.name, self._state.value)
        self._reset()

    def validate(self) -> bool:
        if self._state not in _EDITABLE:
            raise InvalidFormTransitionError("validate", self._state.value)
        self._errors = validate_draft(
            self._draft,
            self._adapter.validation_rules,
            self._translator,
            creating=self._state is FormState.CREATING,
        )
        return not self._errors

    async def submit(self) -> FormOutcome[E] | None:
        """Validate and write the draft.

        Returns the confirmed outcome and closes the form, or returns None
        with the form still open (validation errors or a reported failure).
        """
        if self._state not in _EDITABLE:
            raise InvalidFormTransitionError("submit", self._state.value)

        if not self.validate():
            logger.info(
                "Validation failed for %s: %s",
                self._adapter.name,
                ", ".join(sorted(self._errors)),
            )
            return None

        self._draft.status = self._adapter.normalize_status(self._draft.status)
        submitted = dataclasses.replace(self._draft)
        resume_state = self._state
        creating = resume_state is FormState.CREATING
        self._state = FormState.SUBMITTING

        try:
            if creating:
                result = await self._repository.create(submitted)
            else:
                result = await self._repository.update(submitted)
        except RepositoryError as exc:
            if self._disposed:
                logger.debug("Discarding late failure for disposed %s form", self._adapter.name)
                return None
            self._state = resume_state
            logger.warning("Saving %s failed: %s", self._adapter.label, exc)
            self._notifier.notify(
                self._translator.translate(
                    "notifications.saveError",
                    {"entity": self._entity_label(), "reason": exc.message},
                ),
                Severity.ERROR,
            )
            return None
        except BaseException:
            # unexpected failures and cancellation still reopen the draft
            if not self._disposed:
                self._state = resume_state
            raise

        if self._disposed:
            logger.debug("Discarding late result for disposed %s form", self._adapter.name)
            return None

        entity_id = result.id if creating else (self._editing_id or submitted.id)
        self._reset()
        return FormOutcome(
            created=creating,
            entity=result,
            submitted=submitted,
            entity_id=entity_id,
        )

    def dispose(self) -> None:
        """Tear down; a pending submit will resolve without touching state."""
        self._disposed = True
        self._reset()

    # ── Internals ───────────────────────────────────────────────────

    def _open(self, state: FormState, draft: E, editing_id: str | None) -> None:
        self._state = state
        self._draft = draft
        self._editing_id = editing_id
        self._errors = {}

    def _reset(self) -> None:
        self._state = FormState.CLOSED
        self._draft = None
        self._editing_id = None
        self._errors = {}

    def _require_not_submitting(self, operation: str) -> None:
        if self._state is FormState.SUBMITTING:
            raise InvalidFormTransitionError(operation, self._state.value)

    def _entity_label(self) -> str:
        return self._translator.translate(f"entities.{self._adapter.label}")
