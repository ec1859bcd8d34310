"""Resource list controller — orchestrates one entity page.

Owns the authoritative collection, the filter/sort criteria, the form
controller and the detail panel. The collection changes only after the
repository has confirmed a write; nothing is applied optimistically.

States::

    LOADING ──ok──▶ READY ⟷ READY + form open
    LOADING ──fail─▶ ERROR ──retry──▶ LOADING

Writes are reconciled with the submitted status winning over the server
echo, for creates and updates alike. Overlapping writes to the same id
are not sequenced: whichever response resolves last is what the
collection shows.
"""

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from admin_console.application.adapters.base import EntityAdapter, ViewMode
from admin_console.application.interfaces import (
    Confirmer,
    EntityRepository,
    Notifier,
    Severity,
    Translator,
)
from admin_console.application.services import filter_sort_engine as engine
from admin_console.application.services.collection_stats import CollectionStats, summarize
from admin_console.application.services.csv_export import render_csv
from admin_console.application.services.filter_sort_engine import (
    FilterSortCriteria,
    SortDirection,
)
from admin_console.application.services.resource_form_controller import (
    FormOutcome,
    FormState,
    ResourceFormController,
)
from admin_console.domain.exceptions import (
    EntityNotFoundError,
    InvalidFormTransitionError,
    RepositoryError,
    UnknownFieldError,
)
from admin_console.infrastructure.logging.colored_logger import ControllerLogger, ControllerStage

logger = logging.getLogger(__name__)

E = TypeVar("E")

DEFAULT_PAGE_SIZE = 10


class ListState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class ListViewState(Generic[E]):
    """Everything the rendering layer needs for one frame."""

    state: ListState
    error: str | None
    rows: list[E]
    total_count: int
    filtered_count: int
    page: int
    total_pages: int
    criteria: FilterSortCriteria
    form_state: FormState
    draft: E | None
    form_errors: dict[str, str] = field(default_factory=dict)
    detail: E | None = None


class ResourceListController(Generic[E]):
    """Generic list page core, parameterized by an :class:`EntityAdapter`."""

    def __init__(
        self,
        adapter: EntityAdapter,
        repository: EntityRepository[E],
        *,
        notifier: Notifier,
        translator: Translator,
        confirmer: Confirmer,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._adapter = adapter
        self._repository = repository
        self._notifier = notifier
        self._translator = translator
        self._confirmer = confirmer
        self._page_size = page_size
        self._form: ResourceFormController[E] = ResourceFormController(
            adapter, repository, notifier=notifier, translator=translator
        )
        self._log = ControllerLogger(f"{__name__}.{adapter.name}")

        self._collection: dict[str, E] = {}
        self._criteria = FilterSortCriteria(sort_field=adapter.default_sort)
        self._page = 1
        self._state = ListState.LOADING
        self._error: str | None = None
        self._detail: E | None = None
        self._load_generation = 0
        self._disposed = False

    # ── Read-only state ─────────────────────────────────────────────

    @property
    def adapter(self) -> EntityAdapter:
        return self._adapter

    @property
    def state(self) -> ListState:
        return self._state

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def collection(self) -> Mapping[str, E]:
        return MappingProxyType(self._collection)

    @property
    def criteria(self) -> FilterSortCriteria:
        return self._criteria

    @property
    def form(self) -> ResourceFormController[E]:
        return self._form

    @property
    def is_form_open(self) -> bool:
        return self._form.is_open

    @property
    def detail(self) -> E | None:
        return self._detail

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def view(self) -> list[E]:
        """The filtered, sorted collection."""
        return engine.view(
            self._collection.values(),
            self._criteria,
            search_fields=self._adapter.search_fields,
            sort_fields=self._adapter.sort_fields,
            sort_ranks=self._adapter.sort_ranks,
        )

    @property
    def page(self) -> int:
        return engine.clamp_page(self._page, len(self.view), self._page_size)

    @property
    def total_pages(self) -> int:
        return engine.total_pages(len(self.view), self._page_size)

    @property
    def page_view(self) -> list[E]:
        return engine.paginate(self.view, self._page, self._page_size)

    def filter_options(self, field_name: str) -> list[str]:
        """Distinct values present in the collection for a filterable field."""
        self._require_filter_field(field_name)
        return engine.distinct_values(self._collection.values(), field_name)

    def snapshot(self) -> ListViewState[E]:
        visible = self.view
        return ListViewState(
            state=self._state,
            error=self._error,
            rows=engine.paginate(visible, self._page, self._page_size),
            total_count=len(self._collection),
            filtered_count=len(visible),
            page=engine.clamp_page(self._page, len(visible), self._page_size),
            total_pages=engine.total_pages(len(visible), self._page_size),
            criteria=self._criteria,
            form_state=self._form.state,
            draft=self._form.draft,
            form_errors=self._form.errors,
            detail=self._detail,
        )

    def stats(self) -> CollectionStats:
        return summarize(self._collection.values(), self._adapter)

    def export_csv(self) -> str:
        columns = self._adapter.export_fields or self._adapter.editable_fields
        return render_csv(self.view, columns)

    # ── Loading ─────────────────────────────────────────────────────

    async def load(self) -> None:
        """Fetch the collection once; a failure leaves it empty in ERROR."""
        if self._disposed:
            logger.debug("Ignoring load on disposed %s controller", self._adapter.name)
            return

        self._load_generation += 1
        generation = self._load_generation
        self._state = ListState.LOADING
        self._error = None

        try:
            with self._log.timed_step(ControllerStage.LOAD, f"Loading {self._adapter.name}"):
                entities = await self._repository.list_all()
        except RepositoryError as exc:
            if self._is_stale(generation):
                return
            self._collection = {}
            self._state = ListState.ERROR
            self._error = exc.message
            self._notify_error("notifications.loadError", exc)
            return

        if self._is_stale(generation):
            return

        collection: dict[str, E] = {}
        for entity in entities:
            entity = self._adapter.guard(entity)
            if not entity.id:
                logger.warning("Skipping %s without id", self._adapter.label)
                continue
            collection[entity.id] = entity
        self._collection = collection
        self._state = ListState.READY
        self._log.detail("Collection loaded", count=len(collection))

    async def retry(self) -> bool:
        """Re-enter LOADING from ERROR. Returns False in any other state."""
        if self._state is not ListState.ERROR:
            return False
        await self.load()
        return True

    def dispose(self) -> None:
        """Tear down; late results of in-flight calls are discarded."""
        self._disposed = True
        self._form.dispose()
        self._detail = None

    # ── Criteria (pure state updates) ───────────────────────────────

    def set_search_text(self, text: str) -> None:
        self._set_criteria(self._criteria.with_search(text))

    def set_field_filter(self, field_name: str, value: Any) -> None:
        self._require_filter_field(field_name)
        self._set_criteria(self._criteria.with_filter(field_name, value))

    def sort_by(self, field_name: str) -> None:
        """Select a sort column; reselecting the active one flips the direction."""
        self._require_sort_field(field_name)
        self._set_criteria(self._criteria.with_sort(field_name))

    def set_sort(self, field_name: str, direction: SortDirection = SortDirection.ASC) -> None:
        self._require_sort_field(field_name)
        self._set_criteria(
            dataclasses.replace(
                self._criteria,
                sort_field=field_name,
                sort_direction=SortDirection(direction),
            )
        )

    def reset_criteria(self) -> None:
        self._set_criteria(FilterSortCriteria(sort_field=self._adapter.default_sort))

    def set_page(self, page: int) -> None:
        self._page = engine.clamp_page(page, len(self.view), self._page_size)

    # ── Form ────────────────────────────────────────────────────────

    def open_create(self) -> None:
        self._require_ready("open the form")
        self._detail = None
        self._form.open_create()

    def open_edit(self, entity_id: str) -> None:
        self._require_ready("open the form")
        entity = self._get(entity_id)
        self._detail = None
        self._form.open_edit(entity)

    def open_view(self, entity_id: str) -> None:
        self._require_ready("open the form")
        entity = self._get(entity_id)
        if self._adapter.view_mode is ViewMode.DETAIL:
            self._form.cancel()
            self._detail = self._adapter.copy_for_form(entity)
            return
        self._detail = None
        self._form.open_view(entity)

    def set_field(self, name: str, value: Any) -> None:
        self._form.set_field(name, value)

    def close(self) -> None:
        self._form.cancel()
        self._detail = None

    async def submit_form(self) -> bool:
        """Submit the open form; True when the write was confirmed and applied."""
        outcome = await self._form.submit()
        if outcome is None:
            return False
        if self._disposed:
            logger.debug("Discarding write result for disposed %s controller", self._adapter.name)
            return False

        entity = self._reconcile(outcome)
        stage = ControllerStage.CREATE if outcome.created else ControllerStage.UPDATE
        self._log.step_complete(stage, f"{self._adapter.label} saved", id=entity.id)
        key = "notifications.created" if outcome.created else "notifications.updated"
        self._notifier.notify(
            self._translator.translate(key, {"entity": self._entity_label()}),
            Severity.SUCCESS,
        )
        return True

    # ── Delete ──────────────────────────────────────────────────────

    async def delete(self, entity_id: str) -> bool:
        """Delete after user confirmation; the entry goes only once the repository agrees."""
        entity = self._get(entity_id)
        message = self._translator.translate(
            f"{self._adapter.name}.confirmDelete",
            {"entity": self._entity_label(), "name": _display_name(entity)},
        )
        if not await self._confirmer.confirm(message):
            logger.debug("Delete of %s %s declined", self._adapter.label, entity_id)
            return False
        if self._disposed:
            return False

        try:
            with self._log.timed_step(ControllerStage.DELETE, f"Deleting {self._adapter.label}", id=entity_id):
                await self._repository.delete(entity_id)
        except RepositoryError as exc:
            if self._disposed:
                return False
            self._notify_error("notifications.deleteError", exc)
            return False

        if self._disposed:
            logger.debug("Discarding delete result for disposed %s controller", self._adapter.name)
            return False

        self._collection.pop(entity_id, None)
        if self._detail is not None and self._detail.id == entity_id:
            self._detail = None
        self._notifier.notify(
            self._translator.translate("notifications.deleted", {"entity": self._entity_label()}),
            Severity.SUCCESS,
        )
        return True

    # ── Internals ───────────────────────────────────────────────────

    def _reconcile(self, outcome: FormOutcome[E]) -> E:
        """Merge a confirmed write into the collection; the submitted status wins."""
        entity = dataclasses.replace(
            outcome.entity,
            id=outcome.entity_id,
            status=self._adapter.normalize_status(outcome.submitted.status),
        )
        echoed = getattr(outcome.entity, "status", None)
        if echoed != entity.status:
            logger.info(
                "Server echoed status %r for %s %s; keeping submitted %r",
                echoed,
                self._adapter.label,
                entity.id,
                entity.status.value,
            )
        self._collection[entity.id] = entity
        return entity

    def _set_criteria(self, criteria: FilterSortCriteria) -> None:
        self._criteria = criteria
        self._page = 1

    def _get(self, entity_id: str) -> E:
        entity = self._collection.get(entity_id)
        if entity is None:
            raise EntityNotFoundError(self._adapter.entity_type.__name__, entity_id)
        return entity

    def _require_ready(self, operation: str) -> None:
        if self._state is not ListState.READY:
            raise InvalidFormTransitionError(operation, f"list {self._state.value}")

    def _require_filter_field(self, field_name: str) -> None:
        if field_name not in self._adapter.filter_fields:
            raise UnknownFieldError(self._adapter.entity_type.__name__, field_name)

    def _require_sort_field(self, field_name: str) -> None:
        if field_name not in self._adapter.sort_fields:
            raise UnknownFieldError(self._adapter.entity_type.__name__, field_name)

    def _is_stale(self, generation: int) -> bool:
        if self._disposed or generation != self._load_generation:
            logger.debug("Discarding stale load of %s", self._adapter.name)
            return True
        return False

    def _notify_error(self, key: str, exc: RepositoryError) -> None:
        self._notifier.notify(
            self._translator.translate(key, {"entity": self._entity_label(), "reason": exc.message}),
            Severity.ERROR,
        )

    def _entity_label(self) -> str:
        return self._translator.translate(f"entities.{self._adapter.label}")


def _display_name(entity: Any) -> str:
    return str(getattr(entity, "name", "") or getattr(entity, "title", "") or entity.id)
