"""Unit tests for the ResourceFormController state machine."""

import asyncio
import dataclasses

import pytest

from admin_console.application.adapters import CLIENT_ADAPTER, USER_ADAPTER
from admin_console.application.interfaces import EntityRepository, Severity
from admin_console.application.services import FormState, ResourceFormController
from admin_console.domain.entities import Client, ClientStatus, User
from admin_console.domain.exceptions import (
    InvalidFormTransitionError,
    ServerError,
    UnknownFieldError,
)


class FakeClientRepository(EntityRepository[Client]):
    """In-memory fake repository that records every write."""

    def __init__(self):
        self.created: list[Client] = []
        self.updated: list[Client] = []
        self.fail_with: Exception | None = None
        self.gate: asyncio.Event | None = None
        self._next_id = 1

    async def list_all(self) -> list[Client]:
        return []

    async def get_by_id(self, entity_id: str) -> Client:
        raise NotImplementedError

    async def create(self, entity: Client) -> Client:
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_with is not None:
            raise self.fail_with
        self.created.append(entity)
        created = dataclasses.replace(entity, id=f"c{self._next_id}")
        self._next_id += 1
        return created

    async def update(self, entity: Client) -> Client:
        if self.fail_with is not None:
            raise self.fail_with
        self.updated.append(entity)
        return dataclasses.replace(entity)

    async def delete(self, entity_id: str) -> None:
        raise NotImplementedError


class RecordingNotifier:
    def __init__(self):
        self.messages: list[tuple[str, Severity]] = []

    def notify(self, message, severity=Severity.SUCCESS):
        self.messages.append((message, severity))


class KeyTranslator:
    def translate(self, key, params=None):
        return key


@pytest.fixture
def repo() -> FakeClientRepository:
    return FakeClientRepository()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def form(repo, notifier) -> ResourceFormController:
    return ResourceFormController(
        CLIENT_ADAPTER, repo, notifier=notifier, translator=KeyTranslator()
    )


def _fill_valid_client(form: ResourceFormController) -> None:
    form.set_field("name", "Anna")
    form.set_field("email", "anna@example.com")
    form.set_field("phone", "+7 999 123 45 67")


@pytest.mark.asyncio
async def test_empty_name_blocks_submit(form, repo):
    """An invalid draft stays in CREATING and never reaches the repository."""
    form.open_create()
    form.set_field("email", "anna@example.com")
    form.set_field("phone", "+7 999 123 45 67")

    outcome = await form.submit()

    assert outcome is None
    assert form.state is FormState.CREATING
    assert "name" in form.errors
    assert repo.created == []


@pytest.mark.asyncio
async def test_create_submits_normalized_status(form, repo):
    form.open_create()
    _fill_valid_client(form)
    form.set_field("status", "INACTIVE")

    outcome = await form.submit()

    assert outcome is not None
    assert outcome.created is True
    assert outcome.entity_id == "c1"
    assert repo.created[0].status is ClientStatus.INACTIVE
    assert form.state is FormState.CLOSED
    assert form.draft is None


@pytest.mark.asyncio
async def test_edit_updates_the_same_id(form, repo):
    form.open_edit(Client(id="42", name="Anna", email="anna@example.com", phone="+7 999 123 45 67"))
    assert form.editing_id == "42"
    form.set_field("name", "Anna K.")

    outcome = await form.submit()

    assert outcome.created is False
    assert outcome.entity_id == "42"
    assert repo.updated[0].name == "Anna K."


def test_draft_is_a_copy(form):
    source = Client(id="42", name="Anna")
    form.open_edit(source)
    form.set_field("name", "Changed")
    assert source.name == "Anna"

    snapshot = form.draft
    snapshot.name = "Mutated outside"
    assert form.draft.name == "Changed"


def test_view_is_read_only(form):
    form.open_view(Client(id="1", name="Anna"))
    assert form.is_read_only
    with pytest.raises(InvalidFormTransitionError):
        form.set_field("name", "X")
    form.cancel()
    assert form.state is FormState.CLOSED


def test_set_field_rejects_unknown_and_closed(form):
    with pytest.raises(InvalidFormTransitionError):
        form.set_field("name", "Anna")
    form.open_create()
    with pytest.raises(UnknownFieldError):
        form.set_field("nickname", "A")
    with pytest.raises(UnknownFieldError):
        form.set_field("id", "forged")


@pytest.mark.asyncio
async def test_setting_a_field_clears_its_error(form):
    form.open_create()
    await form.submit()
    assert "name" in form.errors
    form.set_field("name", "Anna")
    assert "name" not in form.errors


@pytest.mark.asyncio
async def test_failed_write_keeps_draft_and_notifies(form, repo, notifier):
    repo.fail_with = ServerError(500, "database down")
    form.open_edit(Client(id="7", name="Anna", email="anna@example.com", phone="+7 999 123 45 67"))
    form.set_field("name", "Anna K.")

    outcome = await form.submit()

    assert outcome is None
    assert form.state is FormState.EDITING
    assert form.draft.name == "Anna K."
    assert notifier.messages == [("notifications.saveError", Severity.ERROR)]


@pytest.mark.asyncio
async def test_unexpected_error_reopens_the_draft(form, repo, notifier):
    repo.fail_with = RuntimeError("boom")
    form.open_edit(Client(id="7", name="Anna", email="anna@example.com", phone="+7 999 123 45 67"))
    form.set_field("name", "Anna K.")

    with pytest.raises(RuntimeError, match="boom"):
        await form.submit()

    assert form.state is FormState.EDITING
    assert form.draft.name == "Anna K."
    assert notifier.messages == []
    form.cancel()
    assert form.state is FormState.CLOSED


@pytest.mark.asyncio
async def test_cannot_cancel_while_submitting(form, repo):
    repo.gate = asyncio.Event()
    form.open_create()
    _fill_valid_client(form)

    pending = asyncio.create_task(form.submit())
    await asyncio.sleep(0)
    assert form.state is FormState.SUBMITTING
    with pytest.raises(InvalidFormTransitionError):
        form.cancel()
    with pytest.raises(InvalidFormTransitionError):
        form.open_create()

    repo.gate.set()
    outcome = await pending
    assert outcome is not None
    assert form.state is FormState.CLOSED


@pytest.mark.asyncio
async def test_dispose_discards_late_result(form, repo, notifier):
    repo.gate = asyncio.Event()
    form.open_create()
    _fill_valid_client(form)

    pending = asyncio.create_task(form.submit())
    await asyncio.sleep(0)
    form.dispose()
    repo.gate.set()

    assert await pending is None
    assert form.state is FormState.CLOSED
    assert notifier.messages == []


@pytest.mark.asyncio
async def test_submit_outside_edit_states_raises(form):
    with pytest.raises(InvalidFormTransitionError):
        await form.submit()
    form.open_view(Client(id="1", name="Anna"))
    with pytest.raises(InvalidFormTransitionError):
        await form.submit()


@pytest.mark.asyncio
async def test_user_password_required_on_create_only(notifier):
    class FakeUserRepository(EntityRepository[User]):
        def __init__(self):
            self.written: list[User] = []

        async def list_all(self):
            return []

        async def get_by_id(self, entity_id):
            raise NotImplementedError

        async def create(self, entity):
            self.written.append(entity)
            return dataclasses.replace(entity, id="u1")

        async def update(self, entity):
            self.written.append(entity)
            return entity

        async def delete(self, entity_id):
            raise NotImplementedError

    repo = FakeUserRepository()
    form = ResourceFormController(USER_ADAPTER, repo, notifier=notifier, translator=KeyTranslator())

    form.open_create()
    form.set_field("name", "Boris")
    form.set_field("email", "boris@example.com")
    assert await form.submit() is None
    assert form.errors == {"password": "validation.required"}

    form.set_field("password", "secret1")
    assert await form.submit() is not None

    form.open_edit(User(id="u1", name="Boris", email="boris@example.com"))
    assert form.draft.password == ""
    assert await form.submit() is not None
    assert len(repo.written) == 2
