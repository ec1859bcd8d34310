"""Unit tests for status normalization."""

import pytest

from admin_console.application.adapters import (
    CLIENT_ADAPTER,
    ORGANIZATION_ADAPTER,
    TASK_ADAPTER,
    USER_ADAPTER,
)
from admin_console.domain.entities import (
    Client,
    ClientStatus,
    OrganizationStatus,
    TaskStatus,
    UserStatus,
)
from admin_console.domain.status import is_legal_status, normalize_status

_ODD_VALUES = [None, "", "bogus", 42, 3.5, ["active"], {"status": "active"}, True]


@pytest.mark.parametrize("raw", _ODD_VALUES)
def test_unknown_values_fall_back(raw):
    assert normalize_status(raw, ClientStatus, ClientStatus.ACTIVE) is ClientStatus.ACTIVE


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("inactive", ClientStatus.INACTIVE),
        ("  INACTIVE ", ClientStatus.INACTIVE),
        (ClientStatus.INACTIVE, ClientStatus.INACTIVE),
        ("active", ClientStatus.ACTIVE),
    ],
)
def test_legal_spellings_are_kept(raw, expected):
    assert normalize_status(raw, ClientStatus, ClientStatus.ACTIVE) is expected


@pytest.mark.parametrize("raw", _ODD_VALUES + ["inactive", "archived", "in-progress", "done"])
def test_normalization_is_idempotent(raw):
    for adapter in (CLIENT_ADAPTER, ORGANIZATION_ADAPTER, TASK_ADAPTER, USER_ADAPTER):
        once = adapter.normalize_status(raw)
        assert adapter.normalize_status(once) is once
        assert is_legal_status(once, adapter.status_type)


def test_fallback_is_first_legal_value():
    assert CLIENT_ADAPTER.fallback_status is ClientStatus.ACTIVE
    assert ORGANIZATION_ADAPTER.fallback_status is OrganizationStatus.ACTIVE
    assert TASK_ADAPTER.fallback_status is TaskStatus.TODO
    assert USER_ADAPTER.fallback_status is UserStatus.ACTIVE


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("pending", TaskStatus.TODO),
        ("in-progress", TaskStatus.IN_PROGRESS),
        ("In Progress", TaskStatus.IN_PROGRESS),
        ("inprogress", TaskStatus.IN_PROGRESS),
        ("completed", TaskStatus.DONE),
        ("finished", TaskStatus.DONE),
        ("in_progress", TaskStatus.IN_PROGRESS),
    ],
)
def test_task_server_vocabulary_is_aliased(raw, expected):
    assert TASK_ADAPTER.normalize_status(raw) is expected


def test_aliases_do_not_leak_into_other_entities():
    assert CLIENT_ADAPTER.normalize_status("completed") is ClientStatus.ACTIVE
    assert ORGANIZATION_ADAPTER.normalize_status("inactive") is OrganizationStatus.ACTIVE


def test_guard_repairs_only_when_needed():
    good = Client(id="1", name="Anna", status=ClientStatus.INACTIVE)
    assert CLIENT_ADAPTER.guard(good) is good

    bad = Client(id="1", name="Anna", status="bogus")
    repaired = CLIENT_ADAPTER.guard(bad)
    assert repaired is not bad
    assert repaired.status is ClientStatus.ACTIVE
    assert bad.status == "bogus"
