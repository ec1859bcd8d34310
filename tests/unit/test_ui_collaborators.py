"""Unit tests for the notifier, confirmer and session collaborators."""

import logging

import pytest

from admin_console.application.interfaces import Severity
from admin_console.infrastructure.ui import CallbackConfirmer, LoggingNotifier, TokenSession


@pytest.mark.asyncio
async def test_callback_confirmer_accepts_sync_callback():
    asked: list[str] = []

    def answer(message: str) -> bool:
        asked.append(message)
        return False

    assert await CallbackConfirmer(answer).confirm("Delete?") is False
    assert asked == ["Delete?"]


@pytest.mark.asyncio
async def test_callback_confirmer_awaits_async_callback():
    async def answer(message: str) -> bool:
        return True

    assert await CallbackConfirmer(answer).confirm("Delete?") is True


def test_logging_notifier_maps_severity(caplog):
    with caplog.at_level(logging.INFO, logger="admin_console.infrastructure.ui"):
        LoggingNotifier().notify("Saved")
        LoggingNotifier().notify("Broken", Severity.ERROR)

    levels = [record.levelno for record in caplog.records]
    assert levels == [logging.INFO, logging.ERROR]
    assert "[error] Broken" in caplog.records[1].getMessage()


def test_token_session_clears_on_unauthorized():
    session = TokenSession("abc")
    session.on_unauthorized()
    assert session.get_token() is None
    session.set_token("def")
    assert session.get_token() == "def"
