"""Confirmer that delegates to a UI callback (sync or async)."""

import inspect
from collections.abc import Awaitable, Callable

from admin_console.application.interfaces import Confirmer

ConfirmCallback = Callable[[str], bool | Awaitable[bool]]


class CallbackConfirmer(Confirmer):
    def __init__(self, callback: ConfirmCallback):
        self._callback = callback

    async def confirm(self, message: str) -> bool:
        answer = self._callback(message)
        if inspect.isawaitable(answer):
            answer = await answer
        return bool(answer)
