"""In-memory session context holding the bearer token."""

import logging
from collections.abc import Callable

from admin_console.application.interfaces import SessionContext

logger = logging.getLogger(__name__)


class TokenSession(SessionContext):
    """Holds one bearer token; a 401 clears it and calls ``on_expired``."""

    def __init__(self, token: str | None = None, on_expired: Callable[[], None] | None = None):
        self._token = token
        self._on_expired = on_expired

    def get_token(self) -> str | None:
        return self._token

    def set_token(self, token: str | None) -> None:
        self._token = token

    def on_unauthorized(self) -> None:
        logger.warning("Session rejected by the server; clearing token")
        self._token = None
        if self._on_expired is not None:
            self._on_expired()
