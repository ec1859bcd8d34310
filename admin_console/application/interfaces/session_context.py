"""Session port — explicit replacement for ambient token storage."""

from abc import ABC, abstractmethod


class SessionContext(ABC):
    """Supplies the bearer token and receives 401 notifications."""

    @abstractmethod
    def get_token(self) -> str | None:
        ...

    @abstractmethod
    def on_unauthorized(self) -> None:
        """Called once per 401 response, before the error is raised."""
        ...
