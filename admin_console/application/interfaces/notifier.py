"""Notification port — fire-and-forget user messages."""

from abc import ABC, abstractmethod
from enum import Enum


class Severity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


class Notifier(ABC):
    """Surfaces a short message to the user. Return values are never consumed."""

    @abstractmethod
    def notify(self, message: str, severity: Severity = Severity.SUCCESS) -> None:
        ...
