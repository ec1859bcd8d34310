"""UI-side collaborators: notifications, confirmation and session."""

from .callback_confirmer import CallbackConfirmer
from .logging_notifier import LoggingNotifier
from .token_session import TokenSession

__all__ = ["CallbackConfirmer", "LoggingNotifier", "TokenSession"]
