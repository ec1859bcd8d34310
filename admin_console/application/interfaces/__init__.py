from .confirmer import Confirmer
from .entity_repository import EntityRepository
from .notifier import Notifier, Severity
from .session_context import SessionContext
from .translator import Translator

__all__ = [
    "Confirmer",
    "EntityRepository",
    "Notifier",
    "Severity",
    "SessionContext",
    "Translator",
]
