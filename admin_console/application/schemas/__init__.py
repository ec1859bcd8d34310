from .base import WireRecord, as_int, as_text
from .client import ClientWire
from .envelope import ApiEnvelope
from .organization import OrganizationWire
from .task import TaskWire
from .user import UserWire

__all__ = [
    "WireRecord",
    "as_int",
    "as_text",
    "ApiEnvelope",
    "ClientWire",
    "OrganizationWire",
    "TaskWire",
    "UserWire",
]
