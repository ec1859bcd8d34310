"""Wire schema for ``/api/clients``."""

from typing import Any

from .base import WireRecord


class ClientWire(WireRecord):
    name: str = ""
    email: str = ""
    phone: str = ""
    status: Any = None
    address: str = ""
    notes: str = ""
