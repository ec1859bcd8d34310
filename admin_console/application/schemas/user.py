"""Wire schema for ``/api/users``."""

from typing import Any

from pydantic import Field

from .base import WireRecord


class UserWire(WireRecord):
    name: str = ""
    email: str = ""
    role: str = ""
    status: Any = None
    department: str = ""
    position: str = ""
    last_login: str = Field("", alias="lastLogin")
    created_at: str = Field("", alias="createdAt")
