"""Wire schema for ``/api/organizations``."""

from typing import Any

from pydantic import Field

from .base import WireRecord


class OrganizationWire(WireRecord):
    name: str = ""
    address: str = ""
    contact_person: str = Field("", alias="contactPerson")
    phone: str = ""
    email: str = ""
    status: Any = None
    type: str = ""
    industry: str = ""
    employees: int = 0
    user_id: str = ""
    created_at: str = Field("", alias="createdAt")
    updated_at: str = Field("", alias="updatedAt")
