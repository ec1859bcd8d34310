"""Domain entity — an organization the business works with."""

from dataclasses import dataclass
from enum import Enum


class OrganizationStatus(str, Enum):
    """Legal organization states. The first member is the fallback."""

    ACTIVE = "active"
    ARCHIVED = "archived"


@dataclass
class Organization:
    """An organization record.

    ``type``, ``industry`` and ``employees`` are UI-side descriptors the
    backend may not store; they still take part in filtering and sorting.
    """

    name: str = ""
    address: str = ""
    contact_person: str = ""
    phone: str = ""
    email: str = ""
    status: OrganizationStatus = OrganizationStatus.ACTIVE
    type: str = ""
    industry: str = ""
    employees: int = 0
    user_id: str = ""
    created_at: str = ""
    updated_at: str = ""
    id: str = ""
