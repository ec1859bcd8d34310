"""Domain entity — a client of the business."""

from dataclasses import dataclass
from enum import Enum


class ClientStatus(str, Enum):
    """Legal client states. The first member is the fallback."""

    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass
class Client:
    """A client record as held in the console collection."""

    name: str = ""
    email: str = ""
    phone: str = ""
    status: ClientStatus = ClientStatus.ACTIVE
    address: str = ""
    notes: str = ""
    id: str = ""
