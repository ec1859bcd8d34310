"""Domain entity — a console user account."""

from dataclasses import dataclass, field
from enum import Enum


class UserStatus(str, Enum):
    """Legal user states. The first member is the fallback."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class UserRole(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"


@dataclass
class User:
    """A user account.

    ``password`` is write-only: it is never hydrated from the server and is
    sent only when the draft carries a non-empty value.
    """

    name: str = ""
    email: str = ""
    role: str = UserRole.USER.value
    status: UserStatus = UserStatus.ACTIVE
    department: str = ""
    position: str = ""
    last_login: str = ""
    created_at: str = ""
    password: str = field(default="", repr=False, compare=False)
    id: str = ""
