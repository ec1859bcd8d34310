from .client import Client, ClientStatus
from .organization import Organization, OrganizationStatus
from .task import Task, TaskPriority, TaskStatus
from .user import User, UserRole, UserStatus

__all__ = [
    "Client",
    "ClientStatus",
    "Organization",
    "OrganizationStatus",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "User",
    "UserRole",
    "UserStatus",
]
