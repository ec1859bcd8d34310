"""Wire schema for ``/api/tasks``."""

from typing import Any

from pydantic import Field

from .base import WireRecord


class TaskWire(WireRecord):
    title: str = ""
    description: str = ""
    status: Any = None
    priority: str = ""
    assigned_to: str = Field("", alias="assignedTo")
    due_date: str = Field("", alias="dueDate")
    created_at: str = Field("", alias="createdAt")
    updated_at: str = Field("", alias="updatedAt")
