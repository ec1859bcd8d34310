"""Domain entity — a task on the board."""

from dataclasses import dataclass
from enum import Enum


class TaskStatus(str, Enum):
    """Legal task states. The first member is the fallback."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class Task:
    """A task record."""

    title: str = ""
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    priority: str = TaskPriority.MEDIUM.value
    assigned_to: str = ""
    due_date: str = ""
    created_at: str = ""
    updated_at: str = ""
    id: str = ""
