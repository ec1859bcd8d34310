"""Task adapter — ``/api/tasks``.

The task backend speaks its own status vocabulary (``pending``,
``in-progress``, ``completed``); it is translated in both directions here.
"""

from datetime import date

from admin_console.application.schemas import TaskWire
from admin_console.domain.entities import Task, TaskPriority, TaskStatus
from admin_console.domain.validation import Required

from .base import EntityAdapter, SortKind

TASK_STATUS_ALIASES = {
    "pending": TaskStatus.TODO,
    "in-progress": TaskStatus.IN_PROGRESS,
    "inprogress": TaskStatus.IN_PROGRESS,
    "in progress": TaskStatus.IN_PROGRESS,
    "completed": TaskStatus.DONE,
    "complete": TaskStatus.DONE,
    "finished": TaskStatus.DONE,
}

TASK_STATUS_TO_WIRE = {
    TaskStatus.TODO: "pending",
    TaskStatus.IN_PROGRESS: "in-progress",
    TaskStatus.DONE: "completed",
}


def _task_defaults() -> dict[str, str]:
    return {"due_date": date.today().isoformat()}


TASK_ADAPTER: EntityAdapter[Task, TaskStatus] = EntityAdapter(
    name="tasks",
    label="task",
    resource="tasks",
    entity_type=Task,
    wire_type=TaskWire,
    status_type=TaskStatus,
    search_fields=("title", "description"),
    filter_fields=("status", "priority"),
    sort_fields={
        "title": SortKind.TEXT,
        "due_date": SortKind.TEXT,
        "priority": SortKind.RANK,
    },
    default_sort="title",
    validation_rules=(Required("title"),),
    export_fields=("id", "title", "status", "priority", "assigned_to", "due_date"),
    status_aliases=TASK_STATUS_ALIASES,
    status_to_wire=TASK_STATUS_TO_WIRE,
    draft_defaults=_task_defaults,
    sort_ranks={"priority": tuple(priority.value for priority in TaskPriority)},
)
