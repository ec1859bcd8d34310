from .base import EntityAdapter, SortKind, ViewMode
from .clients import CLIENT_ADAPTER
from .organizations import ORGANIZATION_ADAPTER
from .tasks import TASK_ADAPTER
from .users import USER_ADAPTER

__all__ = [
    "EntityAdapter",
    "SortKind",
    "ViewMode",
    "CLIENT_ADAPTER",
    "ORGANIZATION_ADAPTER",
    "TASK_ADAPTER",
    "USER_ADAPTER",
]
