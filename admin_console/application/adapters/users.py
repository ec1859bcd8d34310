"""User adapter — ``/api/users``."""

from admin_console.application.schemas import UserWire
from admin_console.domain.entities import User, UserStatus
from admin_console.domain.validation import EmailFormat, MinLength, Required

from .base import EntityAdapter, SortKind

MIN_PASSWORD_LENGTH = 6

USER_ADAPTER: EntityAdapter[User, UserStatus] = EntityAdapter(
    name="users",
    label="user",
    resource="users",
    entity_type=User,
    wire_type=UserWire,
    status_type=UserStatus,
    search_fields=("name", "email", "position"),
    filter_fields=("role", "department", "status"),
    sort_fields={"name": SortKind.TEXT, "last_login": SortKind.TEXT},
    default_sort="name",
    validation_rules=(
        Required("name"),
        Required("email"),
        EmailFormat("email"),
        Required("password", create_only=True),
        MinLength("password", length=MIN_PASSWORD_LENGTH, create_only=True),
    ),
    export_fields=("id", "name", "email", "role", "status", "department", "position"),
    write_only_fields=("password",),
)
