"""Client adapter — ``/api/clients``."""

from admin_console.application.schemas import ClientWire
from admin_console.domain.entities import Client, ClientStatus
from admin_console.domain.validation import EmailFormat, PhoneFormat, Required

from .base import EntityAdapter, SortKind

CLIENT_ADAPTER: EntityAdapter[Client, ClientStatus] = EntityAdapter(
    name="clients",
    label="client",
    resource="clients",
    entity_type=Client,
    wire_type=ClientWire,
    status_type=ClientStatus,
    search_fields=("name", "email", "phone"),
    filter_fields=("status",),
    sort_fields={"name": SortKind.TEXT},
    default_sort="name",
    validation_rules=(
        Required("name"),
        Required("email"),
        EmailFormat("email"),
        Required("phone"),
        PhoneFormat("phone"),
    ),
    export_fields=("id", "name", "email", "phone", "status", "address"),
)
