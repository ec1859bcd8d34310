"""Organization adapter — ``/api/organizations``.

"View" opens the read-only detail panel rather than the form, and the
collection statistics are grouped by industry.
"""

from admin_console.application.schemas import OrganizationWire
from admin_console.domain.entities import Organization, OrganizationStatus
from admin_console.domain.validation import (
    EmailFormat,
    NumericRange,
    PhoneFormat,
    Required,
)

from .base import EntityAdapter, SortKind, ViewMode

MAX_EMPLOYEES = 1_000_000

ORGANIZATION_ADAPTER: EntityAdapter[Organization, OrganizationStatus] = EntityAdapter(
    name="organizations",
    label="organization",
    resource="organizations",
    entity_type=Organization,
    wire_type=OrganizationWire,
    status_type=OrganizationStatus,
    search_fields=("name", "email", "phone"),
    filter_fields=("status", "industry"),
    sort_fields={"name": SortKind.TEXT, "employees": SortKind.NUMERIC},
    default_sort="name",
    validation_rules=(
        Required("name"),
        Required("contact_person"),
        Required("phone"),
        PhoneFormat("phone"),
        Required("email"),
        EmailFormat("email"),
        NumericRange("employees", minimum=0, maximum=MAX_EMPLOYEES),
    ),
    export_fields=(
        "id",
        "name",
        "contact_person",
        "phone",
        "email",
        "status",
        "industry",
        "employees",
    ),
    draft_defaults=lambda: {"type": "ООО"},
    view_mode=ViewMode.DETAIL,
    group_field="industry",
)
