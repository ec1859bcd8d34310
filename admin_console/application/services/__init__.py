from .filter_sort_engine import ALL, FilterSortCriteria, SortDirection
from .collection_stats import CollectionStats, summarize
from .csv_export import render_csv
from .resource_form_controller import (
    FormOutcome,
    FormState,
    ResourceFormController,
    validate_draft,
)
from .resource_list_controller import (
    ListState,
    ListViewState,
    ResourceListController,
)

__all__ = [
    "ALL",
    "FilterSortCriteria",
    "SortDirection",
    "CollectionStats",
    "summarize",
    "render_csv",
    "FormOutcome",
    "FormState",
    "ResourceFormController",
    "validate_draft",
    "ListState",
    "ListViewState",
    "ResourceListController",
]
