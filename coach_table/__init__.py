from coach_table.core.error_catalog import DataTableError
from coach_table.core.errors import ErrorMapper
from coach_table.ui.columns import Column, render_cell
from coach_table.ui.data_table import DataTable, TableRow, TableView
from coach_table.ui.filters import filter_rows
from coach_table.ui.listing_view import SortConfig, SortDirection, cycle_sort, sort_rows
from coach_table.ui.pagination import PageSlice, PaginationState, goto_page, paginate
from coach_table.ui.pipeline import PipelineResult, recompute
from coach_table.ui.row_identity import RowIdentity
from coach_table.ui.selection import SelectionTracker

__all__ = [
    "Column",
    "DataTable",
    "DataTableError",
    "ErrorMapper",
    "PageSlice",
    "PaginationState",
    "PipelineResult",
    "RowIdentity",
    "SelectionTracker",
    "SortConfig",
    "SortDirection",
    "TableRow",
    "TableView",
    "cycle_sort",
    "filter_rows",
    "goto_page",
    "paginate",
    "recompute",
    "render_cell",
    "sort_rows",
]
