from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic

from coach_table.core.config import settings
from coach_table.core.error_catalog import DataTableError, ErrorCatalog
from coach_table.core.logging import log_json
from coach_table.ui.columns import Column, RowT, ensure_unique_keys, find_column, render_cell
from coach_table.ui.filters import SearchPredicate
from coach_table.ui.listing_view import UNSORTED, SortConfig, cycle_sort, sort_indicator
from coach_table.ui.pagination import (
    PageButton,
    PaginationState,
    first_page,
    last_page,
    next_page,
    page_numbers,
    prev_page,
    resolve_page_request,
)
from coach_table.ui.pipeline import PipelineResult, recompute
from coach_table.ui.row_identity import RowIdentity, RowKey
from coach_table.ui.selection import SelectionCallback, SelectionTracker
from coach_table.ui.state import StateOwnership, resolve_ownership

logger = logging.getLogger(__name__)

_UNSET: Any = object()


@dataclass(frozen=True)
class TableRow(Generic[RowT]):
    row: RowT
    row_id: str
    index: int
    selected: bool


@dataclass(frozen=True)
class TableView(Generic[RowT]):
    rows: list[TableRow[RowT]]
    current_page: int
    page_size: int
    total_pages: int
    total_count: int
    source_count: int
    range_start: int
    range_end: int
    search_value: str
    sort_config: SortConfig
    all_selected: bool
    any_selected: bool
    indeterminate: bool
    selected_ids: list[str] = field(default_factory=list)
    page_buttons: list[PageButton] = field(default_factory=list)
    loading: bool = False
    empty_message: str = ""
    search_placeholder: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def page_row_ids(self) -> list[str]:
        return [item.row_id for item in self.rows]

    @property
    def summary(self) -> str:
        return f"Showing {self.range_start} to {self.range_end} of {self.total_count} results"


class DataTable(Generic[RowT]):
    """Search, sort, paginate and select over an in-memory row collection.

    Search term, sort config, current page and selection are each either
    controlled (a ``on_*_change`` callback is given; the caller feeds the
    accepted value back through ``update``) or owned by the table.
    """

    def __init__(
        self,
        rows: Sequence[RowT],
        columns: Sequence[Column[RowT]],
        *,
        row_key: RowKey | None = None,
        selectable: bool = False,
        selected_rows: Sequence[str] | None = None,
        on_selection_change: SelectionCallback | None = None,
        sortable: bool = True,
        sort_config: SortConfig | None = None,
        default_sort: SortConfig | None = None,
        on_sort_change: Callable[[SortConfig], None] | None = None,
        searchable: bool = True,
        search_value: str | None = None,
        on_search_change: Callable[[str], None] | None = None,
        search_filter: SearchPredicate | None = None,
        search_placeholder: str | None = None,
        paginated: bool = True,
        page_size: int | None = None,
        current_page: int | None = None,
        on_page_change: Callable[[int], None] | None = None,
        sibling_count: int | None = None,
        loading: bool = False,
        empty_message: str | None = None,
        row_clickable: bool = False,
        on_row_click: Callable[[RowT, int], None] | None = None,
    ) -> None:
        self.page_size = settings.DATATABLE_PAGE_SIZE if page_size is None else page_size
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int) or self.page_size < 1:
            raise DataTableError(ErrorCatalog.INVALID_PAGE_SIZE, details={"page_size": self.page_size})
        self.sibling_count = settings.DATATABLE_PAGINATION_SIBLING_COUNT if sibling_count is None else sibling_count
        if self.sibling_count < 0:
            raise DataTableError(ErrorCatalog.INVALID_SIBLING_COUNT, details={"sibling_count": self.sibling_count})
        ensure_unique_keys(columns)

        self.rows = rows
        self.columns = list(columns)
        self.identity = RowIdentity(row_key)
        self.sortable = sortable
        self.searchable = searchable
        self.search_filter = search_filter
        self.search_placeholder = search_placeholder or settings.DATATABLE_SEARCH_PLACEHOLDER
        self.paginated = paginated
        self.loading = loading
        self.empty_message = empty_message or settings.DATATABLE_EMPTY_MESSAGE
        self.row_clickable = row_clickable
        self.on_row_click = on_row_click

        self._search: StateOwnership[str] = resolve_ownership("search", "", search_value, on_search_change)
        self._sort: StateOwnership[SortConfig] = resolve_ownership(
            "sort", default_sort or UNSORTED, sort_config, on_sort_change
        )
        self._page: StateOwnership[int] = resolve_ownership("page", 1, current_page, on_page_change)
        self.selection = SelectionTracker(enabled=selectable, selected=selected_rows, on_change=on_selection_change)

    @property
    def search_value(self) -> str:
        return self._search.get()

    @property
    def sort_config(self) -> SortConfig:
        return self._sort.get()

    @property
    def current_page(self) -> int:
        return self._page.get()

    @property
    def page_state(self) -> PaginationState:
        return PaginationState(page=self.current_page, page_size=self.page_size)

    def update(
        self,
        *,
        rows: Sequence[RowT] = _UNSET,
        search_value: str | None = _UNSET,
        sort_config: SortConfig | None = _UNSET,
        current_page: int | None = _UNSET,
        selected_rows: Sequence[str] | None = _UNSET,
        loading: bool = _UNSET,
    ) -> None:
        """Feed new caller-owned values; ``None`` hands a field back to internal state."""
        if rows is not _UNSET:
            self.rows = rows
        if search_value is not _UNSET:
            self._search.receive(search_value)
        if sort_config is not _UNSET:
            self._sort.receive(sort_config)
        if current_page is not _UNSET:
            self._page.receive(current_page)
        if selected_rows is not _UNSET:
            self.selection.receive(selected_rows)
        if loading is not _UNSET:
            self.loading = loading

    def handle_search_change(self, value: str) -> None:
        if not self.searchable:
            return
        self._search.set(value)
        self._page.set(1)

    def handle_sort(self, column_key: str) -> None:
        if not self.sortable:
            return
        column = find_column(self.columns, column_key)
        if column is None or not column.sortable:
            return
        self._sort.set(cycle_sort(self.sort_config, column_key))

    def handle_page_change(self, page: int) -> None:
        self._page.set(page)

    def go_to_page(self, page: int) -> None:
        target = resolve_page_request(self.current_page, self.compute().total_pages, page)
        if target is not None:
            self.handle_page_change(target)

    def go_to_next_page(self) -> None:
        self._navigate(next_page)

    def go_to_previous_page(self) -> None:
        self._navigate(prev_page)

    def go_to_first_page(self) -> None:
        self._navigate(first_page)

    def go_to_last_page(self) -> None:
        self._navigate(last_page)

    def _navigate(self, step: Callable[[PaginationState, int], int | None]) -> None:
        target = step(self.page_state, self.compute().total_pages)
        if target is not None:
            self.handle_page_change(target)

    def toggle_row(self, row_id: str) -> None:
        self.selection.toggle_row(row_id)

    def toggle_all_on_page(self) -> None:
        self.selection.toggle_all_on_page(self.identity.resolve_all(self.compute().page_rows))

    def click_row(self, row: RowT, index: int) -> None:
        if self.row_clickable and self.on_row_click is not None:
            self.on_row_click(row, index)

    def render_cell(self, column: Column[RowT], row: RowT, index: int) -> Any:
        return render_cell(column, row, index)

    def sort_indicator(self, column_key: str) -> str | None:
        column = find_column(self.columns, column_key)
        if column is None:
            return None
        return sort_indicator(self.sort_config, column, self.sortable)

    def compute(self) -> PipelineResult:
        return recompute(
            self.rows,
            self.columns,
            self.search_value,
            self.sort_config,
            self.page_state,
            paginated=self.paginated,
            predicate=self.search_filter,
        )

    def view(self) -> TableView[RowT]:
        result = self.compute()
        page_ids = self.identity.resolve_all(result.page_rows)
        if settings.DATATABLE_WARN_ON_ID_COLLISIONS:
            self._warn_on_collisions(result.page_rows)

        rows = [
            TableRow(row=row, row_id=row_id, index=index, selected=self.selection.is_selected(row_id))
            for index, (row, row_id) in enumerate(zip(result.page_rows, page_ids))
        ]
        buttons = page_numbers(self.current_page, result.total_pages, self.sibling_count) if result.total_pages > 1 else []
        all_selected = self.selection.is_all_selected_on_page(page_ids)
        any_selected = self.selection.is_any_selected_on_page(page_ids)
        return TableView(
            rows=rows,
            current_page=self.current_page,
            page_size=self.page_size,
            total_pages=result.total_pages,
            total_count=result.total_count,
            source_count=result.source_count,
            range_start=result.range_start,
            range_end=result.range_end,
            search_value=self.search_value,
            sort_config=self.sort_config,
            all_selected=all_selected,
            any_selected=any_selected,
            indeterminate=any_selected and not all_selected,
            selected_ids=self.selection.selected_ids,
            page_buttons=buttons if self.paginated else [],
            loading=self.loading,
            empty_message=self.empty_message,
            search_placeholder=self.search_placeholder,
        )

    def _warn_on_collisions(self, page_rows: Sequence[RowT]) -> None:
        collisions = self.identity.find_collisions(page_rows)
        if not collisions:
            return
        log_json(
            logger,
            {
                "event": "row_id_collision",
                "row_key": self.identity.row_key if isinstance(self.identity.row_key, str) else "callable",
                "collisions": collisions,
            },
            logging.WARNING,
        )
