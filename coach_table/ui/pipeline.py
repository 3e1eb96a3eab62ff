from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from coach_table.ui.columns import Column
from coach_table.ui.filters import SearchPredicate, filter_rows
from coach_table.ui.listing_view import SortConfig, sort_rows
from coach_table.ui.pagination import PaginationState, paginate, visible_range


@dataclass(frozen=True)
class PipelineResult:
    ordered_rows: Sequence[Any]
    page_rows: Sequence[Any]
    total_pages: int
    total_count: int
    source_count: int
    range_start: int
    range_end: int


def recompute(
    rows: Sequence[Any],
    columns: Sequence[Column],
    search_term: str | None,
    sort_config: SortConfig | None,
    page_state: PaginationState,
    paginated: bool = True,
    predicate: SearchPredicate | None = None,
) -> PipelineResult:
    """Run filter, sort and paginate over ``rows``.

    Pure: depends only on its arguments and never mutates them, so it can be
    called as often as the caller likes.
    """
    filtered = filter_rows(rows, search_term, columns, predicate)
    ordered = sort_rows(filtered, sort_config, columns)
    page = paginate(ordered, page_state, enabled=paginated)
    total = len(ordered)
    if paginated:
        start, end = visible_range(page_state.page, page_state.page_size, total)
    else:
        start, end = min(1, total), total
    return PipelineResult(
        ordered_rows=ordered,
        page_rows=page.page_rows,
        total_pages=page.total_pages,
        total_count=total,
        source_count=len(rows),
        range_start=start,
        range_end=end,
    )
