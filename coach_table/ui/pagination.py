from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Literal, Union

from coach_table.core.config import settings

ELLIPSIS = "ellipsis"

PageButton = Union[int, Literal["ellipsis"]]


@dataclass
class PaginationState:
    page: int = 1
    page_size: int = field(default_factory=lambda: settings.DATATABLE_PAGE_SIZE)


@dataclass(frozen=True)
class PageSlice:
    page_rows: Sequence[Any]
    total_pages: int


def total_pages_for(total: int, page_size: int) -> int:
    return math.ceil(total / page_size)


def paginate(rows: Sequence[Any], state: PaginationState, enabled: bool = True) -> PageSlice:
    if not enabled:
        return PageSlice(page_rows=rows, total_pages=1)
    start = (state.page - 1) * state.page_size
    end = state.page * state.page_size
    # an out-of-range page is an empty slice, never an error
    page_rows = rows[start:end] if start >= 0 else rows[0:0]
    return PageSlice(page_rows=page_rows, total_pages=total_pages_for(len(rows), state.page_size))


def visible_range(page: int, page_size: int, total: int) -> tuple[int, int]:
    start = min((page - 1) * page_size + 1, total)
    end = min(page * page_size, total)
    return start, end


def resolve_page_request(current: int, total_pages: int, target: int) -> int | None:
    if target == current or target < 1 or target > total_pages:
        return None
    return target


def next_page(state: PaginationState, total_pages: int) -> int | None:
    return resolve_page_request(state.page, total_pages, state.page + 1)


def prev_page(state: PaginationState, total_pages: int) -> int | None:
    return resolve_page_request(state.page, total_pages, state.page - 1)


def first_page(state: PaginationState, total_pages: int) -> int | None:
    return resolve_page_request(state.page, total_pages, 1)


def last_page(state: PaginationState, total_pages: int) -> int | None:
    return resolve_page_request(state.page, total_pages, total_pages)


def goto_page(state: PaginationState, page: int) -> PaginationState:
    state.page = max(1, page)
    return state


def page_numbers(current: int, total_pages: int, sibling_count: int = 1) -> list[PageButton]:
    """Page buttons to show, collapsing long runs into ``"ellipsis"``.

    First and last pages are always shown, along with ``sibling_count`` pages
    on each side of ``current``.
    """
    total_blocks = sibling_count * 2 + 5 + 2
    if total_pages <= total_blocks:
        return list(range(1, total_pages + 1))

    left_sibling = max(current - sibling_count, 1)
    right_sibling = min(current + sibling_count, total_pages)
    show_left_ellipsis = left_sibling > 2
    show_right_ellipsis = right_sibling < total_pages - 1
    edge_count = 3 + 2 * sibling_count

    if not show_left_ellipsis and show_right_ellipsis:
        return [*range(1, edge_count + 1), ELLIPSIS, total_pages]
    if show_left_ellipsis and not show_right_ellipsis:
        return [1, ELLIPSIS, *range(total_pages - edge_count + 1, total_pages + 1)]
    if show_left_ellipsis and show_right_ellipsis:
        return [1, ELLIPSIS, *range(left_sibling, right_sibling + 1), ELLIPSIS, total_pages]
    return list(range(1, total_pages + 1))
