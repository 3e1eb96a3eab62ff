from __future__ import annotations

import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from numbers import Real
from typing import Any

from coach_table.ui.columns import Column, read_field, stringify_value


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"
    NONE = "none"


@dataclass(frozen=True)
class SortConfig:
    key: str = ""
    direction: SortDirection = SortDirection.NONE

    def __post_init__(self) -> None:
        direction = SortDirection.NONE if self.direction is None else SortDirection(self.direction)
        object.__setattr__(self, "direction", direction)
        object.__setattr__(self, "key", self.key or "")

    @property
    def is_active(self) -> bool:
        return bool(self.key) and self.direction is not SortDirection.NONE


UNSORTED = SortConfig()


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def collation_key(text: str) -> tuple[str, str, str]:
    """Accent- and case-insensitive first, then accents, then raw text."""
    folded = text.casefold()
    base = "".join(char for char in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(char))
    return base, folded, text


def text_compare(left: str, right: str) -> int:
    return _sign_of(collation_key(left), collation_key(right))


def _sign_of(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def compare_values(left: Any, right: Any) -> int:
    if isinstance(left, str) and isinstance(right, str):
        return text_compare(left, right)
    if _is_number(left) and _is_number(right):
        return _sign_of(left, right)
    return text_compare(stringify_value(left), stringify_value(right))


def sort_rows(
    rows: Sequence[Any],
    sort_config: SortConfig | None,
    columns: Sequence[Column] = (),
) -> Sequence[Any]:
    """Order ``rows`` by the configured column.

    Missing values always go last, whichever the direction. ``columns`` is
    accepted for symmetry with the other stages; the key is read straight off
    each row.
    """
    if sort_config is None or not sort_config.is_active:
        return rows

    key = sort_config.key
    descending = sort_config.direction is SortDirection.DESC

    def _compare(left_row: Any, right_row: Any) -> int:
        left = read_field(left_row, key)
        right = read_field(right_row, key)
        if left is None and right is None:
            return 0
        if left is None:
            return 1
        if right is None:
            return -1
        result = compare_values(left, right)
        return -result if descending else result

    return sorted(rows, key=cmp_to_key(_compare))


def cycle_sort(current: SortConfig | None, clicked_key: str) -> SortConfig:
    if current is not None and current.key == clicked_key:
        if current.direction is SortDirection.ASC:
            return SortConfig(key=clicked_key, direction=SortDirection.DESC)
        if current.direction is SortDirection.DESC:
            return SortConfig(key=clicked_key, direction=SortDirection.NONE)
    return SortConfig(key=clicked_key, direction=SortDirection.ASC)


def sort_indicator(sort_config: SortConfig | None, column: Column, table_sortable: bool = True) -> str | None:
    if not table_sortable or not column.sortable:
        return None
    if sort_config is None or sort_config.key != column.key or not sort_config.is_active:
        return "unsorted"
    return sort_config.direction.value
