from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from coach_table.core.error_catalog import DataTableError, ErrorCatalog

RowT = TypeVar("RowT")

EMPTY_VALUE = "—"

Align = Literal["left", "center", "right"]
CellRenderer = Callable[[Any, Any, int], Any]


@dataclass(frozen=True)
class Column(Generic[RowT]):
    key: str
    label: str
    sortable: bool = True
    render: CellRenderer | None = None
    align: Align = "left"
    width: str | None = None
    resizable: bool = False


def ensure_unique_keys(columns: Sequence[Column]) -> None:
    seen: set[str] = set()
    for column in columns:
        if column.key in seen:
            raise DataTableError(ErrorCatalog.DUPLICATE_COLUMN_KEY, details={"key": column.key})
        seen.add(column.key)


def find_column(columns: Sequence[Column], key: str) -> Column | None:
    return next((column for column in columns if column.key == key), None)


def read_field(row: Any, key: str) -> Any:
    """Return the value stored under ``key`` in ``row``, or ``None``.

    Mappings are read by key first; a missing key containing dots is then
    followed as a path through nested mappings. Other objects are read by
    attribute the same way.
    """
    if not key:
        return None
    if isinstance(row, Mapping):
        if key in row:
            return row[key]
    elif hasattr(row, key):
        return getattr(row, key)
    if "." not in key:
        return None

    current = row
    for part in key.split("."):
        if isinstance(current, Mapping):
            current = current.get(part)
        else:
            current = getattr(current, part, None)
        if current is None:
            return None
    return current


def stringify_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_cell(column: Column, row: Any, index: int) -> Any:
    value = read_field(row, column.key)
    if column.render is not None:
        return column.render(value, row, index)
    if value is None:
        return EMPTY_VALUE
    return stringify_value(value)
