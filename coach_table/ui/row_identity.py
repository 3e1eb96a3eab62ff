from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from typing import Any, Union

from coach_table.core.config import settings
from coach_table.ui.columns import read_field

RowKey = Union[str, Callable[[Any], str]]


class RowIdentity:
    """Derives the string identifier used to track a row's selection.

    ``row_key`` is either a field name or a callable. Identifiers are not
    checked for uniqueness; rows sharing one share their selection state.
    """

    def __init__(self, row_key: RowKey | None = None) -> None:
        self.row_key: RowKey = settings.DATATABLE_ROW_KEY if row_key is None else row_key

    def resolve(self, row: Any) -> str:
        if callable(self.row_key):
            return self.row_key(row)
        value = read_field(row, self.row_key)
        if value is None:
            return ""
        return str(value)

    def __call__(self, row: Any) -> str:
        return self.resolve(row)

    def resolve_all(self, rows: Iterable[Any]) -> list[str]:
        return [self.resolve(row) for row in rows]

    def find_collisions(self, rows: Iterable[Any]) -> dict[str, int]:
        counts = Counter(self.resolve_all(rows))
        return {row_id: count for row_id, count in counts.items() if count > 1}
