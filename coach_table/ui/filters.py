from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from coach_table.ui.columns import Column, read_field, stringify_value

SearchPredicate = Callable[[Any, str], bool]


def normalize_search_term(term: str | None) -> str:
    return (term or "").strip().lower()


def row_matches(row: Any, term: str, columns: Sequence[Column]) -> bool:
    for column in columns:
        value = read_field(row, column.key)
        if value is None:
            continue
        if term in stringify_value(value).lower():
            return True
    return False


def filter_rows(
    rows: Sequence[Any],
    search_term: str | None,
    columns: Sequence[Column],
    predicate: SearchPredicate | None = None,
) -> Sequence[Any]:
    """Keep the rows matching ``search_term``.

    A blank term returns ``rows`` itself. A custom ``predicate`` receives the
    trimmed, lower-cased term and decides on its own how to compare it.
    """
    term = normalize_search_term(search_term)
    if not term:
        return rows
    if predicate is not None:
        return [row for row in rows if predicate(row, term)]
    return [row for row in rows if row_matches(row, term, columns)]
