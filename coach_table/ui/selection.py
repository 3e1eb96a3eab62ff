from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from coach_table.ui.state import StateOwnership, resolve_ownership

SelectionCallback = Callable[[list[str]], None]


class SelectionTracker:
    """Tracks selected row identifiers across pages, searches and sorts.

    Ids are kept in the order they were selected, without duplicates. When
    ``on_change`` is given the caller owns the selection and is notified
    with the full new id list on every change.
    """

    def __init__(
        self,
        enabled: bool = True,
        selected: Sequence[str] | None = None,
        on_change: SelectionCallback | None = None,
    ) -> None:
        self.enabled = enabled
        self._state: StateOwnership[list[str]] = resolve_ownership(
            "selection",
            [],
            external=_dedupe(selected) if selected is not None else None,
            on_change=on_change,
        )

    @property
    def selected_ids(self) -> list[str]:
        return list(self._state.get())

    @property
    def controlled(self) -> bool:
        return self._state.controlled

    def receive(self, selected: Sequence[str] | None) -> None:
        self._state.receive(_dedupe(selected) if selected is not None else None)

    def is_selected(self, row_id: str) -> bool:
        return row_id in self._state.get()

    def toggle_row(self, row_id: str) -> None:
        if not self.enabled:
            return
        current = self._state.get()
        if row_id in current:
            self._state.set([item for item in current if item != row_id])
        else:
            self._state.set([*current, row_id])

    def toggle_all_on_page(self, page_row_ids: Iterable[str]) -> None:
        if not self.enabled:
            return
        page_ids = _dedupe(page_row_ids)
        if not page_ids:
            return
        current = self._state.get()
        selected = set(current)
        if all(row_id in selected for row_id in page_ids):
            on_page = set(page_ids)
            self._state.set([item for item in current if item not in on_page])
        else:
            self._state.set(_dedupe([*current, *page_ids]))

    def is_all_selected_on_page(self, page_row_ids: Sequence[str]) -> bool:
        if not self.enabled or not page_row_ids:
            return False
        selected = set(self._state.get())
        return all(row_id in selected for row_id in page_row_ids)

    def is_any_selected_on_page(self, page_row_ids: Sequence[str]) -> bool:
        if not self.enabled or not page_row_ids:
            return False
        selected = set(self._state.get())
        return any(row_id in selected for row_id in page_row_ids)

    def is_indeterminate_on_page(self, page_row_ids: Sequence[str]) -> bool:
        return self.is_any_selected_on_page(page_row_ids) and not self.is_all_selected_on_page(page_row_ids)


def _dedupe(ids: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(ids))
