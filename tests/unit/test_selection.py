from coach_table.ui.selection import SelectionTracker


def test_toggle_all_on_page_selects_then_clears() -> None:
    tracker = SelectionTracker()

    tracker.toggle_all_on_page(["a", "b"])
    assert tracker.selected_ids == ["a", "b"]

    tracker.toggle_all_on_page(["a", "b"])
    assert tracker.selected_ids == []


def test_toggle_all_from_partial_state_selects_everything_in_one_call() -> None:
    tracker = SelectionTracker(selected=None)
    tracker.toggle_row("b")

    tracker.toggle_all_on_page(["a", "b", "c"])

    assert tracker.selected_ids == ["b", "a", "c"]


def test_toggle_all_is_self_inverse_and_keeps_other_pages() -> None:
    tracker = SelectionTracker()
    tracker.toggle_row("off-page")
    before = tracker.selected_ids

    tracker.toggle_all_on_page(["x", "y"])
    tracker.toggle_all_on_page(["x", "y"])

    assert tracker.selected_ids == before


def test_toggle_row_adds_and_removes() -> None:
    tracker = SelectionTracker()

    tracker.toggle_row("7")
    tracker.toggle_row("8")
    tracker.toggle_row("7")

    assert tracker.selected_ids == ["8"]


def test_page_state_queries() -> None:
    tracker = SelectionTracker()
    tracker.toggle_row("a")

    assert tracker.is_any_selected_on_page(["a", "b"]) is True
    assert tracker.is_all_selected_on_page(["a", "b"]) is False
    assert tracker.is_indeterminate_on_page(["a", "b"]) is True
    assert tracker.is_all_selected_on_page(["a"]) is True
    assert tracker.is_indeterminate_on_page(["a"]) is False
    assert tracker.is_all_selected_on_page([]) is False
    assert tracker.is_any_selected_on_page([]) is False


def test_disabled_selection_ignores_toggles() -> None:
    changes: list[list[str]] = []
    tracker = SelectionTracker(enabled=False, on_change=changes.append)

    tracker.toggle_row("a")
    tracker.toggle_all_on_page(["a", "b"])

    assert changes == []
    assert tracker.selected_ids == []
    assert tracker.is_any_selected_on_page(["a"]) is False


def test_controlled_selection_notifies_with_full_set_and_waits_for_caller() -> None:
    changes: list[list[str]] = []
    tracker = SelectionTracker(selected=["1"], on_change=changes.append)

    tracker.toggle_row("2")

    assert changes == [["1", "2"]]
    assert tracker.selected_ids == ["1"]

    tracker.receive(changes[-1])
    tracker.toggle_all_on_page(["1", "2"])

    assert changes[-1] == []


def test_external_value_replaces_selection_and_drops_duplicates() -> None:
    tracker = SelectionTracker()
    tracker.toggle_row("a")

    tracker.receive(["c", "c", "d"])

    assert tracker.selected_ids == ["c", "d"]
    assert tracker.is_selected("a") is False
