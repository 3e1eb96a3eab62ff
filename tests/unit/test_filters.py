from coach_table.ui.columns import Column
from coach_table.ui.filters import filter_rows

COLUMNS = [Column(key="id", label="ID"), Column(key="name", label="Name")]
ROWS = [{"id": 1, "name": "Bob"}, {"id": 2, "name": "Ann"}, {"id": 3, "name": "cat"}]


def test_blank_search_returns_rows_untouched() -> None:
    for term in ("", "   ", None):
        assert filter_rows(ROWS, term, COLUMNS) is ROWS


def test_default_search_is_case_insensitive_substring_match() -> None:
    result = filter_rows(ROWS, "an", COLUMNS)

    assert result == [{"id": 2, "name": "Ann"}]


def test_default_search_trims_term_and_stringifies_numbers() -> None:
    assert filter_rows(ROWS, "  3 ", COLUMNS) == [{"id": 3, "name": "cat"}]


def test_default_search_only_inspects_column_fields_and_skips_nulls() -> None:
    rows = [
        {"id": 1, "name": None, "notes": "annual review"},
        {"id": 2, "name": "Joanna", "notes": None},
    ]

    assert filter_rows(rows, "ann", COLUMNS) == [rows[1]]
    assert filter_rows(rows, "none", COLUMNS) == []


def test_default_search_matches_booleans_as_lowercase_words() -> None:
    columns = [Column(key="active", label="Active")]
    rows = [{"active": True}, {"active": False}]

    assert filter_rows(rows, "TRUE", columns) == [{"active": True}]


def test_every_match_contains_term_and_no_excluded_row_does() -> None:
    rows = [{"id": index, "name": name} for index, name in enumerate(["Anna", "Hannah", "Bo", "Dan", "Eve", "ANNIE"])]

    result = filter_rows(rows, "An", COLUMNS)
    excluded = [row for row in rows if row not in result]

    assert all("an" in row["name"].lower() or "an" in str(row["id"]) for row in result)
    assert all("an" not in row["name"].lower() for row in excluded)
    assert [row["name"] for row in result] == ["Anna", "Hannah", "Dan", "ANNIE"]


def test_custom_predicate_receives_lowercased_trimmed_term() -> None:
    seen: list[str] = []

    def by_category(row, term):
        seen.append(term)
        return row["category"] == term

    rows = [{"category": "strength"}, {"category": "Mobility"}, {"category": "mobility"}]

    result = filter_rows(rows, "  MOBILITY ", COLUMNS, predicate=by_category)

    assert result == [{"category": "mobility"}]
    assert set(seen) == {"mobility"}


def test_filter_does_not_mutate_input() -> None:
    rows = list(ROWS)

    filter_rows(rows, "bob", COLUMNS)

    assert rows == ROWS
