import pytest
from pydantic import ValidationError

from coach_table.core.config import Settings
from coach_table.core.error_catalog import DataTableError, ErrorCatalog
from coach_table.core.errors import ErrorMapper


def test_error_mapper_known_table_error() -> None:
    payload = ErrorMapper.to_payload(DataTableError(ErrorCatalog.INVALID_PAGE_SIZE, details={"page_size": 0}))

    assert payload["code"] == "INVALID_PAGE_SIZE"
    assert payload["details"] == {"page_size": 0}
    assert ErrorMapper.to_display_message(DataTableError(ErrorCatalog.DUPLICATE_COLUMN_KEY)) == (
        "[DUPLICATE_COLUMN_KEY] Column keys must be unique"
    )


def test_error_mapper_settings_validation_error(monkeypatch) -> None:
    monkeypatch.setenv("DATATABLE_PAGE_SIZE", "-3")
    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None)

    payload = ErrorMapper.to_payload(exc_info.value)

    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["details"]["errors"][0]["field"] == "DATATABLE_PAGE_SIZE"


def test_error_mapper_fallback_internal_error() -> None:
    payload = ErrorMapper.to_payload(RuntimeError("boom"))

    assert payload["code"] == "INTERNAL_ERROR"
    assert payload["message"] == "boom"
    assert payload["details"] == {"type": "RuntimeError"}


def test_error_mapper_is_exported_for_host_views() -> None:
    import coach_table

    with pytest.raises(coach_table.DataTableError) as exc_info:
        coach_table.DataTable([], [], page_size=0)

    assert coach_table.ErrorMapper.to_payload(exc_info.value)["code"] == "INVALID_PAGE_SIZE"
