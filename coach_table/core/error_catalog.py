from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDefinition:
    code: str
    message: str


class ErrorCatalog:
    INVALID_PAGE_SIZE = ErrorDefinition("INVALID_PAGE_SIZE", "Page size must be a positive integer")
    INVALID_SIBLING_COUNT = ErrorDefinition(
        "INVALID_SIBLING_COUNT",
        "Pagination sibling count must be zero or greater",
    )
    DUPLICATE_COLUMN_KEY = ErrorDefinition("DUPLICATE_COLUMN_KEY", "Column keys must be unique")
    INTERNAL_ERROR = ErrorDefinition("INTERNAL_ERROR", "Internal error")


class AppError(Exception):
    def __init__(self, error: ErrorDefinition, details: object | None = None):
        self.error = error
        self.details = details
        super().__init__(error.message)


class DataTableError(AppError):
    """Raised when a table is constructed with an unusable configuration."""
