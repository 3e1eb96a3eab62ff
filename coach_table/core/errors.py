from __future__ import annotations

from pydantic import ValidationError

from coach_table.core.error_catalog import AppError, ErrorCatalog


def _validation_error_details(exc: ValidationError) -> dict:
    errors = []
    for error in exc.errors():
        loc = list(error.get("loc", []))
        errors.append(
            {
                "field": ".".join(str(item) for item in loc) or None,
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "validation_error"),
            }
        )
    return {"errors": errors}


class ErrorMapper:
    @classmethod
    def to_payload(cls, error: Exception) -> dict:
        if isinstance(error, AppError):
            return {
                "code": error.error.code,
                "message": error.error.message,
                "details": error.details,
            }
        if isinstance(error, ValidationError):
            return {
                "code": "VALIDATION_ERROR",
                "message": "Invalid table settings",
                "details": _validation_error_details(error),
            }
        return {
            "code": ErrorCatalog.INTERNAL_ERROR.code,
            "message": str(error),
            "details": {"type": error.__class__.__name__},
        }

    @classmethod
    def to_display_message(cls, error: Exception) -> str:
        payload = cls.to_payload(error)
        return f"[{payload['code']}] {payload['message']}"
