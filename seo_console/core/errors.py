"""Error Hierarchy: typed exceptions for every failure the API reports.

Invariants:
    - Every error carries an HTTP status, a message and a details string
    - to_response() produces the uniform envelope
      {"error": {"code": int, "message": str, "details": str}}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SeoConsoleError base: one FastAPI handler catches all
    - Only two domain errors exist (missing parameter, not found); anything
      else is an unexpected fault handled by the catch-all
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories, surfaced in logs."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class SeoConsoleError(Exception):
    """Base exception for all errors returned to API callers."""

    def __init__(
        self,
        message: str,
        details: str = "",
        category: ErrorCategory = ErrorCategory.INTERNAL,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.details = details
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standardized REST error envelope."""
        return error_envelope(self.http_status, self.message, self.details)


class MissingParameterError(SeoConsoleError):
    """A required path parameter was absent or empty."""
    def __init__(self, parameter: str, details: str = ""):
        super().__init__(
            f"Missing {parameter}", details,
            ErrorCategory.VALIDATION, 400,
        )
        self.parameter = parameter


class NotFoundError(SeoConsoleError):
    """No data exists for the resolved identifier, or no route matched."""
    def __init__(self, message: str = "Not found", details: str = ""):
        super().__init__(
            message, details, ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )


def error_envelope(code: int, message: str, details: str = "") -> dict:
    """Build the error body shared by domain errors and framework handlers."""
    return {"error": {"code": code, "message": message, "details": details}}
