"""Error response mapping for the JSON API.

Converts structured GoalTrackerError exceptions into the ``{"error": ...}``
bodies and HTTP status codes returned by the API routes.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional

from goal_tracker.exceptions import (
    GoalTrackerError,
    ValidationError,
)


@dataclass
class ErrorResponse:
    """Structured error response for API consumers."""

    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None


def map_exception_to_response(error: Exception) -> ErrorResponse:
    """Convert an exception to a structured ErrorResponse.

    Args:
        error: The exception to convert

    Returns:
        ErrorResponse with structured error information
    """
    if isinstance(error, GoalTrackerError):
        return ErrorResponse(
            error_code=error.code,
            message=error.message,
            details=error.details if error.details else None,
        )

    from pydantic import ValidationError as PydanticValidationError

    if isinstance(error, PydanticValidationError):
        errors = error.errors(include_url=False)
        return ErrorResponse(
            error_code="PYDANTIC_VALIDATION_ERROR",
            message=f"Validation failed: {len(errors)} error(s)",
            details={"errors": errors},
        )

    return ErrorResponse(
        error_code="INTERNAL_ERROR",
        message=str(error),
        details={"exception_type": type(error).__name__},
    )


def map_error_for_web(error: Exception) -> Dict[str, Any]:
    """Map exception to the API error body: ``{"error": message}``."""
    response = map_exception_to_response(error)
    return {"error": response.message}


def get_http_status_for_error(error: Exception) -> int:
    """Determine appropriate HTTP status code for an error.

    Args:
        error: The exception

    Returns:
        HTTP status code
    """
    if isinstance(error, ValidationError):
        return 400
    elif isinstance(error, GoalTrackerError):
        return 400
    else:
        return 500
