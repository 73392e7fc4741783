"""Error handling utilities for goal-tracker."""

from goal_tracker.errors.mapper import (
    ErrorResponse,
    map_exception_to_response,
    map_error_for_web,
    get_http_status_for_error,
)

__all__ = [
    "ErrorResponse",
    "map_exception_to_response",
    "map_error_for_web",
    "get_http_status_for_error",
]
