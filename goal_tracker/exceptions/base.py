"""Exception classes for the goal-tracker application.

Every error carries a machine-readable ``code``, a human-readable
``message`` and optional ``details`` so the error mapper can turn it into
a response without inspecting the exception type further.
"""

from typing import Any, Dict, Optional


class GoalTrackerError(Exception):
    """Base for all goal-tracker errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ValidationError(GoalTrackerError):
    """Raised when request input fails validation."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="VALIDATION_ERROR", message=message, details=details)


class InvalidGoalError(ValidationError):
    """Raised when a goal is empty or longer than the maximum length."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, details=details)
        self.code = "INVALID_GOAL"


class ConfigurationError(GoalTrackerError):
    """Raised when environment configuration cannot be parsed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONFIGURATION_ERROR", message=message, details=details)
