"""Custom exceptions for the goal-tracker application."""

from goal_tracker.exceptions.base import (
    GoalTrackerError,
    ValidationError,
    InvalidGoalError,
    ConfigurationError,
)

__all__ = [
    "GoalTrackerError",
    "ValidationError",
    "InvalidGoalError",
    "ConfigurationError",
]
