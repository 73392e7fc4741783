"""In-memory holder of the current goal."""

import threading
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from goal_tracker.exceptions import InvalidGoalError
from goal_tracker.models import DEFAULT_GOAL, INVALID_GOAL_MESSAGE, Goal


def validate_goal(candidate: Any) -> str:
    """Return the trimmed goal text or raise InvalidGoalError.

    Anything that is not a string of 1-100 characters after trimming is
    rejected, including a missing value.
    """
    try:
        return Goal(text=candidate).text
    except PydanticValidationError as e:
        raise InvalidGoalError(
            INVALID_GOAL_MESSAGE,
            details={"reason": e.errors(include_url=False)[0]["type"]},
        ) from e


class GoalStore:
    """Single mutable goal value with read/write access.

    The value is not persisted. A lock guards replacement so the store can
    be shared by handlers running on different threads.
    """

    def __init__(self, initial: str = DEFAULT_GOAL):
        self._initial = validate_goal(initial)
        self._text = self._initial
        self._lock = threading.Lock()

    def read(self) -> str:
        with self._lock:
            return self._text

    def write(self, candidate: Any) -> str:
        """Store ``candidate`` after trimming and return the stored text.

        Raises:
            InvalidGoalError: if the candidate is empty or too long. The
                stored goal is left unchanged.
        """
        text = validate_goal(candidate)
        with self._lock:
            self._text = text
        return text

    def reset(self) -> None:
        with self._lock:
            self._text = self._initial
