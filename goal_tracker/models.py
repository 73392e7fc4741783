"""Goal entity and JSON wire models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

DEFAULT_GOAL = "Learn Docker!"
MAX_GOAL_LENGTH = 100
INVALID_GOAL_MESSAGE = f"Invalid goal. Must be 1-{MAX_GOAL_LENGTH} characters."

GoalText = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_GOAL_LENGTH),
]


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2026-10-18T12:00:00.000Z"""
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Goal(BaseModel):
    """A validated goal. ``text`` is trimmed and 1-100 characters long."""

    model_config = ConfigDict(strict=True, frozen=True)

    text: GoalText


class GoalSnapshot(BaseModel):
    """Body of ``GET /api/goal``."""

    goal: str
    timestamp: str = Field(default_factory=utc_timestamp)


class GoalUpdateResult(BaseModel):
    """Body of a successful ``POST /api/goal``."""

    success: Literal[True] = True
    goal: str
    timestamp: str = Field(default_factory=utc_timestamp)
