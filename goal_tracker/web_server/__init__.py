"""HTTP surface of the goal tracker."""

from goal_tracker.web_server.web_server import GoalTrackerWebServer

__all__ = ["GoalTrackerWebServer"]
