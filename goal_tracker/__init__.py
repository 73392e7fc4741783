"""Course Goal Tracker - a single-goal web application."""

__version__ = "1.0.0"
