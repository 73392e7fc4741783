"""Logger module for goal-tracker

Components log through the abstract ``Logger`` interface so a different
implementation can be dropped in.

Usage:
    from goal_tracker.logger import session_logger

    session_logger.info("Goal updated", goal="Learn Rust")
"""

import logging
import os

from .base import Logger
from .structured_logger import StructuredLogger

# Configuration from environment
LOG_LEVEL_STR = os.environ.get("GOAL_TRACKER_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.environ.get("GOAL_TRACKER_LOG_FILE")
LOG_JSON = os.environ.get("GOAL_TRACKER_LOG_JSON", "false").lower() == "true"

# Map string level to logging constant
LOG_LEVEL = getattr(logging, LOG_LEVEL_STR, logging.INFO)

# Shared logger instance
session_logger: Logger = StructuredLogger(
    level=LOG_LEVEL,
    log_file=LOG_FILE,
    json_format=LOG_JSON,
)

__all__ = [
    "Logger",
    "StructuredLogger",
    "session_logger",
]
