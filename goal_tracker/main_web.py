"""Goal tracker web server entry point."""

import argparse
import sys
from typing import List, Optional

import uvicorn

from goal_tracker.config import get_settings
from goal_tracker.exceptions import ConfigurationError
from goal_tracker.logger import Logger, session_logger
from goal_tracker.store import GoalStore
from goal_tracker.web_server import GoalTrackerWebServer

logger: Logger = session_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Course Goal Tracker web server")
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host address to bind to (default: HOST env var or 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port number to listen on (default: PORT env var or 3000)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        settings = get_settings()
    except ConfigurationError as e:
        logger.error("FATAL: Invalid configuration", error=e.message, **e.details)
        return 1

    host = args.host or settings.host
    port = args.port if args.port is not None else settings.port

    try:
        server = GoalTrackerWebServer(store=GoalStore(), settings=settings, logger=logger)

        logger.info("=" * 70)
        logger.info("STARTING GOAL TRACKER WEB SERVER")
        logger.info("=" * 70)
        logger.info(
            f"Server running on port {port}",
            host=host,
            port=port,
            environment=settings.environment_label,
            static_dir=str(settings.static_dir),
        )
        logger.info(f"Environment: {settings.environment_label}")
        logger.info(f"Open: http://localhost:{port}")
        logger.info("=" * 70)
        uvicorn.run(server.app, host=host, port=port, log_level="info")
        logger.info("Web server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
        return 0
    except Exception as e:
        logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
