"""Goal tracker web server - HTML pages, JSON API and static assets."""

import os
import traceback
from typing import Any, Optional

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles
from starlette.types import ASGIApp, Receive, Scope, Send

from goal_tracker.config import Settings
from goal_tracker.errors import get_http_status_for_error, map_error_for_web
from goal_tracker.exceptions import GoalTrackerError
from goal_tracker.logger import Logger, session_logger
from goal_tracker.models import GoalSnapshot, GoalUpdateResult, utc_timestamp
from goal_tracker.store import GoalStore
from goal_tracker.web_server.pages import (
    INVALID_GOAL_FLAG,
    render_home,
    render_not_found,
    render_server_error,
)

STATIC_MAX_AGE = 3600


class CachedStaticFiles(StaticFiles):
    """StaticFiles that marks every served file cacheable for ``max_age`` seconds."""

    def __init__(self, *args: Any, max_age: int = STATIC_MAX_AGE, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.max_age = max_age

    def file_response(
        self,
        full_path: "os.PathLike[str] | str",
        stat_result: os.stat_result,
        scope: Scope,
        status_code: int = 200,
    ) -> Response:
        response = super().file_response(full_path, stat_result, scope, status_code)
        response.headers["Cache-Control"] = f"public, max-age={self.max_age}"
        return response


class RequestLoggingMiddleware:
    """Logs method, path and time of every HTTP request before dispatch."""

    def __init__(self, app: ASGIApp, logger: Logger):
        self.app = app
        self.logger = logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            self.logger.info(
                f"{scope['method']} {scope['path']}",
                method=scope["method"],
                path=scope["path"],
                timestamp=utc_timestamp(),
            )
        await self.app(scope, receive, send)


class GoalTrackerWebServer:
    """Web server for the goal tracker: routes, static assets and error pages."""

    SERVICE_NAME = "goal-tracker-web"

    def __init__(
        self,
        store: Optional[GoalStore] = None,
        settings: Optional[Settings] = None,
        logger: Optional[Logger] = None,
    ):
        self.store = store if store is not None else GoalStore()
        self.settings = settings if settings is not None else Settings()
        self.logger = logger if logger is not None else session_logger
        self.app = self._create_app()

    def _create_app(self) -> Starlette:
        """Create the Starlette application."""
        routes = [
            Route("/", endpoint=self.home, methods=["GET"]),
            Route("/store-goal", endpoint=self.store_goal, methods=["POST"]),
            Route("/api/goal", endpoint=self.read_goal, methods=["GET"]),
            Route("/api/goal", endpoint=self.update_goal, methods=["POST"]),
            Mount(
                "/",
                app=CachedStaticFiles(directory=self.settings.static_dir),
                name="static",
            ),
        ]

        # Anything the static mount cannot serve (missing file, non-GET
        # method) surfaces as an HTTPException and renders the 404 page.
        exception_handlers = {
            404: self.not_found,
            405: self.not_found,
            Exception: self.server_error,
        }

        return Starlette(
            debug=False,
            routes=routes,
            middleware=[Middleware(RequestLoggingMiddleware, logger=self.logger)],
            exception_handlers=exception_handlers,  # type: ignore[arg-type]
        )

    async def home(self, request: Request) -> HTMLResponse:
        """Home page with the current goal and the update form."""
        return HTMLResponse(render_home(
            self.store.read(),
            success=request.query_params.get("success"),
            error=request.query_params.get("error"),
        ))

    async def store_goal(self, request: Request) -> RedirectResponse:
        """Form submission; always redirects back to the home page."""
        form = await request.form()
        try:
            goal = self.store.write(form.get("goal"))
        except GoalTrackerError as e:
            self.logger.info("Rejected goal from form", error_code=e.code)
            return RedirectResponse(f"/?error={INVALID_GOAL_FLAG}", status_code=302)

        self.logger.info(f"Goal updated: {goal}", source="form")
        return RedirectResponse("/?success=true", status_code=302)

    async def read_goal(self, request: Request) -> JSONResponse:
        return JSONResponse(GoalSnapshot(goal=self.store.read()).model_dump())

    async def update_goal(self, request: Request) -> JSONResponse:
        """JSON update; bodies that are not an object with ``goal`` are invalid."""
        try:
            payload = await request.json()
        except ValueError:
            payload = None
        candidate = payload.get("goal") if isinstance(payload, dict) else None

        try:
            goal = self.store.write(candidate)
        except GoalTrackerError as e:
            self.logger.info("Rejected goal from API", error_code=e.code)
            return JSONResponse(map_error_for_web(e), status_code=get_http_status_for_error(e))

        self.logger.info(f"Goal updated: {goal}", source="api")
        return JSONResponse(GoalUpdateResult(goal=goal).model_dump())

    async def not_found(self, request: Request, exc: HTTPException) -> HTMLResponse:
        return HTMLResponse(render_not_found(), status_code=404)

    async def server_error(self, request: Request, exc: Exception) -> HTMLResponse:
        """Log the failure and render the 500 page.

        The traceback is only included in the page in development mode.
        """
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        self.logger.error(
            "Unhandled error",
            method=request.method,
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
            traceback=stack,
        )
        return HTMLResponse(
            render_server_error(stack, include_stack_trace=self.settings.is_development),
            status_code=500,
        )

    def get_app(self) -> Starlette:
        """Return the ASGI application."""
        return self.app
