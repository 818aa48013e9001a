"""
Main entrypoint for the gox API.

This module assembles the FastAPI application: it sets up logging,
creates the user store and service, and includes the routers.  The
``create_app`` function builds and configures the app.  Settings are
read when the factory runs, not at import time, so serve it with
uvicorn's factory mode::

    uvicorn gox.app.main:create_app --factory --reload

Tests call ``create_app`` with their own settings or repository to
get an isolated store.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import build_router
from .core.config import Settings, load_settings
from .core.logging_config import setup_logging
from .core.responses import error_response
from .repositories.user_repository import UserRepository
from .services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[UserRepository] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use.  Read from the environment when omitted.
    repository : Optional[UserRepository]
        Store to serve.  When omitted a new one is created and, if
        ``settings.seed_users`` is set, filled with the demo users.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    if settings is None:
        settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)

    if repository is None:
        repository = UserRepository()
        if settings.seed_users:
            repository.seed_users()

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.user_service = UserService(repository)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        first = exc.errors()[0] if exc.errors() else {}
        field = ".".join(str(part) for part in first.get("loc", ()))
        return error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            f"invalid request: {field} {first.get('msg', '')}".strip(),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal server error")

    app.include_router(build_router(settings))
    return app

