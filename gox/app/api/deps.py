"""
FastAPI dependencies shared by the endpoint modules.

The user service and the settings are owned by the application
instance (``app.state``) rather than by module globals, so each app
built by ``create_app`` has its own store.
"""

from typing import Optional

from fastapi import HTTPException, Query, Request, status

from ..core.config import RESPONSE_FORMATS, Settings
from ..services.user_service import UserService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_output_format(
    request: Request,
    fmt: Optional[str] = Query(None, alias="format", description="json or html"),
) -> str:
    """Pick the output format: the ``format`` query parameter wins over the configured default."""
    if fmt is None:
        return get_settings(request).response_format
    fmt = fmt.lower()
    if fmt not in RESPONSE_FORMATS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"unsupported format {fmt!r}, expected one of: {', '.join(RESPONSE_FORMATS)}",
        )
    return fmt
