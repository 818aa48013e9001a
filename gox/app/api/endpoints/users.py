"""
User endpoints.

``GET /users`` lists every user and ``GET /user?id=<uuid>`` fetches
one.  Both render as pretty JSON or as an HTML page depending on the
requested format.  ``POST /users`` lives on a separate router that is
only mounted when user creation is enabled in the settings.

Errors use one policy: a missing or malformed id is a 400, an unknown
id is a 404.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response

from gox.app.api.deps import get_output_format, get_user_service
from gox.app.core.responses import render
from gox.app.repositories.user_repository import DuplicateUserError
from gox.app.schemas.user import User, UserCreate
from gox.app.services.user_service import UserService

router = APIRouter()

# Mounted by ``api.router.build_router`` only when creation is enabled.
creation_router = APIRouter()


def parse_user_id(raw: Optional[str]) -> UUID:
    """Parse the ``id`` query parameter, raising HTTP 400 when it is unusable."""
    if raw is None or not raw.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid user id: id is required")
    try:
        return UUID(raw.strip())
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"invalid user id: {raw!r} is not a UUID",
        ) from None


@router.get("/users", response_model=List[User])
async def list_users(
    service: UserService = Depends(get_user_service),
    fmt: str = Depends(get_output_format),
) -> Response:
    """Return every user in insertion order."""
    return render(service.get_all_users(), fmt)


@router.get("/user", response_model=User)
async def get_user(
    raw_id: Optional[str] = Query(None, alias="id", description="User UUID"),
    service: UserService = Depends(get_user_service),
    fmt: str = Depends(get_output_format),
) -> Response:
    """Return a single user by identifier.

    Returns HTTP 400 if ``id`` is missing or not a UUID and HTTP 404 if
    no user has that identifier.
    """
    user_id = parse_user_id(raw_id)
    user = service.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="user not found")
    return render(user, fmt)


@creation_router.post("/users", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreate,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Create a user with a generated identifier and return it."""
    try:
        user = service.register_user(payload.first_name, payload.last_name, payload.email)
    except DuplicateUserError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return render(user, status_code=status.HTTP_201_CREATED)
