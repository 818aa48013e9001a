"""
Pydantic models for user data.

``User`` is the record kept by the repository and the body returned by
the API.  ``UserCreate`` is the payload accepted when user creation is
enabled; it carries only the fields a client may choose, the
identifier and timestamps are assigned by ``UserService``.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class User(BaseModel):
    """A user of the directory.

    The identifier is unique within the store and never changes once
    assigned.  ``created_at`` is set once; ``updated_at`` tracks the
    last mutation and equals ``created_at`` for a freshly built user.
    """

    id: UUID = Field(..., examples=["d9b5a4b1-d1d1-4d92-a14b-441a5e5a5ae5"])
    first_name: str = Field(..., examples=["Olivia"])
    last_name: str = Field(..., examples=["Ponton"])
    email: str = Field(..., examples=["olivia.ponton@example.com"])
    created_at: datetime
    updated_at: datetime

    model_config = {
        "frozen": True,
    }


class UserCreate(BaseModel):
    """Schema for creating a user."""

    first_name: str = Field(..., examples=["Ada"])
    last_name: str = Field(..., examples=["Lovelace"])
    email: str = Field(..., examples=["ada@example.com"])
