"""
Business logic for users.

``UserService`` knows how to mint a well‑formed ``User`` (fresh
identifier and timestamps) and otherwise forwards storage calls to a
``UserRepository``.  It holds no state of its own.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from ..repositories.user_repository import UserRepository
from ..schemas.user import User

logger = logging.getLogger(__name__)


class UserGenerationError(RuntimeError):
    """Raised when a new user identifier cannot be generated."""


class UserService:
    """Creates users and forwards storage calls to the repository."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    @staticmethod
    def new_user(first_name: str, last_name: str, email: str) -> User:
        """Build a new user with a random identifier.

        ``created_at`` and ``updated_at`` share the same instant.  The
        user is not stored; pass it to :meth:`create_user` for that.
        Raises ``UserGenerationError`` if the system random source is
        unavailable.
        """
        try:
            user_id = uuid.uuid4()
        except NotImplementedError as exc:
            raise UserGenerationError("unable to generate user id") from exc
        now = datetime.now(timezone.utc)
        return User(
            id=user_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            created_at=now,
            updated_at=now,
        )

    def create_user(self, user: User) -> None:
        self.repository.create(user)

    def get_user_by_id(self, user_id: UUID) -> Optional[User]:
        return self.repository.get_by_id(user_id)

    def get_all_users(self) -> List[User]:
        return self.repository.get_all()

    def register_user(self, first_name: str, last_name: str, email: str) -> User:
        """Create and store a new user, returning the stored record."""
        user = self.new_user(first_name, last_name, email)
        self.create_user(user)
        logger.info("Registered user %s <%s>", user.id, email)
        return user
