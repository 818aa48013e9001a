"""
In‑memory user store.

``UserRepository`` owns the canonical list of users for the lifetime
of the process.  Every read and write goes through a single lock, so
the store may be shared between request handlers running on different
threads.  Nothing is persisted.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple
from uuid import UUID

from ..schemas.user import User

logger = logging.getLogger(__name__)

# (id, first name, last name, email) of the demo users loaded at startup.
DEFAULT_SEED_USERS: Tuple[Tuple[str, str, str, str], ...] = (
    ("d9b5a4b1-d1d1-4d92-a14b-441a5e5a5ae5", "Olivia", "Ponton", "olivia.ponton@example.com"),
    ("d9b5a4b1-d1d1-4d92-a14b-441a5e5a5ae6", "Faith", "Ordway", "faith.ordway@godess.com"),
)


class DuplicateUserError(ValueError):
    """Raised when a user with the same identifier is already stored."""

    def __init__(self, user_id: UUID) -> None:
        super().__init__(f"user {user_id} already exists")
        self.user_id = user_id


class UserRepository:
    """Thread‑safe, insertion‑ordered collection of users."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._lock = threading.Lock()
        self._users: List[User] = []
        for user in users:
            self.create(user)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def create(self, user: User) -> None:
        """Append ``user``.  Raises ``DuplicateUserError`` if its id is taken."""
        with self._lock:
            if any(existing.id == user.id for existing in self._users):
                raise DuplicateUserError(user.id)
            self._users.append(user)
        logger.debug("Stored user %s", user.id)

    def get_all(self) -> List[User]:
        """Return a copy of all users in insertion order."""
        with self._lock:
            return list(self._users)

    def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Return the user with ``user_id`` or ``None`` if there is none."""
        with self._lock:
            for user in self._users:
                if user.id == user_id:
                    return user
        return None

    def seed_users(self, seeds: Iterable[Tuple[str, str, str, str]] = DEFAULT_SEED_USERS) -> None:
        """Insert the demo users, all stamped with the current time."""
        now = datetime.now(timezone.utc)
        for user_id, first_name, last_name, email in seeds:
            self.create(
                User(
                    id=UUID(user_id),
                    first_name=first_name,
                    last_name=last_name,
                    email=email,
                    created_at=now,
                    updated_at=now,
                )
            )
        logger.info("Seeded user store with %d users", len(self))
