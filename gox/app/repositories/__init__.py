"""Data access layer.  Only an in‑memory user store exists."""

from .user_repository import DEFAULT_SEED_USERS, DuplicateUserError, UserRepository  # noqa: F401
