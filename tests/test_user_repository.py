"""Tests for the in-memory user store."""

from __future__ import annotations

import threading
import unittest
from datetime import datetime, timezone
from uuid import UUID, uuid4

from gox.app.repositories.user_repository import DEFAULT_SEED_USERS, DuplicateUserError, UserRepository
from gox.app.schemas.user import User


def make_user(first_name: str = "Ada", last_name: str = "Lovelace", user_id: UUID | None = None) -> User:
    now = datetime.now(timezone.utc)
    return User(
        id=user_id or uuid4(),
        first_name=first_name,
        last_name=last_name,
        email=f"{first_name.lower()}@example.com",
        created_at=now,
        updated_at=now,
    )


class UserRepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.repository = UserRepository()

    def test_created_user_is_listed_and_found(self) -> None:
        user = make_user()
        self.repository.create(user)

        self.assertIn(user, self.repository.get_all())
        self.assertEqual(self.repository.get_by_id(user.id), user)

    def test_get_all_preserves_insertion_order(self) -> None:
        users = [make_user(name) for name in ("Ada", "Grace", "Barbara")]
        for user in users:
            self.repository.create(user)

        self.assertEqual(self.repository.get_all(), users)

    def test_get_all_returns_a_copy(self) -> None:
        self.repository.create(make_user())
        snapshot = self.repository.get_all()
        snapshot.clear()

        self.assertEqual(len(self.repository), 1)

    def test_get_by_id_returns_none_for_unknown_id(self) -> None:
        self.repository.create(make_user())

        self.assertIsNone(self.repository.get_by_id(UUID(int=0)))

    def test_duplicate_id_is_rejected(self) -> None:
        user = make_user()
        self.repository.create(user)

        with self.assertRaises(DuplicateUserError) as ctx:
            self.repository.create(make_user("Other", user_id=user.id))
        self.assertEqual(ctx.exception.user_id, user.id)
        self.assertEqual(len(self.repository), 1)

    def test_constructor_accepts_initial_users(self) -> None:
        users = [make_user("Ada"), make_user("Grace")]
        repository = UserRepository(users)

        self.assertEqual(repository.get_all(), users)

    def test_seed_users_loads_demo_users(self) -> None:
        self.repository.seed_users()

        users = self.repository.get_all()
        self.assertEqual([str(user.id) for user in users], [seed[0] for seed in DEFAULT_SEED_USERS])
        self.assertEqual((users[0].first_name, users[0].last_name), ("Olivia", "Ponton"))
        self.assertEqual((users[1].first_name, users[1].last_name), ("Faith", "Ordway"))
        for user in users:
            self.assertEqual(user.created_at, user.updated_at)

    def test_concurrent_creates_lose_no_users(self) -> None:
        per_thread = 200
        thread_count = 8

        def worker() -> None:
            for _ in range(per_thread):
                self.repository.create(make_user())

        threads = [threading.Thread(target=worker) for _ in range(thread_count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        users = self.repository.get_all()
        self.assertEqual(len(users), per_thread * thread_count)
        self.assertEqual(len({user.id for user in users}), per_thread * thread_count)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
