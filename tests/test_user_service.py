"""Tests for user construction and the service pass-through."""

from __future__ import annotations

import unittest
from unittest import mock
from uuid import UUID

from gox.app.repositories.user_repository import UserRepository
from gox.app.schemas.user import User
from gox.app.services.user_service import UserGenerationError, UserService


class UserServiceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.repository = UserRepository()
        self.service = UserService(self.repository)

    def test_new_user_sets_fields_and_matching_timestamps(self) -> None:
        user = UserService.new_user("Olivia", "Ponton", "olivia.ponton@example.com")

        self.assertIsInstance(user.id, UUID)
        self.assertEqual(user.first_name, "Olivia")
        self.assertEqual(user.last_name, "Ponton")
        self.assertEqual(user.email, "olivia.ponton@example.com")
        self.assertEqual(user.created_at, user.updated_at)
        self.assertIsNotNone(user.created_at.tzinfo)

    def test_new_user_ids_are_unique(self) -> None:
        ids = {UserService.new_user("A", "B", "a@b.c").id for _ in range(10_000)}

        self.assertEqual(len(ids), 10_000)

    def test_new_user_does_not_store(self) -> None:
        self.service.new_user("A", "B", "a@b.c")

        self.assertEqual(self.service.get_all_users(), [])

    def test_new_user_reports_generation_failure(self) -> None:
        with mock.patch("uuid.uuid4", side_effect=NotImplementedError):
            with self.assertRaises(UserGenerationError):
                UserService.new_user("A", "B", "a@b.c")

    def test_create_and_lookup_delegate_to_repository(self) -> None:
        user = self.service.new_user("Faith", "Ordway", "faith.ordway@godess.com")
        self.service.create_user(user)

        self.assertEqual(self.repository.get_all(), [user])
        self.assertEqual(self.service.get_all_users(), [user])
        self.assertEqual(self.service.get_user_by_id(user.id), user)
        self.assertIsNone(self.service.get_user_by_id(UUID(int=0)))

    def test_register_user_stores_new_user(self) -> None:
        user = self.service.register_user("Ada", "Lovelace", "ada@example.com")

        self.assertEqual(self.repository.get_by_id(user.id), user)

    def test_user_survives_json_round_trip(self) -> None:
        user = self.service.new_user("Olivia", "Ponton", "olivia.ponton@example.com")

        restored = User.model_validate_json(user.model_dump_json())

        self.assertEqual(restored, user)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
