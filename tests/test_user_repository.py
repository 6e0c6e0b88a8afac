"""Tests for the User repository over an in-memory key-value store."""

import unittest

from todorails.domain.entities import User
from todorails.domain.errors import DuplicateEntityError, StorageError
from todorails.infrastructure.user_repository_impl import UserRepositoryImpl

from tests.fixtures import FailOnceKeyValueStore, InMemoryKeyValueStore


class TestUserRepositoryImpl(unittest.IsolatedAsyncioTestCase):
    """Test cases for UserRepositoryImpl."""

    def setUp(self):
        """Set up a fresh store and repository."""
        self.store = InMemoryKeyValueStore()
        self.repository = UserRepositoryImpl(self.store)
        self.user = User(username="jdoe", email="john.doe@example.com", password="h1")

    async def test_save_and_lookup(self):
        """Test that a saved user is reachable by id, username and email."""
        saved = await self.repository.save(self.user)

        self.assertEqual(saved.id, 1)
        self.assertEqual(await self.repository.get_by_id(1), saved)
        self.assertEqual(await self.repository.get_by_username("jdoe"), saved)
        self.assertEqual(
            await self.repository.get_by_email("JOHN.DOE@example.com"), saved
        )

    async def test_lookups_return_none_when_missing(self):
        """Test that unknown keys yield None."""
        self.assertIsNone(await self.repository.get_by_id(5))
        self.assertIsNone(await self.repository.get_by_username("nobody"))
        self.assertIsNone(await self.repository.get_by_email("nobody@example.com"))

    async def test_duplicate_username_raises_error(self):
        """Test that the username index rejects a second owner."""
        await self.repository.save(self.user)

        with self.assertRaises(DuplicateEntityError) as context:
            await self.repository.save(
                User(username="jdoe", email="other@example.com", password="h2")
            )

        self.assertEqual(str(context.exception), "Username already exists")
        self.assertIsNone(await self.repository.get_by_email("other@example.com"))

    async def test_duplicate_email_releases_username_claim(self):
        """Test that a failed email claim leaves the new username free."""
        await self.repository.save(self.user)

        with self.assertRaises(DuplicateEntityError) as context:
            await self.repository.save(
                User(username="asmith", email="john.doe@example.com", password="h2")
            )

        self.assertEqual(str(context.exception), "Email already exists")
        self.assertIsNone(await self.repository.get_by_username("asmith"))
        self.assertEqual(len(await self.repository.get_all()), 1)

    async def test_update_email_moves_index(self):
        """Test that changing the email frees the previous address."""
        saved = await self.repository.save(self.user)

        await self.repository.save(
            saved.model_copy(update={"email": "jane.doe@example.com"})
        )

        self.assertIsNone(await self.repository.get_by_email("john.doe@example.com"))
        moved = await self.repository.get_by_email("jane.doe@example.com")
        self.assertEqual(moved.id, saved.id)

    async def test_update_onto_taken_email_raises_error(self):
        """Test that an update cannot take another user's email."""
        await self.repository.save(self.user)
        other = await self.repository.save(
            User(username="asmith", email="a.smith@example.com", password="h2")
        )

        with self.assertRaises(DuplicateEntityError):
            await self.repository.save(
                other.model_copy(update={"email": "john.doe@example.com"})
            )

        self.assertEqual(
            (await self.repository.get_by_email("john.doe@example.com")).username,
            "jdoe",
        )

    async def test_get_all(self):
        """Test that get_all returns users in insertion order."""
        first = await self.repository.save(self.user)
        second = await self.repository.save(
            User(username="asmith", email="a.smith@example.com", password="h2")
        )

        self.assertEqual(await self.repository.get_all(), [first, second])

    async def test_delete_removes_record_and_indexes(self):
        """Test that delete clears the record and both unique indexes."""
        saved = await self.repository.save(self.user)

        await self.repository.delete(saved)

        self.assertEqual(await self.repository.get_all(), [])
        self.assertIsNone(await self.repository.get_by_username("jdoe"))
        self.assertIsNone(await self.repository.get_by_email("john.doe@example.com"))
        self.assertEqual(self.store.keys(), ["users:next_id"])

    async def test_failed_insert_releases_username_and_email(self):
        """Test that a write failure after the index claims leaves no trace."""
        store = FailOnceKeyValueStore(fail_on="set")
        repository = UserRepositoryImpl(store)
        store.armed = True

        with self.assertRaises(StorageError):
            await repository.save(self.user)

        self.assertEqual(store.keys(), ["users:next_id"])
        self.assertIsNone(await repository.get_by_username("jdoe"))
        self.assertIsNone(await repository.get_by_email("john.doe@example.com"))
        saved = await repository.save(self.user)
        self.assertEqual(await repository.get_all(), [saved])

    async def test_failed_email_change_keeps_previous_record(self):
        """Test that a failed update restores the old record and indexes."""
        store = FailOnceKeyValueStore(fail_on="set")
        repository = UserRepositoryImpl(store)
        saved = await repository.save(self.user)
        store.armed = True

        with self.assertRaises(StorageError):
            await repository.save(saved.model_copy(update={"email": "new@example.com"}))

        self.assertEqual(await repository.get_by_id(saved.id), saved)
        self.assertEqual(await repository.get_by_email("john.doe@example.com"), saved)
        self.assertIsNone(await repository.get_by_email("new@example.com"))
        self.assertNotIn("user:email:new@example.com", store.keys())


if __name__ == "__main__":
    unittest.main()
