"""Tests for the Argon2 password hasher."""

import unittest

from todorails.infrastructure.password_hasher import Argon2PasswordHasher


class TestArgon2PasswordHasher(unittest.TestCase):
    """Test cases for Argon2PasswordHasher."""

    def setUp(self):
        """Use the lowest cost settings to keep the suite fast."""
        self.hasher = Argon2PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)

    def test_hash_is_not_clear_text(self):
        """Test that the hash never equals or embeds the password."""
        hashed = self.hasher.hash("s3cret")

        self.assertNotEqual(hashed, "s3cret")
        self.assertNotIn("s3cret", hashed)
        self.assertTrue(hashed.startswith("$argon2id$"))

    def test_hash_is_salted(self):
        """Test that hashing the same password twice gives different strings."""
        self.assertNotEqual(self.hasher.hash("s3cret"), self.hasher.hash("s3cret"))

    def test_verify_accepts_correct_password(self):
        """Test that verify recomputes and matches."""
        hashed = self.hasher.hash("s3cret")

        self.assertTrue(self.hasher.verify("s3cret", hashed))

    def test_verify_rejects_wrong_password(self):
        """Test that a different password does not verify."""
        hashed = self.hasher.hash("s3cret")

        self.assertFalse(self.hasher.verify("S3cret", hashed))

    def test_verify_uses_parameters_embedded_in_hash(self):
        """Test that hashes made with other cost settings still verify."""
        hashed = Argon2PasswordHasher(
            time_cost=2, memory_cost=16, parallelism=2
        ).hash("s3cret")

        self.assertTrue(self.hasher.verify("s3cret", hashed))

    def test_verify_rejects_malformed_hashes(self):
        """Test that garbage input returns False instead of raising."""
        for hashed in (
            "",
            "s3cret",
            "scrypt$16$8$1$c2FsdA==$a2V5",
            "$argon2id$v=19$m=8,t=1,p=1$broken",
        ):
            with self.subTest(hashed=hashed):
                self.assertFalse(self.hasher.verify("s3cret", hashed))


if __name__ == "__main__":
    unittest.main()
