"""
Password Hasher
===============

bcrypt hashing for user account credentials.
"""
import bcrypt

# bcrypt ignores everything past 72 bytes; newer releases reject longer input
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


class PasswordHasher:
    """Hashes and verifies passwords with bcrypt."""

    def __init__(self, rounds: int = 12):
        """
        Args:
            rounds: bcrypt cost factor (4-31)
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a plain-text password. The salt is embedded in the result."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        """Check a plain-text password against a stored hash."""
        return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
