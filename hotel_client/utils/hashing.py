"""
Password hashing utilities for the hotel client
"""

import bcrypt
from typing import Optional


class PasswordHasher:
    """Secure password hashing utilities"""

    DEFAULT_ROUNDS = 12

    @classmethod
    def hash_password(cls, password: str, rounds: Optional[int] = None) -> str:
        """Hash password using bcrypt"""
        if rounds is None:
            rounds = cls.DEFAULT_ROUNDS

        salt = bcrypt.gensalt(rounds=rounds)
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')

    @classmethod
    def verify_password(cls, password: str, hashed_password: Optional[str]) -> bool:
        """
        Verify password against a stored bcrypt hash.

        A missing or malformed stored hash never verifies.
        """
        if not hashed_password:
            return False
        try:
            return bcrypt.checkpw(password.encode('utf-8'), hashed_password.encode('utf-8'))
        except ValueError:
            return False
