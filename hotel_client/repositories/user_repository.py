"""User repository."""

from typing import Optional

from hotel_client.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository):
    """Statements on the ``users`` table."""

    def create(self, name: str, password_hash: str, user_type: str) -> int:
        return self.executor.execute_update(
            "INSERT INTO users (name, password, usertype) VALUES (:name, :password, :usertype)",
            {"name": name, "password": password_hash, "usertype": user_type},
        )

    def get_password_hash(self, user_id: int) -> Optional[str]:
        rows = self.executor.execute_materialize(
            "SELECT password FROM users WHERE userid = :user_id",
            {"user_id": user_id},
        )
        return self._first_value(rows)
