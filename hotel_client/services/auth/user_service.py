"""
User registration and login.
"""

from typing import Optional

from hotel_client.config.settings import Settings
from hotel_client.core.exceptions import DatabaseError, IdentityResolutionError
from hotel_client.db.executor import StatementExecutor
from hotel_client.db.sequences import IdentityResolver, NO_VALUE
from hotel_client.repositories.user_repository import UserRepository
from hotel_client.schemas.enums import UserRole
from hotel_client.services.base.base_service import BaseService
from hotel_client.services.base.service_result import ServiceResult
from hotel_client.utils.hashing import PasswordHasher


class UserService(BaseService):
    """Creates customer accounts and checks credentials."""

    def __init__(self, executor: StatementExecutor, settings: Optional[Settings] = None):
        super().__init__(executor, settings)
        self.users = UserRepository(executor)
        self.identity = IdentityResolver(executor)

    def create_user(self, name: str, password: str) -> ServiceResult[int]:
        """
        Register a new customer.

        Returns:
            ServiceResult containing the new user id
        """
        name = (name or "").strip()
        if not name:
            return ServiceResult.validation_failure("Name is required", field="name")
        if not password:
            return ServiceResult.validation_failure("Password is required", field="password")

        password_hash = PasswordHasher.hash_password(password, rounds=self.settings.PASSWORD_BCRYPT_ROUNDS)
        try:
            with self.transaction():
                self.users.create(name, password_hash, UserRole.CUSTOMER.value)
                user_id = self.identity.current_value(self.settings.USER_ID_SEQUENCE)
                if user_id == NO_VALUE:
                    raise IdentityResolutionError(self.settings.USER_ID_SEQUENCE)
        except IdentityResolutionError as e:
            return self._identity_failure(e, "user")
        except DatabaseError as e:
            return self._handle_exception(e, "create user", name)

        self._logger.info(
            f"User {user_id} created",
            extra={"operation": "create_user", "user_id": user_id},
        )
        return ServiceResult.success(user_id, message=f"User successfully created with userID = {user_id}")

    def log_in(self, user_id: int, password: str) -> Optional[int]:
        """
        Check credentials.

        Returns:
            The user id when the password matches, else ``None``
        """
        try:
            stored_hash = self.users.get_password_hash(user_id)
        except DatabaseError as e:
            self._handle_exception(e, "log in", user_id)
            return None

        if PasswordHasher.verify_password(password, stored_hash):
            self._logger.info(f"User {user_id} logged in", extra={"operation": "log_in", "user_id": user_id})
            return user_id

        self._logger.warning(f"Failed login for user {user_id}", extra={"operation": "log_in", "user_id": user_id})
        return None
