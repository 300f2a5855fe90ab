"""
Authorization gate for manager-only workflows.

A user is a manager because at least one hotel names them as its manager;
there is no separate role flag to trust. Every hotel-scoped workflow checks
the exact (manager, hotel) pair.
"""

from typing import List, Optional

from hotel_client.db.executor import StatementExecutor
from hotel_client.config.settings import Settings
from hotel_client.repositories.hotel_repository import HotelRepository
from hotel_client.schemas.enums import UserRole
from hotel_client.services.base.base_service import BaseService
from hotel_client.services.base.service_result import ServiceResult, ErrorCode


class AuthorizationService(BaseService):
    """
    Answers manager questions from the ``hotel`` table.

    The checks raise ``ExecutionError`` on database failure; callers convert
    it at their own boundary.
    """

    def __init__(self, executor: StatementExecutor, settings: Optional[Settings] = None):
        super().__init__(executor, settings)
        self.hotels = HotelRepository(executor)

    def is_manager(self, user_id: int) -> bool:
        """True when the user manages at least one hotel."""
        return self.hotels.count_distinct_managers(user_id) > 0

    def manages_hotel(self, user_id: int, hotel_id: int) -> bool:
        """True when the hotel row names this user as its manager."""
        return self.hotels.count_managed(user_id, hotel_id) > 0

    def role_of(self, user_id: int) -> UserRole:
        return UserRole.MANAGER if self.is_manager(user_id) else UserRole.CUSTOMER

    def managed_hotel_ids(self, user_id: int) -> List[int]:
        return self.hotels.managed_hotel_ids(user_id)

    def require_manager(self, user_id: int) -> Optional[ServiceResult]:
        """``None`` when the user manages any hotel, else a failure result."""
        if self.is_manager(user_id):
            return None
        self._logger.warning(
            f"User {user_id} is not a manager",
            extra={"operation": "require_manager", "user_id": user_id},
        )
        return ServiceResult.unauthorized("You are not an authorized manager")

    def require_hotel_manager(self, user_id: int, hotel_id: int) -> Optional[ServiceResult]:
        """
        Gate a hotel-scoped operation.

        Returns:
            ``None`` when allowed, otherwise a failure result:
            ``UNAUTHORIZED`` when the user manages no hotel at all,
            ``INSUFFICIENT_PERMISSIONS`` when they manage other hotels only
        """
        if self.manages_hotel(user_id, hotel_id):
            return None

        extra = {"operation": "require_hotel_manager", "user_id": user_id, "hotel_id": hotel_id}
        if not self.is_manager(user_id):
            self._logger.warning(f"User {user_id} is not a manager", extra=extra)
            return ServiceResult.unauthorized("You are not an authorized manager")

        self._logger.warning(f"User {user_id} does not manage hotel {hotel_id}", extra=extra)
        return ServiceResult.unauthorized(
            "You do not manage this hotel",
            code=ErrorCode.INSUFFICIENT_PERMISSIONS,
            details={"hotel_id": hotel_id},
        )
