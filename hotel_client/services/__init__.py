"""
Service layer of the hotel client.

Services hold the business rules of the menu workflows and report every
outcome as a ``ServiceResult``.
"""

from hotel_client.services.base import (
    BaseService,
    ServiceResult,
    ServiceError,
    ErrorCode,
    ErrorSeverity,
)
from hotel_client.services.auth import AuthorizationService, UserService
from hotel_client.services.hotel import HotelService
from hotel_client.services.booking import BookingService
from hotel_client.services.room import RoomUpdateService
from hotel_client.services.maintenance import RepairService

__all__ = [
    "BaseService",
    "ServiceResult",
    "ServiceError",
    "ErrorCode",
    "ErrorSeverity",
    "AuthorizationService",
    "UserService",
    "HotelService",
    "BookingService",
    "RoomUpdateService",
    "RepairService",
]
