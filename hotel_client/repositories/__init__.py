"""
Repositories package.

Exports all repository classes.
"""

from hotel_client.repositories.base_repository import BaseRepository
from hotel_client.repositories.user_repository import UserRepository
from hotel_client.repositories.hotel_repository import HotelRepository
from hotel_client.repositories.room_repository import RoomRepository
from hotel_client.repositories.booking_repository import BookingRepository
from hotel_client.repositories.room_update_log_repository import RoomUpdateLogRepository
from hotel_client.repositories.repair_repository import RepairRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "HotelRepository",
    "RoomRepository",
    "BookingRepository",
    "RoomUpdateLogRepository",
    "RepairRepository",
]
