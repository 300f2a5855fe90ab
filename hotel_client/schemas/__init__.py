"""Schemas returned by the services."""

from hotel_client.schemas.enums import UserRole
from hotel_client.schemas.hotel import NearbyHotel
from hotel_client.schemas.booking import BookingConfirmation
from hotel_client.schemas.room import RoomInfo, RoomUpdate, RoomUpdateEntry
from hotel_client.schemas.repair import RepairRequest

__all__ = [
    "UserRole",
    "NearbyHotel",
    "BookingConfirmation",
    "RoomInfo",
    "RoomUpdate",
    "RoomUpdateEntry",
    "RepairRequest",
]
