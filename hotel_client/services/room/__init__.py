"""
Room update services.
"""

from hotel_client.services.room.room_update_service import RoomUpdateService

__all__ = ["RoomUpdateService"]
