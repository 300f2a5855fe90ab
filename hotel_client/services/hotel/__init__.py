"""
Hotel search services.
"""

from hotel_client.services.hotel.hotel_service import HotelService

__all__ = ["HotelService"]
