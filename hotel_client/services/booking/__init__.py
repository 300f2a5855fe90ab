"""
Booking services.
"""

from hotel_client.services.booking.booking_service import BookingService

__all__ = ["BookingService"]
