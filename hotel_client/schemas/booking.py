"""Booking schemas."""

from datetime import date as Date
from decimal import Decimal

from pydantic import Field

from hotel_client.schemas.base import BaseSchema

__all__ = ["BookingConfirmation"]


class BookingConfirmation(BaseSchema):
    """Result of a successful room booking."""

    booking_id: int = Field(..., description="Generated booking ID")
    customer_id: int
    hotel_id: int
    room_number: int
    booking_date: Date
    price: Decimal = Field(..., ge=0, description="Price of the room for the night")
