"""Room and room update schemas."""

from decimal import Decimal
from typing import Optional

from pydantic import Field

from hotel_client.schemas.base import BaseSchema

__all__ = ["RoomInfo", "RoomUpdate", "RoomUpdateEntry"]


class RoomInfo(BaseSchema):
    """Current price and image of a room."""

    hotel_id: int
    room_number: int
    price: Decimal = Field(..., ge=0)
    image_url: Optional[str] = None


class RoomUpdate(RoomInfo):
    """Room state after an update, with the logged update time."""

    manager_id: int
    updated_on: str = Field(..., description="Update timestamp as stored by the database")


class RoomUpdateEntry(BaseSchema):
    """One row of a manager's room update log."""

    update_number: int
    hotel_id: int
    room_number: int
    updated_on: str
