"""Hotel schemas."""

from pydantic import Field

from hotel_client.schemas.base import BaseSchema

__all__ = ["NearbyHotel"]


class NearbyHotel(BaseSchema):
    """Hotel found by a distance search."""

    hotel_id: int = Field(..., description="Hotel ID")
    hotel_name: str = Field(..., description="Hotel name")
    latitude: float
    longitude: float
    distance: float = Field(..., ge=0, description="Euclidean distance from the search point")
