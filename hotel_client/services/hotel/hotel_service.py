"""
Hotel search and room availability.
"""

from datetime import date
from typing import List, Optional, Union

from hotel_client.config.settings import Settings
from hotel_client.core.exceptions import DatabaseError
from hotel_client.db.executor import StatementExecutor
from hotel_client.repositories.hotel_repository import HotelRepository
from hotel_client.repositories.room_repository import RoomRepository
from hotel_client.schemas.hotel import NearbyHotel
from hotel_client.services.base.base_service import BaseService
from hotel_client.services.base.service_result import ServiceResult
from hotel_client.utils.geo_utils import calculate_distance


class HotelService(BaseService):
    """Read-only views over hotels and rooms, open to every user."""

    def __init__(self, executor: StatementExecutor, settings: Optional[Settings] = None):
        super().__init__(executor, settings)
        self.hotels = HotelRepository(executor)
        self.rooms = RoomRepository(executor)

    def hotels_within(
        self,
        latitude: float,
        longitude: float,
        radius: Optional[float] = None,
    ) -> ServiceResult[List[NearbyHotel]]:
        """
        Hotels whose Euclidean distance from the point is at most ``radius``.

        Args:
            latitude: Latitude of the search point
            longitude: Longitude of the search point
            radius: Search radius (defaults to ``SEARCH_RADIUS``)

        Returns:
            ServiceResult containing matching hotels in stored order
        """
        if radius is None:
            radius = self.settings.SEARCH_RADIUS
        if radius < 0:
            return ServiceResult.validation_failure("Radius must not be negative", field="radius")

        try:
            rows = self.hotels.list_locations()
        except DatabaseError as e:
            return self._handle_exception(e, "search hotels", (latitude, longitude))

        nearby = []
        for hotel_id, hotel_name, hotel_lat, hotel_long in rows:
            distance = calculate_distance(latitude, longitude, float(hotel_lat), float(hotel_long))
            if distance <= radius:
                nearby.append(
                    NearbyHotel(
                        hotel_id=int(hotel_id),
                        hotel_name=hotel_name,
                        latitude=float(hotel_lat),
                        longitude=float(hotel_long),
                        distance=distance,
                    )
                )

        self._logger.debug(f"{len(nearby)} hotel(s) within {radius} of ({latitude}, {longitude})")
        return ServiceResult.success(nearby)

    def available_rooms(self, hotel_id: int, booking_date: Union[date, str]) -> ServiceResult[int]:
        """
        Print the rooms of a hotel that have no booking on the date.

        Returns:
            ServiceResult containing the number of rooms printed
        """
        try:
            shown = self.rooms.print_available(hotel_id, booking_date)
        except DatabaseError as e:
            return self._handle_exception(e, "list available rooms", hotel_id)
        return ServiceResult.success(shown)
