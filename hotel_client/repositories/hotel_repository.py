"""Hotel repository."""

from typing import List

from hotel_client.db.executor import Row, column_values
from hotel_client.repositories.base_repository import BaseRepository


class HotelRepository(BaseRepository):
    """Statements on the ``hotel`` table."""

    def count_distinct_managers(self, user_id: int) -> int:
        """1 when the user manages at least one hotel, else 0."""
        return self.executor.execute_count(
            "SELECT DISTINCT manageruserid FROM hotel WHERE manageruserid = :user_id",
            {"user_id": user_id},
        )

    def count_managed(self, user_id: int, hotel_id: int) -> int:
        return self.executor.execute_count(
            "SELECT hotelid FROM hotel WHERE manageruserid = :user_id AND hotelid = :hotel_id",
            {"user_id": user_id, "hotel_id": hotel_id},
        )

    def managed_hotel_ids(self, user_id: int) -> List[int]:
        rows = self.executor.execute_materialize(
            "SELECT hotelid FROM hotel WHERE manageruserid = :user_id ORDER BY hotelid",
            {"user_id": user_id},
        )
        return [int(value) for value in column_values(rows)]

    def list_locations(self) -> List[Row]:
        """``[hotelid, hotelname, latitude, longitude]`` for every hotel."""
        return self.executor.execute_materialize(
            "SELECT hotelid, hotelname, latitude, longitude FROM hotel ORDER BY hotelid"
        )
