"""Room repository."""

from datetime import date
from decimal import Decimal
from typing import Optional, Union

from hotel_client.db.executor import Row
from hotel_client.repositories.base_repository import BaseRepository


class RoomRepository(BaseRepository):
    """Statements on the ``rooms`` table."""

    def get(self, hotel_id: int, room_number: int) -> Optional[Row]:
        """``[price, imageurl]`` of the room, or ``None``."""
        rows = self.executor.execute_materialize(
            "SELECT price, imageurl FROM rooms WHERE hotelid = :hotel_id AND roomnumber = :room_number",
            {"hotel_id": hotel_id, "room_number": room_number},
        )
        return rows[0] if rows else None

    def get_price(self, hotel_id: int, room_number: int) -> Optional[str]:
        rows = self.executor.execute_materialize(
            "SELECT price FROM rooms WHERE hotelid = :hotel_id AND roomnumber = :room_number",
            {"hotel_id": hotel_id, "room_number": room_number},
        )
        return self._first_value(rows)

    def update(
        self,
        hotel_id: int,
        room_number: int,
        price: Union[Decimal, int, float],
        image_url: Optional[str],
    ) -> int:
        return self.executor.execute_update(
            "UPDATE rooms SET price = :price, imageurl = :image_url "
            "WHERE hotelid = :hotel_id AND roomnumber = :room_number",
            {
                "price": str(price),
                "image_url": image_url,
                "hotel_id": hotel_id,
                "room_number": room_number,
            },
        )

    def print_available(self, hotel_id: int, booking_date: Union[date, str]) -> int:
        """Print rooms of the hotel without a booking on the date."""
        return self.executor.execute_and_print(
            "SELECT roomnumber, price FROM rooms "
            "WHERE hotelid = :hotel_id AND roomnumber NOT IN ("
            "SELECT roomnumber FROM roombookings "
            "WHERE hotelid = :hotel_id AND bookingdate = :booking_date) "
            "ORDER BY roomnumber",
            {"hotel_id": hotel_id, "booking_date": str(booking_date)},
        )
