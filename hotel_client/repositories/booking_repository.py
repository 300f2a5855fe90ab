"""Room booking repository."""

from datetime import date
from typing import Union

from hotel_client.repositories.base_repository import BaseRepository

DateLike = Union[date, str]


class BookingRepository(BaseRepository):
    """Statements on the ``roombookings`` table."""

    def count_for_slot(self, hotel_id: int, room_number: int, booking_date: DateLike) -> int:
        return self.executor.execute_count(
            "SELECT bookingid FROM roombookings "
            "WHERE bookingdate = :booking_date AND hotelid = :hotel_id AND roomnumber = :room_number",
            {"booking_date": str(booking_date), "hotel_id": hotel_id, "room_number": room_number},
        )

    def create(self, customer_id: int, hotel_id: int, room_number: int, booking_date: DateLike) -> int:
        return self.executor.execute_update(
            "INSERT INTO roombookings (bookingdate, hotelid, roomnumber, customerid) "
            "VALUES (:booking_date, :hotel_id, :room_number, :customer_id)",
            {
                "booking_date": str(booking_date),
                "hotel_id": hotel_id,
                "room_number": room_number,
                "customer_id": customer_id,
            },
        )

    def print_recent_for_customer(self, customer_id: int, limit: int) -> int:
        return self.executor.execute_and_print(
            "SELECT bookingid, hotelid, roomnumber, bookingdate FROM roombookings "
            "WHERE customerid = :customer_id ORDER BY bookingdate DESC LIMIT :limit",
            {"customer_id": customer_id, "limit": limit},
        )

    def print_history_for_hotel(self, hotel_id: int, start: DateLike, end: DateLike) -> int:
        return self.executor.execute_and_print(
            "SELECT b.bookingid, b.hotelid, b.roomnumber, b.bookingdate, u.name "
            "FROM roombookings b JOIN users u ON b.customerid = u.userid "
            "WHERE b.hotelid = :hotel_id AND b.bookingdate BETWEEN :start AND :end "
            "ORDER BY b.bookingdate, b.bookingid",
            {"hotel_id": hotel_id, "start": str(start), "end": str(end)},
        )

    def print_top_customers(self, hotel_id: int, limit: int) -> int:
        return self.executor.execute_and_print(
            "SELECT customerid, COUNT(bookingid) AS bookings FROM roombookings "
            "WHERE hotelid = :hotel_id GROUP BY customerid "
            "ORDER BY COUNT(bookingid) DESC, customerid LIMIT :limit",
            {"hotel_id": hotel_id, "limit": limit},
        )
