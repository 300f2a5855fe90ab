"""
Booking service: room booking and booking history views.

A booking is one room for one night. The availability check, price lookup,
insert and booking id lookup run in a single transaction, and the
``uq_roombookings_slot`` constraint rejects a concurrent booking of the same
slot that slips past the check.
"""

from datetime import date, datetime
from decimal import Decimal
from functools import wraps
from typing import Optional
import logging

from hotel_client.config.settings import Settings
from hotel_client.core.exceptions import (
    ConstraintViolationError,
    DatabaseError,
    IdentityResolutionError,
)
from hotel_client.db.executor import StatementExecutor
from hotel_client.db.sequences import IdentityResolver, NO_VALUE
from hotel_client.repositories.booking_repository import BookingRepository
from hotel_client.repositories.room_repository import RoomRepository
from hotel_client.schemas.booking import BookingConfirmation
from hotel_client.services.auth.authorization_service import AuthorizationService
from hotel_client.services.base import BaseService, ServiceResult

logger = logging.getLogger(__name__)


def track_performance(operation_name: str):
    """Decorator to log the duration and outcome of a workflow."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = datetime.now()
            result = func(*args, **kwargs)
            duration = (datetime.now() - start_time).total_seconds()
            logger.info(
                f"Operation '{operation_name}' completed in {duration:.3f}s",
                extra={
                    "operation": operation_name,
                    "duration_seconds": duration,
                    "success": result.is_success,
                },
            )
            return result
        return wrapper
    return decorator


class BookingService(BaseService):
    """
    Booking operations.

    Responsibilities:
    - Availability checks and room booking
    - Customer booking history
    - Manager views over a hotel's bookings
    """

    def __init__(
        self,
        executor: StatementExecutor,
        settings: Optional[Settings] = None,
        authorization: Optional[AuthorizationService] = None,
    ):
        super().__init__(executor, settings)
        self.bookings = BookingRepository(executor)
        self.rooms = RoomRepository(executor)
        self.identity = IdentityResolver(executor)
        self.authorization = authorization or AuthorizationService(executor, self.settings)

    # -------------------------------------------------------------------------
    # Booking
    # -------------------------------------------------------------------------

    def is_available(self, hotel_id: int, room_number: int, booking_date: date) -> bool:
        """True when no booking exists for the room on that date."""
        return self.bookings.count_for_slot(hotel_id, room_number, booking_date) == 0

    @track_performance("book_room")
    def book_room(
        self,
        customer_id: int,
        hotel_id: int,
        room_number: int,
        booking_date: date,
    ) -> ServiceResult[BookingConfirmation]:
        """
        Book a room for one night.

        Args:
            customer_id: ID of the logged-in user
            hotel_id: Hotel of the room
            room_number: Room number within the hotel
            booking_date: Night to book

        Returns:
            ServiceResult containing the booking id and the room price
        """
        slot = {"hotel_id": hotel_id, "room_number": room_number, "booking_date": str(booking_date)}
        try:
            with self.transaction():
                if not self.is_available(hotel_id, room_number, booking_date):
                    self._logger.info(
                        f"Room {room_number} of hotel {hotel_id} is taken on {booking_date}",
                        extra={"operation": "book_room", "user_id": customer_id, **slot},
                    )
                    return ServiceResult.conflict(
                        "The selected room is not available. Please try another option.",
                        details=slot,
                    )

                price = self.rooms.get_price(hotel_id, room_number)
                if price is None:
                    return ServiceResult.not_found("Room", f"{hotel_id}/{room_number}")

                self.bookings.create(customer_id, hotel_id, room_number, booking_date)
                booking_id = self.identity.current_value(self.settings.BOOKING_ID_SEQUENCE)
                if booking_id == NO_VALUE:
                    raise IdentityResolutionError(self.settings.BOOKING_ID_SEQUENCE)

        except ConstraintViolationError as e:
            self._logger.warning(
                f"Concurrent booking rejected: {e.message}",
                extra={"operation": "book_room", "user_id": customer_id, **slot},
            )
            return ServiceResult.conflict(
                "The selected room is not available. Please try another option.",
                details=slot,
            )
        except IdentityResolutionError as e:
            return self._identity_failure(e, "booking")
        except DatabaseError as e:
            return self._handle_exception(e, "book room", f"{hotel_id}/{room_number}")

        confirmation = BookingConfirmation(
            booking_id=booking_id,
            customer_id=customer_id,
            hotel_id=hotel_id,
            room_number=room_number,
            booking_date=booking_date,
            price=Decimal(price),
        )
        self._logger.info(
            f"Booking {booking_id} created",
            extra={"operation": "book_room", "user_id": customer_id, **slot},
        )
        return ServiceResult.success(
            confirmation,
            message=f"Your room is now booked for that date! Your total will be: {confirmation.price}",
        )

    # -------------------------------------------------------------------------
    # History views
    # -------------------------------------------------------------------------

    def recent_bookings(self, customer_id: int, limit: Optional[int] = None) -> ServiceResult[int]:
        """Print the customer's most recent bookings, latest date first."""
        limit = limit or self.settings.RECENT_LIMIT
        try:
            shown = self.bookings.print_recent_for_customer(customer_id, limit)
        except DatabaseError as e:
            return self._handle_exception(e, "list recent bookings", customer_id)
        return ServiceResult.success(shown)

    def booking_history(
        self,
        manager_id: int,
        hotel_id: int,
        start: date,
        end: date,
    ) -> ServiceResult[int]:
        """
        Print the bookings of a managed hotel between two dates (inclusive),
        with the customer names.
        """
        if start > end:
            return ServiceResult.validation_failure("Start date is after end date", field="start")
        try:
            rejection = self.authorization.require_hotel_manager(manager_id, hotel_id)
            if rejection is not None:
                return rejection
            shown = self.bookings.print_history_for_hotel(hotel_id, start, end)
        except DatabaseError as e:
            return self._handle_exception(e, "list booking history", hotel_id)
        return ServiceResult.success(shown)

    def regular_customers(
        self,
        manager_id: int,
        hotel_id: int,
        limit: Optional[int] = None,
    ) -> ServiceResult[int]:
        """Print the customers with the most bookings at a managed hotel."""
        limit = limit or self.settings.RECENT_LIMIT
        try:
            rejection = self.authorization.require_hotel_manager(manager_id, hotel_id)
            if rejection is not None:
                return rejection
            shown = self.bookings.print_top_customers(hotel_id, limit)
        except DatabaseError as e:
            return self._handle_exception(e, "list regular customers", hotel_id)
        return ServiceResult.success(shown)
