"""
Interactive menus.

The menus only collect input and print results; every rule lives in the
services. A failed result is printed and the loop continues.
"""

import logging
import sys
from typing import Optional, TextIO

from hotel_client.config.settings import Settings, settings as default_settings
from hotel_client.db.executor import StatementExecutor
from hotel_client.cli.input_source import InputSource
from hotel_client.services import (
    AuthorizationService,
    BookingService,
    HotelService,
    RepairService,
    RoomUpdateService,
    ServiceResult,
    UserService,
)

logger = logging.getLogger(__name__)

MAIN_MENU = """MAIN MENU
---------
1. Create user
2. Log in
9. < EXIT"""

USER_MENU = """MAIN MENU
---------
1. View Hotels within {radius:g} units
2. View Rooms
3. Book a Room
4. View recent booking history
5. Update Room Information
6. View {limit} recent Room Updates Info
7. View booking history of the hotel
8. View {limit} regular Customers
9. Place room repair Request to a company
10. View room repair Requests history
.........................
20. Log out"""


class HotelMenu:
    """Main menu and logged-in user menu over one executor."""

    def __init__(
        self,
        executor: StatementExecutor,
        input_source: InputSource,
        out: Optional[TextIO] = None,
        settings: Optional[Settings] = None,
    ):
        self.input = input_source
        self.out = out or sys.stdout
        self.settings = settings or default_settings

        authorization = AuthorizationService(executor, self.settings)
        self.users = UserService(executor, self.settings)
        self.hotels = HotelService(executor, self.settings)
        self.bookings = BookingService(executor, self.settings, authorization)
        self.room_updates = RoomUpdateService(executor, self.settings, authorization)
        self.repairs = RepairService(executor, self.settings, authorization)

        self.user_actions = {
            1: self.view_hotels,
            2: self.view_rooms,
            3: self.book_room,
            4: self.view_recent_bookings,
            5: self.update_room,
            6: self.view_recent_updates,
            7: self.view_booking_history,
            8: self.view_regular_customers,
            9: self.place_repair_request,
            10: self.view_repair_history,
        }

    def _print(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.out)

    def _report(self, result: ServiceResult) -> bool:
        """Print the message of a result; True when it succeeded."""
        if not result.is_success:
            self._print(result.message or "Operation failed")
            return False
        if result.message:
            self._print(result.message)
        return True

    # ------------------------------------------------------------------ #
    # Loops
    # ------------------------------------------------------------------ #

    def run(self) -> None:
        """Run the main menu until the user exits or input ends."""
        try:
            while True:
                self._print(MAIN_MENU)
                choice = self.input.read_choice()
                if choice == 1:
                    self.create_user()
                elif choice == 2:
                    user_id = self.log_in()
                    if user_id is not None:
                        self.user_menu(user_id)
                elif choice == 9:
                    return
                else:
                    self._print("Unrecognized choice!")
        except EOFError:
            logger.info("Input ended, leaving menu")

    def user_menu(self, user_id: int) -> None:
        """Run the logged-in menu until the user logs out."""
        menu = USER_MENU.format(radius=self.settings.SEARCH_RADIUS, limit=self.settings.RECENT_LIMIT)
        while True:
            self._print(menu)
            choice = self.input.read_choice()
            if choice == 20:
                return
            action = self.user_actions.get(choice)
            if action is None:
                self._print("Unrecognized choice!")
                continue
            action(user_id)

    # ------------------------------------------------------------------ #
    # Account actions
    # ------------------------------------------------------------------ #

    def create_user(self) -> None:
        name = self.input.read_line("\tEnter name: ")
        password = self.input.read_line("\tEnter password: ")
        self._report(self.users.create_user(name, password))

    def log_in(self) -> Optional[int]:
        user_id = self.input.read_int("\tEnter userID: ")
        password = self.input.read_line("\tEnter password: ")
        logged_in = self.users.log_in(user_id, password)
        if logged_in is None:
            self._print("Invalid userID or password")
        return logged_in

    # ------------------------------------------------------------------ #
    # User actions
    # ------------------------------------------------------------------ #

    def view_hotels(self, user_id: int) -> None:
        latitude = self.input.read_float("\tEnter Latitude: ")
        longitude = self.input.read_float("\tEnter Longitude: ")
        result = self.hotels.hotels_within(latitude, longitude)
        if self._report(result):
            for hotel in result.data:
                self._print(f"{hotel.hotel_id}\t{hotel.hotel_name}\t{hotel.distance:.2f}")
            if not result.data:
                self._print("No hotels found")

    def view_rooms(self, user_id: int) -> None:
        hotel_id = self.input.read_int("\tEnter Hotel ID: ")
        day = self.input.read_date("\tEnter Date (YYYY-MM-DD): ")
        self._print(f"\tRooms available on {day}")
        self._report(self.hotels.available_rooms(hotel_id, day))

    def book_room(self, user_id: int) -> None:
        hotel_id = self.input.read_int("\tInput valid hotel ID: ")
        room_number = self.input.read_int("\tInput valid room number: ")
        day = self.input.read_date("\tInput valid date: ")
        result = self.bookings.book_room(user_id, hotel_id, room_number, day)
        if self._report(result):
            self._print(f"Booking ID: {result.data.booking_id}")

    def view_recent_bookings(self, user_id: int) -> None:
        self._print("\tNow browsing booking history:")
        result = self.bookings.recent_bookings(user_id)
        if self._report(result) and result.data == 0:
            self._print("No bookings found")

    def update_room(self, user_id: int) -> None:
        hotel_id = self.input.read_int("\tEnter hotelID: ")
        room_number = self.input.read_int("\tEnter roomNumber: ")
        current = self.room_updates.get_room(user_id, hotel_id, room_number)
        if not self._report(current):
            return
        self._print(f"\tCurrent price: {current.data.price}  imageURL: {current.data.image_url or ''}")

        price = self.input.read_float("\tUpdate Price: ")
        image_url = self.input.read_optional_line("\tUpdate imageURL: ")
        result = self.room_updates.update_room(user_id, hotel_id, room_number, price, image_url)
        if self._report(result):
            room = result.data
            self._print(f"\tPrice: {room.price}  imageURL: {room.image_url or ''}  Updated on: {room.updated_on}")

    def view_recent_updates(self, user_id: int) -> None:
        result = self.room_updates.recent_updates(user_id)
        if self._report(result):
            for entry in result.data:
                self._print(
                    f"HotelID: {entry.hotel_id} Room#: {entry.room_number} Timestamp: {entry.updated_on}"
                )
            if not result.data:
                self._print("No room updates found")

    def view_booking_history(self, user_id: int) -> None:
        hotel_id = self.input.read_int("\tEnter hotelID: ")
        start = self.input.read_date("\tEnter start date: ")
        end = self.input.read_date("\tEnter end date: ")
        self._report(self.bookings.booking_history(user_id, hotel_id, start, end))

    def view_regular_customers(self, user_id: int) -> None:
        hotel_id = self.input.read_int("\tEnter hotelID: ")
        self._report(self.bookings.regular_customers(user_id, hotel_id))

    def place_repair_request(self, user_id: int) -> None:
        hotel_id = self.input.read_int("\tEnter hotelID: ")
        room_number = self.input.read_int("\tEnter roomNumber: ")
        company_id = self.input.read_int("\tEnter companyID: ")
        self._report(self.repairs.place_repair_request(user_id, hotel_id, room_number, company_id))

    def view_repair_history(self, user_id: int) -> None:
        self._report(self.repairs.repair_history(user_id))
