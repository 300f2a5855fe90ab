import io

import pytest

from hotel_client.cli.input_source import InputSource
from hotel_client.cli.menu import HotelMenu

from tests.conftest import CUSTOMER_ID, MANAGER_ID, PASSWORDS, count_rows


@pytest.fixture
def run_menu(seeded, settings, output):
    def run(*lines):
        source = InputSource(io.StringIO("".join(f"{line}\n" for line in lines)), output)
        HotelMenu(seeded, source, output, settings).run()
        return output.getvalue()

    return run


def test_exit_from_main_menu(run_menu):
    text = run_menu(9)
    assert "1. Create user" in text


def test_end_of_input_ends_menu(run_menu):
    assert "MAIN MENU" in run_menu()


def test_unrecognized_choice(run_menu):
    assert "Unrecognized choice!" in run_menu(5, 9)


def test_create_user(run_menu, seeded):
    text = run_menu(1, "Erin", "erin-pw", 9)
    assert "User successfully created with userID = 5" in text
    assert count_rows(seeded, "users") == 5


def test_failed_login(run_menu):
    text = run_menu(2, CUSTOMER_ID, "wrong", 9)
    assert "Invalid userID or password" in text
    assert "Log out" not in text


def test_customer_books_room(run_menu, seeded):
    text = run_menu(2, CUSTOMER_ID, PASSWORDS[CUSTOMER_ID], 3, 1, 101, "2030-01-01", 20, 9)

    assert "Your room is now booked for that date! Your total will be: 120" in text
    assert "Booking ID: 1" in text
    assert count_rows(seeded, "roombookings") == 1


def test_second_booking_reports_unavailable(run_menu):
    text = run_menu(
        2, CUSTOMER_ID, PASSWORDS[CUSTOMER_ID],
        3, 1, 101, "2030-01-01",
        3, 1, 101, "2030-01-01",
        20, 9,
    )
    assert "The selected room is not available. Please try another option." in text


def test_customer_cannot_update_room(run_menu):
    text = run_menu(2, CUSTOMER_ID, PASSWORDS[CUSTOMER_ID], 5, 1, 101, 20, 9)
    assert "You are not an authorized manager" in text
    assert "Update Price" not in text


def test_manager_updates_room(run_menu, seeded):
    text = run_menu(2, MANAGER_ID, PASSWORDS[MANAGER_ID], 5, 1, 102, 95, "", 6, 20, 9)

    assert "Room information updated" in text
    assert "HotelID: 1 Room#: 102 Timestamp:" in text
    assert seeded.execute_materialize("SELECT price, imageurl FROM rooms WHERE hotelid = 1 AND roomnumber = 102") == [
        ["95", None]
    ]


def test_view_hotels(run_menu):
    text = run_menu(2, CUSTOMER_ID, PASSWORDS[CUSTOMER_ID], 1, 10, 10, 20, 9)
    assert "1\tSeaside\t0.00" in text
    assert "Mountain" not in text


def test_manager_places_repair_request(run_menu, seeded):
    text = run_menu(2, MANAGER_ID, PASSWORDS[MANAGER_ID], 9, 1, 101, 1, 10, 20, 9)

    assert "successfully created request with ID#1" in text
    assert "repairid\tcompanyid\thotelid\troomnumber\trepairdate" in text
    assert count_rows(seeded, "roomrepairrequests") == 1
