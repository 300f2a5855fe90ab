from decimal import Decimal

import pytest

from hotel_client.services.base.service_result import ErrorCode
from hotel_client.services.room.room_update_service import RoomUpdateService

from tests.conftest import CUSTOMER_ID, MANAGER_ID, OTHER_MANAGER_ID, count_rows


@pytest.fixture
def room_updates(seeded, settings):
    return RoomUpdateService(seeded, settings)


def _price(executor, hotel_id, room_number):
    rows = executor.execute_materialize(
        "SELECT price FROM rooms WHERE hotelid = :h AND roomnumber = :r",
        {"h": hotel_id, "r": room_number},
    )
    return Decimal(rows[0][0])


def test_get_room(room_updates):
    room = room_updates.get_room(MANAGER_ID, 1, 101).unwrap()
    assert room.price == Decimal("120")
    assert room.image_url == "http://img.example/101.jpg"


def test_get_room_not_found(room_updates):
    assert room_updates.get_room(MANAGER_ID, 1, 999).code == ErrorCode.NOT_FOUND


def test_update_room(room_updates, seeded):
    result = room_updates.update_room(MANAGER_ID, 1, 102, 95, "http://img.example/102.jpg")

    assert result.is_success
    room = result.data
    assert room.price == Decimal("95")
    assert room.image_url == "http://img.example/102.jpg"
    assert room.updated_on
    assert _price(seeded, 1, 102) == Decimal("95")
    assert count_rows(seeded, "roomupdateslog") == 1


def test_repeated_update_keeps_one_log_row(room_updates, seeded):
    room_updates.update_room(MANAGER_ID, 1, 102, 95, None)
    seeded.execute_update("UPDATE roomupdateslog SET updatedon = '2000-01-01 00:00:00'")

    result = room_updates.update_room(MANAGER_ID, 1, 102, 99, None)

    assert result.data.updated_on > "2000-01-01 00:00:00"
    assert count_rows(seeded, "roomupdateslog") == 1
    assert seeded.execute_materialize("SELECT managerid, hotelid, roomnumber FROM roomupdateslog") == [
        ["1", "1", "102"]
    ]


def test_back_to_back_updates_advance_timestamp(room_updates, seeded):
    first = room_updates.update_room(MANAGER_ID, 1, 102, 95, None)
    second = room_updates.update_room(MANAGER_ID, 1, 102, 96, None)

    assert first.success and second.success
    assert second.data.updated_on > first.data.updated_on
    assert count_rows(seeded, "roomupdateslog") == 1


def test_update_by_non_manager_changes_nothing(room_updates, seeded):
    result = room_updates.update_room(CUSTOMER_ID, 1, 101, 1, None)

    assert result.code == ErrorCode.UNAUTHORIZED
    assert _price(seeded, 1, 101) == Decimal("120")
    assert count_rows(seeded, "roomupdateslog") == 0


def test_update_by_manager_of_other_hotel_changes_nothing(room_updates, seeded):
    result = room_updates.update_room(OTHER_MANAGER_ID, 1, 101, 1, None)

    assert result.code == ErrorCode.INSUFFICIENT_PERMISSIONS
    assert _price(seeded, 1, 101) == Decimal("120")
    assert count_rows(seeded, "roomupdateslog") == 0


def test_update_missing_room(room_updates, seeded):
    assert room_updates.update_room(MANAGER_ID, 1, 999, 10, None).code == ErrorCode.NOT_FOUND
    assert count_rows(seeded, "roomupdateslog") == 0


@pytest.mark.parametrize("price", [-5, "cheap"])
def test_update_rejects_invalid_price(room_updates, price):
    assert room_updates.update_room(MANAGER_ID, 1, 101, price, None).code == ErrorCode.VALIDATION_ERROR


def test_recent_updates_newest_first(room_updates, seeded):
    room_updates.update_room(MANAGER_ID, 1, 101, 130, None)
    room_updates.update_room(MANAGER_ID, 2, 201, 210, None)
    seeded.execute_update("UPDATE roomupdateslog SET updatedon = '2020-01-01 00:00:00' WHERE hotelid = 1")
    seeded.execute_update("UPDATE roomupdateslog SET updatedon = '2021-01-01 00:00:00' WHERE hotelid = 2")

    entries = room_updates.recent_updates(MANAGER_ID).unwrap()

    assert [(e.hotel_id, e.room_number) for e in entries] == [(2, 201), (1, 101)]
    assert room_updates.recent_updates(OTHER_MANAGER_ID).unwrap() == []
