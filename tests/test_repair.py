import pytest

from hotel_client.db.sequences import NO_VALUE
from hotel_client.services.base.service_result import ErrorCode
from hotel_client.services.maintenance.repair_service import RepairService

from tests.conftest import CUSTOMER_ID, MANAGER_ID, OTHER_MANAGER_ID, count_rows


@pytest.fixture
def repairs(seeded, settings):
    return RepairService(seeded, settings)


def test_place_repair_request(repairs, seeded):
    result = repairs.place_repair_request(MANAGER_ID, 1, 101, 1)

    assert result.is_success
    assert result.data.ticket_id == 1
    assert seeded.execute_materialize("SELECT repairid, companyid, hotelid, roomnumber FROM roomrepairs") == [
        ["1", "1", "1", "101"]
    ]
    assert seeded.execute_materialize("SELECT managerid, repairid FROM roomrepairrequests") == [["1", "1"]]


def test_request_links_to_its_own_ticket(repairs, seeded):
    repairs.place_repair_request(MANAGER_ID, 1, 101, 1)
    second = repairs.place_repair_request(MANAGER_ID, 2, 201, 1).unwrap()

    assert second.ticket_id == 2
    assert seeded.execute_materialize(
        "SELECT repairid FROM roomrepairrequests ORDER BY requestnumber"
    ) == [["1"], ["2"]]


@pytest.mark.parametrize(
    "user_id, code",
    [
        (CUSTOMER_ID, ErrorCode.UNAUTHORIZED),
        (OTHER_MANAGER_ID, ErrorCode.INSUFFICIENT_PERMISSIONS),
    ],
)
def test_repair_request_requires_hotel_manager(repairs, seeded, user_id, code):
    assert repairs.place_repair_request(user_id, 1, 101, 1).code == code
    assert count_rows(seeded, "roomrepairs") == 0
    assert count_rows(seeded, "roomrepairrequests") == 0


def test_repair_request_for_missing_room(repairs, seeded):
    assert repairs.place_repair_request(MANAGER_ID, 1, 999, 1).code == ErrorCode.NOT_FOUND
    assert count_rows(seeded, "roomrepairs") == 0


def test_unresolved_ticket_id_rolls_back(repairs, seeded, monkeypatch):
    monkeypatch.setattr(repairs.identity, "current_value", lambda sequence_name: NO_VALUE)

    result = repairs.place_repair_request(MANAGER_ID, 1, 101, 1)

    assert result.code == ErrorCode.INVALID_REFERENCE
    assert count_rows(seeded, "roomrepairs") == 0
    assert count_rows(seeded, "roomrepairrequests") == 0


def test_repair_history(repairs, output):
    repairs.place_repair_request(MANAGER_ID, 1, 101, 1)
    repairs.place_repair_request(MANAGER_ID, 2, 201, 1)
    repairs.place_repair_request(OTHER_MANAGER_ID, 3, 301, 1)

    result = repairs.repair_history(MANAGER_ID)

    assert result.data == 2
    lines = output.getvalue().splitlines()
    assert lines[0] == "repairid\tcompanyid\thotelid\troomnumber\trepairdate"
    assert [line.split("\t")[0] for line in lines[1:]] == ["2", "1"]


def test_repair_history_requires_manager(repairs, output):
    assert repairs.repair_history(CUSTOMER_ID).code == ErrorCode.UNAUTHORIZED
    assert output.getvalue() == ""
