import pytest

from hotel_client.core.exceptions import ConstraintViolationError, ExecutionError
from hotel_client.db.executor import StatementExecutor, column_values
from hotel_client.db.session import Session

from tests.conftest import count_rows


def test_execute_update_returns_affected_rows(seeded):
    affected = seeded.execute_update(
        "UPDATE rooms SET price = :price WHERE hotelid = :hotel_id",
        {"price": 99, "hotel_id": 1},
    )
    assert affected == 2


def test_execute_update_without_matches_returns_zero(seeded):
    assert seeded.execute_update("DELETE FROM rooms WHERE hotelid = :hotel_id", {"hotel_id": 999}) == 0


def test_execute_count(seeded):
    assert seeded.execute_count("SELECT roomnumber FROM rooms WHERE hotelid = :id", {"id": 1}) == 2
    assert seeded.execute_count("SELECT roomnumber FROM rooms WHERE hotelid = :id", {"id": 999}) == 0


def test_execute_materialize_returns_text_values(seeded):
    rows = seeded.execute_materialize(
        "SELECT hotelid, roomnumber, imageurl FROM rooms WHERE hotelid = :id ORDER BY roomnumber",
        {"id": 1},
    )
    assert rows == [
        ["1", "101", "http://img.example/101.jpg"],
        ["1", "102", None],
    ]


def test_execute_materialize_empty_result(seeded):
    assert seeded.execute_materialize("SELECT * FROM roombookings") == []


def test_execute_query_returns_column_names(seeded):
    columns, rows = seeded.execute_query("SELECT hotelid, hotelname FROM hotel WHERE hotelid = 1")
    assert columns == ["hotelid", "hotelname"]
    assert rows == [["1", "Seaside"]]


def test_execute_and_print_prints_header_once(seeded, output):
    shown = seeded.execute_and_print(
        "SELECT roomnumber, imageurl FROM rooms WHERE hotelid = :id ORDER BY roomnumber",
        {"id": 1},
    )

    assert shown == 2
    assert output.getvalue().splitlines() == [
        "roomnumber\timageurl",
        "101\thttp://img.example/101.jpg",
        "102\t",
    ]


def test_execute_and_print_empty_result_prints_nothing(seeded, output):
    assert seeded.execute_and_print("SELECT * FROM roombookings") == 0
    assert output.getvalue() == ""


def test_values_are_bound_not_interpolated(seeded):
    hostile = "x'); DROP TABLE users; --"
    seeded.execute_update(
        "INSERT INTO users (name, password, usertype) VALUES (:name, 'pw', 'Customer')",
        {"name": hostile},
    )

    rows = seeded.execute_materialize("SELECT name FROM users WHERE name = :name", {"name": hostile})
    assert rows == [[hostile]]
    assert count_rows(seeded, "users") == 5


def test_invalid_statement_raises_execution_error(seeded):
    with pytest.raises(ExecutionError) as exc_info:
        seeded.execute_materialize("SELECT * FROM no_such_table")
    assert exc_info.value.statement == "SELECT * FROM no_such_table"


def test_session_usable_after_failed_statement(seeded):
    with pytest.raises(ExecutionError):
        seeded.execute_update("INSERT INTO no_such_table VALUES (1)")
    assert seeded.execute_count("SELECT * FROM hotel") == 3


def test_integrity_violation_raises_constraint_violation(seeded):
    statement = "INSERT INTO rooms (hotelid, roomnumber, price) VALUES (1, 101, 10)"
    with pytest.raises(ConstraintViolationError):
        seeded.execute_update(statement)


def test_statements_outside_transaction_are_committed(seeded, session):
    seeded.execute_update("UPDATE rooms SET price = 1 WHERE hotelid = 2")
    session.rollback()
    assert seeded.execute_materialize("SELECT price FROM rooms WHERE hotelid = 2") == [["1"]]


def test_closed_session_raises_execution_error():
    session = Session("sqlite://").open()
    executor = StatementExecutor(session)
    session.close()

    with pytest.raises(ExecutionError):
        executor.execute_count("SELECT 1")


def test_column_values():
    assert column_values([["1", "a"], ["2", None]], 1) == ["a", None]
