import io

import pytest

from hotel_client.config.settings import Settings
from hotel_client.db.executor import StatementExecutor
from hotel_client.db.init_db import init_db
from hotel_client.db.session import Session
from hotel_client.utils.hashing import PasswordHasher

MANAGER_ID = 1
OTHER_MANAGER_ID = 2
CUSTOMER_ID = 3
SECOND_CUSTOMER_ID = 4

PASSWORDS = {
    MANAGER_ID: "alice-pw",
    OTHER_MANAGER_ID: "bob-pw",
    CUSTOMER_ID: "carol-pw",
    SECOND_CUSTOMER_ID: "dave-pw",
}


@pytest.fixture
def settings():
    return Settings(
        DATABASE_URL="sqlite://",
        ENVIRONMENT="testing",
        LOG_TO_FILE=False,
        PASSWORD_BCRYPT_ROUNDS=4,
    )


@pytest.fixture
def session():
    session = Session("sqlite://").open()
    init_db(session)
    yield session
    session.close()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def executor(session, output):
    return StatementExecutor(session, out=output)


def _add_user(executor, user_id, name, user_type):
    executor.execute_update(
        "INSERT INTO users (userid, name, password, usertype) VALUES (:id, :name, :password, :type)",
        {
            "id": user_id,
            "name": name,
            "password": PasswordHasher.hash_password(PASSWORDS[user_id], rounds=4),
            "type": user_type,
        },
    )


def _add_hotel(executor, hotel_id, name, latitude, longitude, manager_id):
    executor.execute_update(
        "INSERT INTO hotel (hotelid, hotelname, latitude, longitude, dateestablished, manageruserid) "
        "VALUES (:id, :name, :lat, :long, '2001-01-01', :manager)",
        {"id": hotel_id, "name": name, "lat": latitude, "long": longitude, "manager": manager_id},
    )


def _add_room(executor, hotel_id, room_number, price, image_url=None):
    executor.execute_update(
        "INSERT INTO rooms (hotelid, roomnumber, price, imageurl) VALUES (:hotel, :room, :price, :image)",
        {"hotel": hotel_id, "room": room_number, "price": price, "image": image_url},
    )


@pytest.fixture
def seeded(executor):
    """
    Users 1 and 2 manage hotels, 3 and 4 are customers.

    Hotel 1 (10, 10) and hotel 2 (50, 50) belong to manager 1,
    hotel 3 (12, 14) to manager 2.
    """
    _add_user(executor, MANAGER_ID, "Alice", "Manager")
    _add_user(executor, OTHER_MANAGER_ID, "Bob", "Manager")
    _add_user(executor, CUSTOMER_ID, "Carol", "Customer")
    _add_user(executor, SECOND_CUSTOMER_ID, "Dave", "Customer")

    _add_hotel(executor, 1, "Seaside", 10.0, 10.0, MANAGER_ID)
    _add_hotel(executor, 2, "Mountain", 50.0, 50.0, MANAGER_ID)
    _add_hotel(executor, 3, "Downtown", 12.0, 14.0, OTHER_MANAGER_ID)

    _add_room(executor, 1, 101, 120, "http://img.example/101.jpg")
    _add_room(executor, 1, 102, 80)
    _add_room(executor, 2, 201, 200)
    _add_room(executor, 3, 301, 90)

    executor.execute_update(
        "INSERT INTO maintenancecompany (companyid, name, address, iscertified) "
        "VALUES (1, 'FixIt', '1 Main St', 1)"
    )
    executor.out.truncate(0)
    executor.out.seek(0)
    return executor


def count_rows(executor, table, where="1 = 1", params=None):
    return int(executor.execute_materialize(f"SELECT COUNT(*) FROM {table} WHERE {where}", params)[0][0])
