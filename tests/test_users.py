import pytest

from hotel_client.services.auth.user_service import UserService
from hotel_client.services.base.service_result import ErrorCode
from hotel_client.utils.hashing import PasswordHasher

from tests.conftest import CUSTOMER_ID, PASSWORDS


@pytest.fixture
def users(seeded, settings):
    return UserService(seeded, settings)


def test_create_user(users, seeded):
    result = users.create_user("Erin", "erin-pw")

    assert result.is_success
    assert result.data == 5
    name, stored, user_type = seeded.execute_materialize(
        "SELECT name, password, usertype FROM users WHERE userid = 5"
    )[0]
    assert (name, user_type) == ("Erin", "Customer")
    assert stored != "erin-pw"
    assert PasswordHasher.verify_password("erin-pw", stored)


def test_created_user_can_log_in(users):
    user_id = users.create_user("Erin", "erin-pw").unwrap()
    assert users.log_in(user_id, "erin-pw") == user_id


@pytest.mark.parametrize("name, password", [("", "pw"), ("   ", "pw"), ("Erin", "")])
def test_create_user_requires_name_and_password(users, name, password):
    assert users.create_user(name, password).code == ErrorCode.VALIDATION_ERROR


def test_log_in(users):
    assert users.log_in(CUSTOMER_ID, PASSWORDS[CUSTOMER_ID]) == CUSTOMER_ID


def test_log_in_wrong_password(users):
    assert users.log_in(CUSTOMER_ID, "wrong") is None


def test_log_in_unknown_user(users):
    assert users.log_in(999, "anything") is None


def test_log_in_with_plaintext_stored_password(users, seeded):
    seeded.execute_update("UPDATE users SET password = 'plain' WHERE userid = :id", {"id": CUSTOMER_ID})
    assert users.log_in(CUSTOMER_ID, "plain") is None
