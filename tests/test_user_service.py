import pytest
from pydantic import ValidationError

from database import ConstraintViolationError
from services import (
    add_user,
    authenticate_user,
    get_user_with_email,
    get_user_with_id,
    verify_password,
)


def create_user_dict(name="Alice", email="alice@example.com", password="password"):
    return {"name": name, "email": email, "password": password}


def test_unknown_email_returns_none(db_session):
    assert get_user_with_email(db_session, "nobody@example.com") is None


def test_unknown_id_returns_none(db_session):
    assert get_user_with_id(db_session, 999999) is None


def test_add_user_returns_inserted_row(db_session):
    user = add_user(db_session, create_user_dict())
    assert user["id"] is not None
    assert user["name"] == "Alice"
    assert user["email"] == "alice@example.com"
    assert user["password"] != "password"
    assert verify_password("password", user["password"])

    assert get_user_with_email(db_session, "alice@example.com") == user
    assert get_user_with_id(db_session, user["id"]) == user


def test_duplicate_email_is_constraint_violation(db_session):
    add_user(db_session, create_user_dict())
    with pytest.raises(ConstraintViolationError):
        add_user(db_session, create_user_dict(name="Other Alice"))


def test_add_user_validates_input(db_session):
    with pytest.raises(ValidationError):
        add_user(db_session, {"name": "No Email", "password": "password"})


def test_authenticate_user(db_session):
    user = add_user(db_session, create_user_dict())
    assert authenticate_user(db_session, "alice@example.com", "password")["id"] == user["id"]
    assert authenticate_user(db_session, "alice@example.com", "wrong") is None
    assert authenticate_user(db_session, "bob@example.com", "password") is None


def test_verify_password_rejects_unhashed_values():
    assert verify_password("password", "password") is False
