"""Tests for auth request and response models."""

import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from modules.auth.models import LoginRequest, RegisterRequest, User, UserPublic


def error_messages(exc_info) -> dict[str, str]:
    return {err["loc"][0]: err["msg"] for err in exc_info.value.errors()}


class TestRegisterRequest:
    def test_valid(self):
        request = RegisterRequest(name="A", email="a@x.com", password="123456")
        assert request.name == "A"
        assert request.email == "a@x.com"

    def test_email_is_normalized(self):
        request = RegisterRequest(name="A", email="  A@X.com ", password="123456")
        assert request.email == "a@x.com"

    def test_all_violations_reported_together(self):
        with pytest.raises(ValidationError) as exc_info:
            RegisterRequest(name="", email="not-an-email", password="123")
        assert error_messages(exc_info) == {
            "name": "Name is required",
            "email": "Please include a valid email",
            "password": "Please enter a password with 6 or more characters",
        }

    def test_missing_fields_use_same_messages(self):
        with pytest.raises(ValidationError) as exc_info:
            RegisterRequest()
        assert set(error_messages(exc_info)) == {"name", "email", "password"}
        assert error_messages(exc_info)["name"] == "Name is required"

    def test_whitespace_name_rejected(self):
        with pytest.raises(ValidationError):
            RegisterRequest(name="   ", email="a@x.com", password="123456")

    def test_six_characters_is_enough(self):
        RegisterRequest(name="A", email="a@x.com", password="abcdef")


class TestLoginRequest:
    def test_valid(self):
        request = LoginRequest(email="a@x.com", password="x")
        assert request.password == "x"

    def test_missing_password(self):
        with pytest.raises(ValidationError) as exc_info:
            LoginRequest(email="a@x.com")
        assert error_messages(exc_info) == {"password": "Password is required"}

    def test_bad_email(self):
        with pytest.raises(ValidationError) as exc_info:
            LoginRequest(email="nope", password="123456")
        assert error_messages(exc_info) == {"email": "Please include a valid email"}


class TestUserPublic:
    def test_excludes_password_and_uses_wire_id(self):
        user = User(
            id="user-1",
            name="A",
            email="a@x.com",
            password="$2b$04$hash",
            avatar="//avatar",
            date=datetime.now(timezone.utc),
        )
        data = UserPublic.from_user(user).model_dump(by_alias=True)
        assert "password" not in data
        assert data["_id"] == "user-1"
        assert data["email"] == "a@x.com"
