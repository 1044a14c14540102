"""Tests for the marshmallow form schemas."""

from __future__ import annotations

import pytest

from todolist.schemas import (
    LoginSchema,
    PasswordChangeSchema,
    ProfileUpdateSchema,
    RegistrationSchema,
)


def _registration(**overrides):
    data = {
        "firstname": "Ada",
        "lastname": "Lovelace",
        "email": "ada@x",
        "password": "p1",
        "confirmation_password": "p1",
    }
    data.update(overrides)
    return data


def test_valid_registration() -> None:
    assert RegistrationSchema().validate(_registration()) == {}


@pytest.mark.parametrize("email", ["ada", "ada@", "@x", "a da@x", "a@b@c"])
def test_malformed_email(email: str) -> None:
    assert "email" in RegistrationSchema().validate(_registration(email=email))


def test_whitespace_only_values_are_blank() -> None:
    errors = RegistrationSchema().validate(_registration(firstname="  ", lastname="\t"))
    assert set(errors) == {"firstname", "lastname"}


def test_missing_fields_are_reported() -> None:
    errors = PasswordChangeSchema().validate({"password": "p"})
    assert set(errors) == {"current_password", "confirmation_password"}


def test_profile_and_login_schemas() -> None:
    assert ProfileUpdateSchema().validate({"firstname": "A", "lastname": "B", "email": "a@b"}) == {}
    assert "password" in LoginSchema().validate({"email": "a@b", "password": ""})
