"""Tests for the User model."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from todolist.models.user import User


def _user(**overrides) -> User:
    data = {"email": "ada@example.com", "firstname": "Ada", "lastname": "Lovelace"}
    data.update(overrides)
    return User(**data)


class TestUser:
    def test_password_hashing(self, session):
        u = _user()
        u.password = "secret123"
        session.add(u)
        session.commit()
        assert u.password_hash != "secret123"
        assert u.password_hash.startswith("scrypt:")
        assert u.verify_password("secret123") is True
        assert u.verify_password("wrong") is False

    def test_hash_is_salted(self):
        a = _user(password="same")
        b = _user(email="other@example.com", password="same")
        assert a.password_hash != b.password_hash

    def test_password_is_write_only(self):
        u = _user(password="x")
        with pytest.raises(AttributeError):
            _ = u.password

    def test_empty_password_rejected(self):
        with pytest.raises(ValueError):
            _user(password="")

    def test_email_normalized_and_unique(self, session):
        u1 = _user(email="  Alice@Example.com ", password="pw")
        session.add(u1)
        session.commit()
        assert u1.email == "alice@example.com"

        u2 = _user(email="alice@example.com", password="pw")
        session.add(u2)
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

    @pytest.mark.parametrize("email", ["", "   ", "no-at-sign"])
    def test_invalid_email_rejected(self, email):
        with pytest.raises(ValueError):
            _user(email=email)

    def test_names_are_stripped_and_required(self):
        u = _user(firstname="  Ada ", lastname=" Lovelace  ")
        assert (u.firstname, u.lastname) == ("Ada", "Lovelace")
        with pytest.raises(ValueError):
            _user(lastname="   ")

    def test_verify_password_without_hash(self):
        assert _user().verify_password("anything") is False
