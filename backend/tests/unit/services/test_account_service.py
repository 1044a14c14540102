"""Unit tests for AccountService driven through an in-memory session binding."""

from __future__ import annotations

import logging

import pytest

from tests.factories.todo import TodoFactory
from tests.factories.user import UserFactory
from todolist.models.todo import Status
from todolist.repositories.user import UserRepository
from todolist.services._shared.base import ServiceContext
from todolist.services._shared.errors import (
    CurrentPasswordIncorrectError,
    EmailAlreadyRegisteredError,
    NotAuthenticatedError,
    PasswordConfirmationMismatchError,
    ValidationFailedError,
)
from todolist.services._shared.ports.session_binding import InMemorySessionBinding
from todolist.services.accounts.dto import (
    PasswordChangeIn,
    ProfileUpdateIn,
    RegistrationIn,
    TodoOut,
)
from todolist.services.accounts.service import AccountService

ADA = RegistrationIn("Ada", "Lovelace", "ada@x", "p1", "p1")


@pytest.fixture()
def service(binding):
    return AccountService(binding)


@pytest.fixture()
def users():
    return UserRepository()


@pytest.fixture()
def ada(service):
    """Ada registered and logged in on the ``binding`` session."""
    outcome = service.register(ADA)
    assert outcome.ok
    return outcome.value


class TestRegister:
    def test_register_on_empty_store(self, service, binding, users):
        """
        GIVEN an empty store
        WHEN Ada registers
        THEN she is persisted and bound to the session with the input fields.
        """
        outcome = service.register(ADA)

        assert outcome.ok
        current = binding.get_user()
        assert current is not None
        assert current.id is not None
        assert current.email == "ada@x"
        assert (current.firstname, current.lastname) == ("Ada", "Lovelace")
        assert current.verify_password("p1")
        assert users.get_by_email("ada@x").id == current.id
        assert outcome.value.id == current.id

    def test_register_same_input_twice(self, service, ada, users):
        outcome = service.register(ADA)

        assert not outcome.ok
        assert isinstance(outcome.error, EmailAlreadyRegisteredError)
        assert outcome.error.email == "ada@x"
        assert users.count() == 1

    def test_register_losing_race_to_concurrent_registration(
        self, binding, users, session, monkeypatch
    ):
        """
        GIVEN Ada's email is stored after the service looked it up
        WHEN the store rejects the insert as a duplicate
        THEN the outcome is EmailAlreadyRegistered and nobody is logged in.
        """
        UserFactory(email="ada@x")
        session.commit()
        monkeypatch.setattr(UserRepository, "get_by_email", lambda self, email: None)

        outcome = AccountService(binding).register(ADA)

        assert isinstance(outcome.error, EmailAlreadyRegisteredError)
        assert outcome.error.email == "ada@x"
        assert binding.get_user() is None
        assert users.count() == 1

    def test_register_email_differs_only_by_case(self, service, ada):
        outcome = service.register(RegistrationIn("Ada", "L", "ADA@X", "p1", "p1"))
        assert isinstance(outcome.error, EmailAlreadyRegisteredError)

    def test_register_confirmation_mismatch(self, service, binding, users):
        outcome = service.register(RegistrationIn("A", "B", "a@x", "p1", "p2"))

        assert isinstance(outcome.error, PasswordConfirmationMismatchError)
        assert users.get_by_email("a@x") is None
        assert binding.get_user() is None

    @pytest.mark.parametrize(
        "payload, field",
        [
            (RegistrationIn("", "Lovelace", "ada@x", "p1", "p1"), "firstname"),
            (RegistrationIn("Ada", "   ", "ada@x", "p1", "p1"), "lastname"),
            (RegistrationIn("Ada", "Lovelace", "not-an-email", "p1", "p1"), "email"),
            (RegistrationIn("Ada", "Lovelace", "ada@x", "", ""), "password"),
        ],
    )
    def test_register_validation(self, service, users, payload, field):
        outcome = service.register(payload)

        assert isinstance(outcome.error, ValidationFailedError)
        assert field in outcome.error.field_errors
        assert users.count() == 0

    def test_register_pins_negotiated_locale(self, users):
        binding = InMemorySessionBinding(default_locale="fr")
        AccountService(binding).register(ADA)
        assert binding.get_locale() == "fr"


class TestQueries:
    def test_home_lists_own_todos(self, service, ada, binding, session):
        TodoFactory(owner=binding.get_user(), title="mine")
        TodoFactory(title="not mine")
        session.commit()

        outcome = service.home()

        assert outcome.ok
        assert [t.title for t in outcome.value] == ["mine"]
        assert all(isinstance(t, TodoOut) for t in outcome.value)

    def test_account_summary_counts(self, service, ada, binding, session):
        owner = binding.get_user()
        TodoFactory.create_batch(2, owner=owner, status=Status.TODO)
        TodoFactory(owner=owner, status=Status.DONE)
        session.commit()

        summary = service.account_summary().value

        assert summary.user.email == "ada@x"
        assert (summary.total_count, summary.todo_count, summary.done_count) == (3, 2, 1)

    def test_anonymous_session_is_rejected(self, service):
        assert isinstance(service.home().error, NotAuthenticatedError)
        assert isinstance(service.account_summary().error, NotAuthenticatedError)
        assert isinstance(service.delete_account().error, NotAuthenticatedError)


class TestChangePassword:
    def test_old_password_stops_working(self, service, ada, binding):
        first = service.change_password(PasswordChangeIn("p1", "p2", "p2"))
        second = service.change_password(PasswordChangeIn("p1", "p3", "p3"))

        assert first.ok
        assert isinstance(second.error, CurrentPasswordIncorrectError)
        assert binding.get_user().verify_password("p2")

    def test_change_is_persisted(self, service, ada, users, session):
        service.change_password(PasswordChangeIn("p1", "p2", "p2"))
        session.expire_all()
        assert users.get_by_email("ada@x").verify_password("p2")

    def test_confirmation_mismatch(self, service, ada, binding):
        outcome = service.change_password(PasswordChangeIn("p1", "p2", "p3"))
        assert isinstance(outcome.error, PasswordConfirmationMismatchError)
        assert binding.get_user().verify_password("p1")

    def test_missing_fields(self, service, ada):
        outcome = service.change_password(PasswordChangeIn("", "p2", "p2"))
        assert isinstance(outcome.error, ValidationFailedError)
        assert "current_password" in outcome.error.field_errors


class TestUpdateProfile:
    def test_update_then_summary_round_trip(self, service, ada):
        profile = ProfileUpdateIn("Augusta", "King", "augusta@x")

        assert service.update_profile(profile).ok
        user = service.account_summary().value.user

        assert (user.firstname, user.lastname, user.email) == ("Augusta", "King", "augusta@x")

    def test_keeping_own_email_succeeds(self, service, ada):
        outcome = service.update_profile(ProfileUpdateIn("Ada", "King", "ada@x"))
        assert outcome.ok
        assert outcome.value.lastname == "King"

    def test_identical_updates_are_idempotent(self, service, ada, users):
        profile = ProfileUpdateIn("Ada", "L", "ada.l@x")
        first = service.update_profile(profile)
        second = service.update_profile(profile)

        assert first.ok and second.ok
        assert first.value == second.value
        assert users.count() == 1

    def test_email_of_other_user_is_rejected(self, service, ada, binding, session):
        UserFactory(email="bob@x")
        session.commit()

        outcome = service.update_profile(ProfileUpdateIn("Ada", "L", "bob@x"))

        assert isinstance(outcome.error, EmailAlreadyRegisteredError)
        assert outcome.error.email == "bob@x"
        current = binding.get_user()
        assert current.email == "ada@x"
        assert current.lastname == "Lovelace"

    def test_email_taken_after_check_rolls_back(
        self, service, ada, binding, session, monkeypatch
    ):
        """
        GIVEN Bob takes the email between the service check and the write
        WHEN Ada's update reaches the store
        THEN it fails with EmailAlreadyRegistered and her session user is unchanged.
        """
        UserFactory(email="bob@x")
        session.commit()
        monkeypatch.setattr(UserRepository, "exists_by_email", lambda self, email: False)

        outcome = service.update_profile(ProfileUpdateIn("Augusta", "King", "bob@x"))

        assert isinstance(outcome.error, EmailAlreadyRegisteredError)
        current = binding.get_user()
        assert current.email == "ada@x"
        assert (current.firstname, current.lastname) == ("Ada", "Lovelace")

    def test_blank_email_is_rejected(self, service, ada, binding):
        outcome = service.update_profile(ProfileUpdateIn("Ada", "L", " "))
        assert isinstance(outcome.error, ValidationFailedError)
        assert binding.get_user().email == "ada@x"


class TestDeleteAccount:
    def test_delete_clears_session_and_store(self, service, ada, binding, users, session):
        TodoFactory(owner=binding.get_user())
        session.commit()

        outcome = service.delete_account()

        assert outcome.ok
        assert binding.get_user() is None
        assert binding.invalidated
        assert users.get_by_email("ada@x") is None

    def test_delete_of_vanished_user_still_succeeds(self, service, ada, binding, users, session):
        users.remove(users.get_by_email("ada@x"))
        session.commit()

        outcome = service.delete_account()

        assert outcome.ok
        assert binding.get_user() is None
        assert binding.invalidated


def test_log_records_carry_service_context(binding, caplog):
    caplog.set_level(logging.INFO, logger="todolist")
    ctx = ServiceContext(request_id="req-42", remote_addr="10.0.0.7")

    assert AccountService(binding, ctx=ctx).register(ADA).ok

    (record,) = [r for r in caplog.records if getattr(r, "event", None) == "account.registered"]
    assert record.request_id == "req-42"
    assert record.remote_addr == "10.0.0.7"
    assert record.user_id == binding.get_user().id
