"""
AccountService
==============

Account lifecycle of the logged-in user:

- register a new account and bind it to the session;
- list the user's todos and summarise their counts;
- change the password, update the profile, delete the account.

Every public operation returns an :class:`~todolist.services._shared.outcome.Outcome`;
account errors never cross the service boundary as exceptions.
"""

from __future__ import annotations

import logging

from todolist.models.todo import Status
from todolist.models.user import User, normalize_email
from todolist.schemas.account import (
    PasswordChangeSchema,
    ProfileUpdateSchema,
    RegistrationSchema,
)
from todolist.services._shared.base import BaseService
from todolist.services._shared.errors import (
    CurrentPasswordIncorrectError,
    DuplicateEmailError,
    EmailAlreadyRegisteredError,
    NotFoundError,
    PasswordConfirmationMismatchError,
)
from todolist.services._shared.outcome import returns_outcome
from todolist.services.accounts.dto import (
    AccountSummaryOut,
    PasswordChangeIn,
    ProfileUpdateIn,
    RegistrationIn,
    TodoOut,
    UserPublicOut,
)

log = logging.getLogger(__name__)


class AccountService(BaseService):
    """Operations on the account bound to one client session."""

    _registration_schema = RegistrationSchema()
    _password_schema = PasswordChangeSchema()
    _profile_schema = ProfileUpdateSchema()

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #

    @returns_outcome
    def register(self, dto: RegistrationIn) -> UserPublicOut:
        """
        Create an account and log it in.

        :param dto: Registration form values.
        :type dto: :class:`RegistrationIn`
        :returns: Public payload of the new user.
        :rtype: :class:`UserPublicOut`
        :raises ValidationFailedError: If a field rule rejects the input.
        :raises PasswordConfirmationMismatchError: If the confirmation differs.
        :raises EmailAlreadyRegisteredError: If the email is taken.
        """
        self.validate(self._registration_schema, dto)
        if dto.password != dto.confirmation_password:
            raise PasswordConfirmationMismatchError()

        try:
            with self.rw_uow() as uow:
                if uow.users.get_by_email(dto.email) is not None:
                    raise EmailAlreadyRegisteredError(dto.email)
                user = User(
                    firstname=dto.firstname,
                    lastname=dto.lastname,
                    email=dto.email,
                    password=dto.password,  # model setter hashes
                )
                uow.users.create(user)
        except DuplicateEmailError as exc:
            # Lost a race against a concurrent registration.
            raise EmailAlreadyRegisteredError(dto.email) from exc

        self.bind_user(user)
        log.info(
            "Account registered",
            extra=self.log_extra("account.registered", user_id=user.id),
        )
        return UserPublicOut.from_model(user)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    @returns_outcome
    def home(self) -> list[TodoOut]:
        """
        Return the full todo list of the logged-in user.

        :raises NotAuthenticatedError: If the session is anonymous.
        """
        user = self.require_user()
        with self.ro_uow() as uow:
            todos = uow.todos.list_by_user(user.id)
            return [TodoOut.from_model(t) for t in todos]

    @returns_outcome
    def account_summary(self) -> AccountSummaryOut:
        """
        Return the user with its total, pending and completed todo counts.

        :raises NotAuthenticatedError: If the session is anonymous.
        """
        user = self.require_user()
        with self.ro_uow() as uow:
            total = uow.todos.count_by_user(user.id)
            pending = uow.todos.count_by_user(user.id, Status.TODO)
            done = uow.todos.count_by_user(user.id, Status.DONE)
            return AccountSummaryOut(
                user=UserPublicOut.from_model(user),
                total_count=total,
                todo_count=pending,
                done_count=done,
            )

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    @returns_outcome
    def delete_account(self) -> None:
        """
        Remove the logged-in user (with its todos) and invalidate the session.

        A user already gone from the store still ends with a cleared session.

        :raises NotAuthenticatedError: If the session is anonymous.
        """
        user = self.require_user()
        user_id = user.id
        try:
            with self.rw_uow() as uow:
                uow.users.remove(user)
        except NotFoundError:
            log.warning(
                "Account already removed",
                extra=self.log_extra("account.delete.missing", user_id=user_id),
            )
        self.session.set_user(None)
        self.session.invalidate()
        log.info("Account deleted", extra=self.log_extra("account.deleted", user_id=user_id))

    @returns_outcome
    def change_password(self, dto: PasswordChangeIn) -> None:
        """
        Replace the password of the logged-in user.

        :param dto: Password form values.
        :type dto: :class:`PasswordChangeIn`
        :raises NotAuthenticatedError: If the session is anonymous.
        :raises ValidationFailedError: If a field is missing.
        :raises PasswordConfirmationMismatchError: If the confirmation differs.
        :raises CurrentPasswordIncorrectError: If ``current_password`` is wrong.
        """
        user = self.require_user()
        self.validate(self._password_schema, dto)
        if dto.password != dto.confirmation_password:
            raise PasswordConfirmationMismatchError()
        if not user.verify_password(dto.current_password):
            raise CurrentPasswordIncorrectError()

        with self.rw_uow() as uow:
            user.password = dto.password
            uow.users.update(user)

        self.session.set_user(user)
        log.info(
            "Password changed",
            extra=self.log_extra("account.password.changed", user_id=user.id),
        )

    @returns_outcome
    def update_profile(self, dto: ProfileUpdateIn) -> UserPublicOut:
        """
        Replace firstname, lastname and email of the logged-in user.

        Keeping the current email is allowed; taking another user's email is
        not, and leaves the session user untouched.

        :param dto: Profile form values.
        :type dto: :class:`ProfileUpdateIn`
        :returns: Updated public payload.
        :rtype: :class:`UserPublicOut`
        :raises NotAuthenticatedError: If the session is anonymous.
        :raises ValidationFailedError: If a field rule rejects the input.
        :raises EmailAlreadyRegisteredError: If another user owns the email.
        :raises NotFoundError: If the user vanished from the store.
        """
        user = self.require_user()
        self.validate(self._profile_schema, dto)
        new_email = normalize_email(dto.email)

        try:
            with self.rw_uow() as uow:
                if new_email != user.email and uow.users.exists_by_email(new_email):
                    raise EmailAlreadyRegisteredError(dto.email)
                uow.users.update(
                    user,
                    firstname=dto.firstname,
                    lastname=dto.lastname,
                    email=new_email,
                )
        except DuplicateEmailError as exc:
            raise EmailAlreadyRegisteredError(dto.email) from exc

        self.session.set_user(user)
        log.info("Profile updated", extra=self.log_extra("account.updated", user_id=user.id))
        return UserPublicOut.from_model(user)
