# todolist/services/auth/service.py
from __future__ import annotations

import logging

from todolist.repositories.user import UserRepository
from todolist.schemas.account import LoginSchema
from todolist.services._shared.base import BaseService
from todolist.services._shared.errors import InvalidCredentialsError, ValidationFailedError
from todolist.services._shared.outcome import returns_outcome
from todolist.services.accounts.dto import UserPublicOut
from todolist.services.auth.dto import LoginIn

log = logging.getLogger(__name__)


class AuthService(BaseService):
    """
    Session authentication lifecycle (login / logout).

    Login binds the authenticated user to the caller's session binding; the
    account operations then read it back from there.
    """

    _login_schema = LoginSchema()

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    @returns_outcome
    def login(self, dto: LoginIn) -> UserPublicOut:
        """
        Verify credentials and bind the user to the session.

        :param dto: Login input.
        :returns: Public payload of the authenticated user.
        :raises InvalidCredentialsError: If the pair does not match an account.
        """
        try:
            self.validate(self._login_schema, dto)
        except ValidationFailedError as exc:
            raise InvalidCredentialsError() from exc

        with self.ro_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.get_by_email(dto.email)
            if user is None or not user.verify_password(dto.password):
                raise InvalidCredentialsError()

        self.bind_user(user)
        log.info("User logged in", extra=self.log_extra("auth.login", user_id=user.id))
        return UserPublicOut.from_model(user)

    # ------------------------------------------------------------------ #
    # Logout
    # ------------------------------------------------------------------ #

    @returns_outcome
    def logout(self) -> None:
        """Forget the bound user and invalidate the session. Idempotent."""
        user = self.session.get_user()
        self.session.set_user(None)
        self.session.invalidate()
        if user is not None:
            log.info("User logged out", extra=self.log_extra("auth.logout", user_id=user.id))
