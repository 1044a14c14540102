"""Cookie-backed :class:`SessionBinding` over :data:`flask.session`."""

from __future__ import annotations

from collections.abc import Sequence

from flask import current_app, request, session

from todolist.models.user import User
from todolist.repositories.user import UserRepository


class FlaskSessionBinding:
    """
    Session binding stored in Flask's signed session cookie.

    Only the user id and the locale live in the cookie. The :class:`User` is
    resolved once per request and cached on the binding, so every operation of
    the request mutates and observes the same instance. A stored id that no
    longer resolves means the user was destroyed: it reads as anonymous.

    :param users: Repository used to resolve the stored id.
    :type users: UserRepository | None
    :param supported_locales: Tags offered to ``Accept-Language`` negotiation.
    :type supported_locales: Sequence[str] | None
    :param default_locale: Fallback when negotiation finds no match.
    :type default_locale: str | None
    """

    USER_KEY = "user_id"
    LOCALE_KEY = "locale"

    def __init__(
        self,
        *,
        users: UserRepository | None = None,
        supported_locales: Sequence[str] | None = None,
        default_locale: str | None = None,
    ) -> None:
        self._users = users or UserRepository()
        self._supported = tuple(
            supported_locales or current_app.config.get("SUPPORTED_LOCALES", ("en",))
        )
        self._default_locale = default_locale or current_app.config.get("DEFAULT_LOCALE", "en")
        self._user: User | None = None
        self._resolved = False

    # ----------------------------- user -------------------------------------

    def get_user(self) -> User | None:
        if not self._resolved:
            self._user = self._load_user()
            self._resolved = True
        return self._user

    def set_user(self, user: User | None) -> None:
        self._user = user
        self._resolved = True
        if user is None:
            session.pop(self.USER_KEY, None)
        else:
            session[self.USER_KEY] = user.id
            session.permanent = True  # expires after PERMANENT_SESSION_LIFETIME

    def _load_user(self) -> User | None:
        user_id = session.get(self.USER_KEY)
        if user_id is None:
            return None
        user = self._users.get(user_id)
        if user is None:
            session.pop(self.USER_KEY, None)
        return user

    # ----------------------------- locale -----------------------------------

    def get_locale(self) -> str:
        stored = session.get(self.LOCALE_KEY)
        if stored:
            return str(stored)
        return self.negotiated_locale()

    def set_locale(self, locale: str) -> None:
        session[self.LOCALE_KEY] = locale

    def negotiated_locale(self) -> str:
        """Best ``Accept-Language`` match, or the default locale."""
        return request.accept_languages.best_match(self._supported) or self._default_locale

    # ----------------------------- lifecycle --------------------------------

    def invalidate(self) -> None:
        session.clear()
        self._user = None
        self._resolved = True
