"""
Session binding port.

A session binding is private to one client session. It holds at most one
authenticated user and a locale. It is created on the first request of a
session and destroyed by :meth:`SessionBinding.invalidate` or by the external
session timeout.

The user held by a binding is the *same instance* the services mutate, so a
password or profile change is observed by every later read in the session.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from todolist.models.user import User


@runtime_checkable
class SessionBinding(Protocol):
    """Per-session slot for the current user and locale."""

    def get_user(self) -> User | None:
        """Return the bound user, or ``None`` for an anonymous session."""
        ...

    def set_user(self, user: User | None) -> None:
        """Bind ``user`` (or clear the binding with ``None``)."""
        ...

    def get_locale(self) -> str:
        """Return the session locale (language tag)."""
        ...

    def set_locale(self, locale: str) -> None:
        """Pin the session locale."""
        ...

    def invalidate(self) -> None:
        """Drop every piece of session state."""
        ...


class InMemorySessionBinding:
    """
    Process-local binding, one instance per simulated session.

    Used by service-level tests and scripts; the web application uses the
    cookie-backed adapter instead.

    :param default_locale: Locale reported until one is pinned.
    :type default_locale: str
    """

    def __init__(self, *, default_locale: str = "en") -> None:
        self._default_locale = default_locale
        self._user: User | None = None
        self._locale: str | None = None
        self.attributes: dict[str, object] = {}
        self.invalidated = False

    def get_user(self) -> User | None:
        return self._user

    def set_user(self, user: User | None) -> None:
        self._user = user

    def get_locale(self) -> str:
        return self._locale or self._default_locale

    def set_locale(self, locale: str) -> None:
        self._locale = locale

    def invalidate(self) -> None:
        self._user = None
        self._locale = None
        self.attributes.clear()
        self.invalidated = True
