"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and never depend on Flask or HTTP.
They are the contract between repositories, services and the web adapter:

- repositories raise the store-level errors (:class:`NotFoundError`,
  :class:`DuplicateEmailError`);
- services raise the account errors and hand them to the web layer wrapped in
  an :class:`~todolist.services._shared.outcome.Outcome`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, constraint_name: str) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    PostgreSQL reports the constraint name; SQLite reports the offending
    ``table.column``, so ``uq_users_email`` also matches ``users.email``.

    Parameters
    ----------
    exc : IntegrityError
        The exception raised by SQLAlchemy during flush/commit.
    constraint_name : str
        The name of the database constraint to match (e.g., 'uq_users_email').

    Returns
    -------
    bool
        True if the IntegrityError matches the given constraint.
    """
    message = str(exc.orig).lower() if exc.orig else ""
    if constraint_name.lower() in message:
        return True
    # uq_<table>_<column> -> <table>.<column>
    if constraint_name.startswith("uq_"):
        table, _, column = constraint_name[3:].partition("_")
        return bool(column) and f"{table}.{column}".lower() in message
    return False


# --------------------------------------------------------------------------- #
# Base type
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from repositories or domain logic.
    """

    pass


# --------------------------------------------------------------------------- #
# Store-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the repository.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int | None
    """

    entity: str
    key: str | int | None

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class DuplicateEmailError(ServiceError):
    """
    Raised by the user store when a write would break email uniqueness.

    :param email: The colliding (normalized) email.
    :type email: str
    """

    email: str

    def __str__(self) -> str:
        return f"Email already stored: {self.email}"


# --------------------------------------------------------------------------- #
# Account errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class ValidationFailedError(ServiceError):
    """
    One or more field-level rules rejected the input.

    :param field_errors: Field name → list of messages (marshmallow format).
    :type field_errors: Mapping[str, list[str]]
    """

    field_errors: Mapping[str, list[str]] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"Validation failed on: {', '.join(sorted(self.field_errors))}"


class PasswordConfirmationMismatchError(ServiceError):
    """The password and its confirmation differ."""

    def __init__(self) -> None:
        super().__init__("Password confirmation does not match.")


class CurrentPasswordIncorrectError(ServiceError):
    """The supplied current password does not match the stored one."""

    def __init__(self) -> None:
        super().__init__("Current password is incorrect.")


@dataclass(slots=True)
class EmailAlreadyRegisteredError(ServiceError):
    """
    A distinct user already owns the email.

    :param email: Email as entered by the client.
    :type email: str
    """

    email: str

    def __str__(self) -> str:
        return f"Email already registered: {self.email}"


class InvalidCredentialsError(ServiceError):
    """Login email/password pair did not match any account."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials.")


class NotAuthenticatedError(ServiceError):
    """The operation needs a logged-in user but the session has none."""

    def __init__(self) -> None:
        super().__init__("No user bound to the session.")
