"""
DTOs for AccountService.

Data Transfer Objects isolate the web adapter from ORM models: inputs mirror
the submitted forms, outputs carry only public-safe fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from todolist.models.todo import Todo
    from todolist.models.user import User

# --------------------------------------------------------------------------- #
# Input DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class RegistrationIn:
    """
    Input DTO for self-registration.

    :param firstname: Given name.
    :type firstname: str
    :param lastname: Family name.
    :type lastname: str
    :param email: Login email (normalized by the model).
    :type email: str
    :param password: Raw password, hashed by the model setter.
    :type password: str
    :param confirmation_password: Must equal ``password``.
    :type confirmation_password: str
    """

    firstname: str
    lastname: str
    email: str
    password: str
    confirmation_password: str


@dataclass(frozen=True, slots=True)
class PasswordChangeIn:
    """
    Input DTO for changing the logged-in user's password.

    :param current_password: Password currently stored.
    :type current_password: str
    :param password: New raw password.
    :type password: str
    :param confirmation_password: Must equal ``password``.
    :type confirmation_password: str
    """

    current_password: str
    password: str
    confirmation_password: str


@dataclass(frozen=True, slots=True)
class ProfileUpdateIn:
    """
    Input DTO for replacing the profile fields.

    :param firstname: New given name.
    :type firstname: str
    :param lastname: New family name.
    :type lastname: str
    :param email: New email; may equal the current one.
    :type email: str
    """

    firstname: str
    lastname: str
    email: str


# --------------------------------------------------------------------------- #
# Output DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserPublicOut:
    """Public-safe user payload (never carries the password hash)."""

    id: int
    email: str
    firstname: str
    lastname: str

    @classmethod
    def from_model(cls, user: User) -> UserPublicOut:
        return cls(
            id=user.id,
            email=user.email,
            firstname=user.firstname,
            lastname=user.lastname,
        )


@dataclass(frozen=True, slots=True)
class TodoOut:
    """Row of the home page listing."""

    id: int
    title: str
    due_date: date | None
    priority: str
    status: str

    @classmethod
    def from_model(cls, todo: Todo) -> TodoOut:
        return cls(
            id=todo.id,
            title=todo.title,
            due_date=todo.due_date,
            priority=todo.priority.value,
            status=todo.status.value,
        )


@dataclass(frozen=True, slots=True)
class AccountSummaryOut:
    """
    Account details page payload.

    The three counts come from independent reads and may reflect distinct
    snapshots.

    :param user: The logged-in user.
    :type user: UserPublicOut
    :param total_count: Number of todos owned.
    :type total_count: int
    :param todo_count: Number of todos in status ``TODO``.
    :type todo_count: int
    :param done_count: Number of todos in status ``DONE``.
    :type done_count: int
    """

    user: UserPublicOut
    total_count: int
    todo_count: int
    done_count: int
