"""DTOs for AuthService."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Login form values.

    :param email: Login email (normalized before lookup).
    :type email: str
    :param password: Raw password.
    :type password: str
    """

    email: str
    password: str
