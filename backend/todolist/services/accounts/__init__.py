"""Account lifecycle: registration, summary, password and profile changes."""

from __future__ import annotations

from .dto import (
    AccountSummaryOut,
    PasswordChangeIn,
    ProfileUpdateIn,
    RegistrationIn,
    TodoOut,
    UserPublicOut,
)
from .service import AccountService

__all__ = [
    "AccountService",
    "AccountSummaryOut",
    "PasswordChangeIn",
    "ProfileUpdateIn",
    "RegistrationIn",
    "TodoOut",
    "UserPublicOut",
]
