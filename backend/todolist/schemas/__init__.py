"""Convenience exports for form validation schemas."""

from __future__ import annotations

from .account import (
    EMAIL_PATTERN,
    LoginSchema,
    PasswordChangeSchema,
    ProfileUpdateSchema,
    RegistrationSchema,
)

__all__ = [
    "EMAIL_PATTERN",
    "LoginSchema",
    "PasswordChangeSchema",
    "ProfileUpdateSchema",
    "RegistrationSchema",
]
