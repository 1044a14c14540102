"""Service layer.

Only the framework-agnostic building blocks are re-exported here; import the
services themselves from their subpackages (``todolist.services.accounts``,
``todolist.services.auth``). Repositories depend on
``todolist.services._shared.errors``, so this module must stay import-light.
"""

from __future__ import annotations

from ._shared.errors import (
    CurrentPasswordIncorrectError,
    DuplicateEmailError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    NotFoundError,
    PasswordConfirmationMismatchError,
    ServiceError,
    ValidationFailedError,
)
from ._shared.outcome import Outcome, returns_outcome

__all__ = [
    "Outcome",
    "returns_outcome",
    "ServiceError",
    "NotFoundError",
    "DuplicateEmailError",
    "ValidationFailedError",
    "PasswordConfirmationMismatchError",
    "CurrentPasswordIncorrectError",
    "EmailAlreadyRegisteredError",
    "InvalidCredentialsError",
    "NotAuthenticatedError",
]
