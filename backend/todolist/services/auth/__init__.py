"""Session authentication (login / logout)."""

from __future__ import annotations

from .dto import LoginIn
from .service import AuthService

__all__ = ["AuthService", "LoginIn"]
