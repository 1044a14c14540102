"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from todolist.repositories.base import BaseRepository
from todolist.repositories.todo import TodoRepository
from todolist.repositories.user import UserRepository

__all__ = [
    # Base
    "BaseRepository",
    # Domain
    "TodoRepository",
    "UserRepository",
]
