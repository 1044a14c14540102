"""
Unit of Work contract shared by the account services.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from todolist.repositories.todo import TodoRepository
    from todolist.repositories.user import UserRepository


class UnitOfWork(ABC):
    """
    Transaction boundary of one account operation.

    Inside the ``with`` block the services reach the account store through
    ``users`` and the to-do store through ``todos``; both repositories share
    the unit's session. Leaving the block commits (read-write units) or
    discards pending state (read-only units) and rolls back on any error.
    """

    users: UserRepository
    todos: TodoRepository

    @abstractmethod
    def __enter__(self) -> UnitOfWork: ...
    @abstractmethod
    def __exit__(self, exc_type, exc, tb) -> None: ...
    @abstractmethod
    def commit(self) -> None: ...
    @abstractmethod
    def rollback(self) -> None: ...
