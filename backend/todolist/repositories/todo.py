"""Todo repository exposing the read surface used by the account pages."""

from __future__ import annotations

from sqlalchemy import select

from todolist.models.todo import Status, Todo
from todolist.repositories.base import BaseRepository


class TodoRepository(BaseRepository[Todo]):
    """Persistence-only repository for :class:`Todo`.

    Listings are ordered by due date (undated last) then id so pages render
    stably; callers must not rely on any order.
    """

    model = Todo

    def _filterable_fields(self):
        return {"user_id": Todo.user_id, "status": Todo.status}

    def list_by_user(self, user_id: int) -> list[Todo]:
        """Return every todo owned by ``user_id``."""
        stmt = (
            select(Todo)
            .where(Todo.user_id == user_id)
            .order_by(Todo.due_date.is_(None), Todo.due_date.asc(), Todo.id.asc())
        )
        return list(self.session.execute(stmt).scalars().all())

    def list_by_user_and_status(self, user_id: int, status: Status) -> list[Todo]:
        """Return the todos of ``user_id`` currently in ``status``."""
        stmt = (
            select(Todo)
            .where(Todo.user_id == user_id, Todo.status == status)
            .order_by(Todo.due_date.is_(None), Todo.due_date.asc(), Todo.id.asc())
        )
        return list(self.session.execute(stmt).scalars().all())

    def count_by_user(self, user_id: int, status: Status | None = None) -> int:
        """Count the todos of ``user_id``, optionally restricted to ``status``.

        :param user_id: Owner identifier.
        :type user_id: int
        :param status: Optional status filter.
        :type status: Status | None
        :returns: Number of matching rows.
        :rtype: int
        """
        if status is None:
            return self.count(user_id=user_id)
        return self.count(user_id=user_id, status=status)
