"""Todo item owned by a user."""

from __future__ import annotations

import enum
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, Enum, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from todolist.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .user import User


class Status(str, enum.Enum):
    """Lifecycle state of a todo item."""

    TODO = "TODO"
    DONE = "DONE"


class Priority(str, enum.Enum):
    """Relative urgency of a todo item."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Todo(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    A single entry of a user's todo list.

    Only ``user_id`` and ``status`` matter to the account pages, which count
    items per status.
    """

    __tablename__ = "todos"

    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    priority: Mapped[Priority] = mapped_column(
        Enum(Priority, name="todo_priority", native_enum=False),
        nullable=False,
        default=Priority.MEDIUM,
    )
    status: Mapped[Status] = mapped_column(
        Enum(Status, name="todo_status", native_enum=False),
        nullable=False,
        default=Status.TODO,
    )

    owner: Mapped[User] = relationship(back_populates="todos")

    __table_args__ = (
        Index("ix_todos_user_id", "user_id"),
        Index("ix_todos_user_id_status", "user_id", "status"),
    )
