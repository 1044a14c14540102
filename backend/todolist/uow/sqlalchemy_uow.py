"""
SQLAlchemy implementation of UnitOfWork for Flask.
"""

from __future__ import annotations

from sqlalchemy import event
from sqlalchemy.orm import Session

from todolist.core.extensions import db
from todolist.repositories import TodoRepository, UserRepository
from todolist.uow.base import UnitOfWork


class SQLAlchemyRepositoryContainer:
    """Provide repository instances that share a SQLAlchemy session."""

    def __init__(self, *, session: Session) -> None:
        self.session = session
        self.users = UserRepository(session=self.session)
        self.todos = TodoRepository(session=self.session)


class SQLAlchemyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """
    Read-write UoW over the Flask-scoped session.

    Commits when the block exits cleanly and rolls back when it raises, so a
    failed store call leaves no partial write behind.
    """

    def __init__(self) -> None:
        super().__init__(session=db.session)

    def __enter__(self) -> SQLAlchemyUnitOfWork:
        # The session begins lazily on the first statement.
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            try:
                self.commit()
            except Exception:
                self.rollback()
                raise
        else:
            self.rollback()

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


class SQLAlchemyReadOnlyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """
    Read-only UoW over the Flask-scoped session.

    While the block is open any ORM flush carrying new, dirty or deleted
    objects raises ``RuntimeError``; ``commit()`` is refused. Leaving the
    block does not end the transaction, so instances loaded earlier in the
    request stay usable.
    """

    def __init__(self) -> None:
        super().__init__(session=db.session)
        self._guard_installed = False

    def __enter__(self) -> SQLAlchemyReadOnlyUnitOfWork:
        event.listen(self._target(), "before_flush", self._block_writes)
        self._guard_installed = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._guard_installed:
            event.remove(self._target(), "before_flush", self._block_writes)
            self._guard_installed = False

    def commit(self) -> None:
        """
        :raises RuntimeError: always, to prevent accidental writes.
        """
        raise RuntimeError("Read-only UnitOfWork does not allow commit().")

    def rollback(self) -> None:
        self.session.rollback()

    def _target(self) -> Session:
        # Listeners attach to the concrete Session behind the scoped proxy.
        registry = getattr(self.session, "registry", None)
        return registry() if callable(registry) else self.session

    @staticmethod
    def _block_writes(session, flush_context, instances) -> None:
        if session.new or session.dirty or session.deleted:
            raise RuntimeError(
                "Read-only UnitOfWork: ORM flush blocked (new/dirty/deleted objects present)."
            )
