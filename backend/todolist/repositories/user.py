"""User repository: the account store."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from todolist.models.user import User, normalize_email
from todolist.repositories.base import BaseRepository
from todolist.services._shared.errors import DuplicateEmailError, NotFoundError, violates


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    Email uniqueness is checked before every write and enforced again by the
    ``uq_users_email`` constraint, whose violation is mapped to
    :class:`DuplicateEmailError`. The repository never commits.
    """

    model = User

    def _filterable_fields(self):
        return {"id": User.id, "email": User.email}

    def _updatable_fields(self):
        """Profile fields; the password goes through the model setter."""
        return {"email", "firstname", "lastname"}

    # ---------------------------- Lookup helpers ----------------------------

    def get_by_email(self, email: str) -> User | None:
        """Fetch a user by normalized email.

        :param email: Email address to normalise and search.
        :type email: str
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        stmt = select(User).where(User.email == normalize_email(email))
        result = self.session.execute(stmt).scalars().first()
        return cast(User | None, result)

    def exists_by_email(self, email: str) -> bool:
        """Return ``True`` when a user with the provided email exists."""
        stmt = select(User.id).where(User.email == normalize_email(email))
        return self.session.execute(stmt).first() is not None

    # ---------------------------- Store operations ----------------------------

    def create(self, candidate: User) -> User:
        """Persist a new user and return it with its identity assigned.

        :param candidate: Transient user (no id yet).
        :type candidate: User
        :returns: The same instance after flush.
        :rtype: User
        :raises DuplicateEmailError: If another user already has the email.
        """
        with self.session.no_autoflush:
            if self.exists_by_email(candidate.email):
                raise DuplicateEmailError(candidate.email)
        try:
            return self.add(candidate)
        except IntegrityError as exc:
            if violates(exc, "uq_users_email"):
                raise DuplicateEmailError(candidate.email) from exc
            raise

    def update(self, user: User, **fields) -> User:
        """Persist the mutable fields of an existing user.

        ``fields`` are assigned first (whitelisted); with no ``fields`` the
        instance is flushed as already mutated by the caller.

        :raises NotFoundError: If no row carries ``user.id`` anymore.
        :raises DuplicateEmailError: If the email now belongs to another user.
        """
        if fields:
            self.assign_updates(user, fields, flush=False)
        with self.session.no_autoflush:
            if user.id is None or not self.exists(id=user.id):
                raise NotFoundError("User", user.id)
            clash = self.session.execute(
                select(User.id).where(User.email == user.email, User.id != user.id)
            ).first()
            if clash is not None:
                raise DuplicateEmailError(user.email)
        self.session.add(user)
        try:
            self.flush()
        except IntegrityError as exc:
            if violates(exc, "uq_users_email"):
                raise DuplicateEmailError(user.email) from exc
            raise
        return user

    def remove(self, user: User) -> None:
        """Delete the user (and its todos) by identity.

        :raises NotFoundError: If the row is already gone.
        """
        if user.id is None or not self.exists(id=user.id):
            raise NotFoundError("User", user.id)
        if user not in self.session:
            user = self.session.merge(user)
        self.delete(user)
