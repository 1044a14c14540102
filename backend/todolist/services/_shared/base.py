# todolist/services/_shared/base.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, is_dataclass
from typing import TYPE_CHECKING, Any

from marshmallow import Schema

from todolist.services._shared.errors import NotAuthenticatedError, ValidationFailedError
from todolist.services._shared.ports.session_binding import SessionBinding
from todolist.uow.sqlalchemy_uow import (
    SQLAlchemyReadOnlyUnitOfWork,
    SQLAlchemyUnitOfWork,
)

if TYPE_CHECKING:
    from todolist.models.user import User


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data.

    :param request_id: Correlation id for logging/tracing.
    :param remote_addr: Client address as seen behind the proxy.
    """

    request_id: str | None = None
    remote_addr: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Provide helpers to run read-only and read-write units of work.
    * Give access to the caller's :class:`SessionBinding`.
    * Offer the shared field-validation helper.

    Notes
    -----
    - Services never touch the global session directly; always use a Unit of Work.
    - The session binding is passed in explicitly, one per client session.
    """

    def __init__(self, session: SessionBinding, *, ctx: ServiceContext | None = None) -> None:
        """
        :param session: Binding of the client session the service acts for.
        :type session: SessionBinding
        :param ctx: Optional request-scoped context (tracing).
        :type ctx: ServiceContext | None
        """
        self.session = session
        self.ctx = ctx or ServiceContext()

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        """Create a read-write Unit of Work."""
        return SQLAlchemyUnitOfWork()

    def ro_uow(self) -> SQLAlchemyReadOnlyUnitOfWork:
        """Create a read-only Unit of Work."""
        return SQLAlchemyReadOnlyUnitOfWork()

    # -------------------------- Session helpers -----------------------------

    def require_user(self) -> User:
        """
        Return the user bound to the session.

        :raises NotAuthenticatedError: When the session is anonymous.
        """
        user = self.session.get_user()
        if user is None:
            raise NotAuthenticatedError()
        return user

    def bind_user(self, user: User) -> None:
        """Bind ``user`` and pin the locale negotiated for this session."""
        self.session.set_user(user)
        self.session.set_locale(self.session.get_locale())

    # -------------------------- Logging helpers -----------------------------

    def log_extra(self, event: str, **fields: Any) -> dict[str, Any]:
        """
        Build the ``extra`` mapping of a service log record.

        :param event: Dotted event name, e.g. ``account.registered``.
        :param fields: Additional structured fields (``user_id``...).
        :returns: ``event`` and ``fields`` plus the context's correlation data.
        """
        return {
            "event": event,
            "request_id": self.ctx.request_id,
            "remote_addr": self.ctx.remote_addr,
            **fields,
        }

    # ----------------------- Validation utilities ---------------------------

    def validate(self, schema: Schema, dto: Any) -> None:
        """
        Run marshmallow field-level validation over a DTO.

        :param schema: Schema whose field names match the DTO attributes.
        :param dto: Dataclass instance or mapping to validate.
        :raises ValidationFailedError: With marshmallow's ``{field: [messages]}``.
        """
        data: Mapping[str, Any] = asdict(dto) if is_dataclass(dto) else dict(dto)
        errors = schema.validate(data)
        if errors:
            raise ValidationFailedError(errors)
