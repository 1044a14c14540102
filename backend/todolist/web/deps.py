"""Shared web helpers: per-request collaborators and cross-cutting decorators."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from flask import current_app, g, request

from todolist.core.logger import ensure_request_id
from todolist.core.messages import MessageSource
from todolist.infra.flask_session import FlaskSessionBinding
from todolist.services._shared.base import ServiceContext
from todolist.services._shared.errors import ServiceError
from todolist.web.outcome import Redirect

F = TypeVar("F", bound=Callable[..., Any])

LOGIN_ENDPOINT = "sessions.login_form"


def get_session_binding() -> FlaskSessionBinding:
    """Return the session binding of the current request (created on first use)."""

    binding = g.get("session_binding")
    if binding is None:
        binding = FlaskSessionBinding()
        g.session_binding = binding
    return binding


def get_message_source() -> MessageSource:
    """Return the application-wide message source."""

    return current_app.extensions["messages"]


def get_service_context() -> ServiceContext:
    """Build the request-scoped service context."""

    return ServiceContext(request_id=ensure_request_id(), remote_addr=request.remote_addr)


def translate(key: str, *args: Any) -> str:
    """Resolve ``key`` in the session locale."""

    return get_message_source().get_message(
        key, list(args), locale=get_session_binding().get_locale()
    )


def message_for(error: ServiceError, keys: Mapping[type[ServiceError], str]) -> str | None:
    """Return the localised message an endpoint shows for ``error``.

    Errors carrying an ``email`` pass it as the ``{0}`` parameter. ``None``
    means the endpoint has no form-level message for this error type.
    """

    key = next((k for cls, k in keys.items() if isinstance(error, cls)), None)
    if key is None:
        return None
    email = getattr(error, "email", None)
    args: Sequence[Any] = [email] if email is not None else []
    return translate(key, *args)


def login_required(func: F) -> F:
    """Redirect anonymous sessions to the login page."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        if get_session_binding().get_user() is None:
            return Redirect(LOGIN_ENDPOINT).to_response()
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
