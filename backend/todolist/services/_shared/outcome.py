"""
Typed service outcomes.

Account operations never raise a :class:`ServiceError` across the service
boundary. They return an :class:`Outcome` that is either a success carrying an
optional payload or a failure carrying the typed error.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, ParamSpec, TypeVar

from todolist.services._shared.errors import ServiceError

T = TypeVar("T")
P = ParamSpec("P")

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """
    Result of a service operation.

    :param value: Payload on success (may be ``None``).
    :type value: T | None
    :param error: Typed failure, ``None`` on success.
    :type error: ServiceError | None
    """

    value: T | None = None
    error: ServiceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ServiceError) -> Outcome[T]:
        return cls(error=error)


def returns_outcome(func: Callable[P, T]) -> Callable[P, Outcome[T]]:
    """Wrap a raising service method so it returns an :class:`Outcome`.

    Only :class:`ServiceError` is captured; anything else (database outages,
    programming errors) keeps propagating to the global error handlers.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[T]:
        try:
            return Outcome.success(func(*args, **kwargs))
        except ServiceError as exc:
            log.info(
                "%s rejected: %s",
                func.__qualname__,
                type(exc).__name__,
                extra={"event": "service.failure"},
            )
            return Outcome.failure(exc)

    return wrapper


__all__ = ["Outcome", "returns_outcome"]
