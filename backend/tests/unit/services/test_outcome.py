"""Tests for Outcome and the returns_outcome decorator."""

from __future__ import annotations

import pytest

from todolist.services._shared.errors import NotFoundError, ServiceError
from todolist.services._shared.outcome import Outcome, returns_outcome


def test_success_and_failure_constructors() -> None:
    ok = Outcome.success(42)
    ko = Outcome.failure(NotFoundError("User", 1))

    assert ok.ok and ok.value == 42
    assert not ko.ok and ko.value is None
    assert str(ko.error) == "User not found: 1"


def test_decorator_wraps_return_value() -> None:
    @returns_outcome
    def compute(x: int) -> int:
        return x * 2

    assert compute(21) == Outcome.success(42)


def test_decorator_captures_service_errors() -> None:
    @returns_outcome
    def fail() -> None:
        raise ServiceError("nope")

    outcome = fail()
    assert not outcome.ok
    assert str(outcome.error) == "nope"


def test_decorator_lets_other_errors_propagate() -> None:
    @returns_outcome
    def crash() -> None:
        raise KeyError("bug")

    with pytest.raises(KeyError):
        crash()
