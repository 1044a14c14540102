"""Tests for the ``flask seed`` command group."""

from __future__ import annotations

from todolist.models.todo import Status
from todolist.repositories.todo import TodoRepository
from todolist.repositories.user import UserRepository
from todolist.seeds.demo import TODO_FIXTURES, USER_FIXTURES


def test_seed_demo_is_idempotent(app, session):
    runner = app.test_cli_runner()

    first = runner.invoke(args=["seed", "demo"])
    second = runner.invoke(args=["seed", "demo"])

    assert first.exit_code == 0, first.output
    assert second.exit_code == 0, second.output
    assert f"created={len(USER_FIXTURES):>2}" in first.output
    assert "created= 0" in second.output

    users = UserRepository()
    assert users.count() == len(USER_FIXTURES)
    ada = users.get_by_email("ada.lovelace@example.com")
    assert ada.verify_password("analytical1843")
    todos = TodoRepository()
    assert todos.count() == len(TODO_FIXTURES)
    assert todos.count_by_user(ada.id, Status.DONE) == 1


def test_seed_fresh_refused_in_production(app, session, monkeypatch):
    monkeypatch.setitem(app.config, "APP_ENV", "production")
    monkeypatch.setitem(app.config, "TESTING", False)

    result = app.test_cli_runner().invoke(args=["seed", "fresh", "--yes"])

    assert result.exit_code != 0
    assert "non-production" in result.output
