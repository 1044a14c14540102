"""Idempotent demo account and todos for local development."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, cast

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import select
from sqlalchemy.orm import Session

from todolist.models.todo import Priority, Status, Todo
from todolist.models.user import User, normalize_email

LOGGER = logging.getLogger(__name__)

USER_FIXTURES: list[dict[str, str]] = [
    {
        "email": "ada.lovelace@example.com",
        "firstname": "Ada",
        "lastname": "Lovelace",
        "password": "analytical1843",
    },
    {
        "email": "alan.turing@example.com",
        "firstname": "Alan",
        "lastname": "Turing",
        "password": "enigma1936",
    },
]

# Due dates are offsets in days from the seeding date.
TODO_FIXTURES: list[dict[str, Any]] = [
    {
        "user_email": "ada.lovelace@example.com",
        "title": "Write the notes on the Analytical Engine",
        "due_in": 3,
        "priority": Priority.HIGH,
        "status": Status.TODO,
    },
    {
        "user_email": "ada.lovelace@example.com",
        "title": "Translate Menabrea's article",
        "due_in": -10,
        "priority": Priority.MEDIUM,
        "status": Status.DONE,
    },
    {
        "user_email": "ada.lovelace@example.com",
        "title": "Compute Bernoulli numbers",
        "due_in": None,
        "priority": Priority.LOW,
        "status": Status.TODO,
    },
    {
        "user_email": "alan.turing@example.com",
        "title": "Submit 'On Computable Numbers'",
        "due_in": 7,
        "priority": Priority.HIGH,
        "status": Status.TODO,
    },
]


def _session(database: SQLAlchemy) -> Session:
    """Return the current SQLAlchemy session."""
    return cast(Session, database.session)


def _touch(summary: dict[str, dict[str, int]], table: str, created: bool) -> None:
    """Update summary counters for the given table."""
    entry = summary.setdefault(table, {"created": 0, "existing": 0})
    entry["created" if created else "existing"] += 1


def seed_users_and_todos(
    database: SQLAlchemy, *, verbose: bool = False, today: date | None = None
) -> dict[str, dict[str, int]]:
    """Create the demo users and their todos; existing rows are left alone."""
    if verbose:
        LOGGER.info("Seeding demo users and todos...")
    today = today or date.today()
    session = _session(database)
    summary: dict[str, dict[str, int]] = {}
    users: dict[str, User] = {}

    for fixture in USER_FIXTURES:
        email = normalize_email(fixture["email"])
        user = session.execute(select(User).filter_by(email=email)).scalar_one_or_none()
        created = user is None
        if user is None:
            user = User(
                email=email,
                firstname=fixture["firstname"],
                lastname=fixture["lastname"],
                password=fixture["password"],
            )
            session.add(user)
            session.flush()
        users[email] = user
        _touch(summary, "users", created)

    for fixture in TODO_FIXTURES:
        owner = users[normalize_email(fixture["user_email"])]
        todo = session.execute(
            select(Todo).filter_by(user_id=owner.id, title=fixture["title"])
        ).scalar_one_or_none()
        created = todo is None
        if todo is None:
            due_in = fixture["due_in"]
            todo = Todo(
                user_id=owner.id,
                title=fixture["title"],
                due_date=today + timedelta(days=due_in) if due_in is not None else None,
                priority=fixture["priority"],
                status=fixture["status"],
            )
            session.add(todo)
        _touch(summary, "todos", created)

    session.commit()
    return summary


def run_all(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Run every seeder in foreign-key order."""
    return seed_users_and_todos(database, verbose=verbose)


__all__ = ["USER_FIXTURES", "TODO_FIXTURES", "run_all", "seed_users_and_todos"]
