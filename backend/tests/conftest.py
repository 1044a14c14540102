"""Pytest fixtures configuring an isolated transactional database layer.

Each test runs inside an outer transaction against an in-memory SQLite
database. The session under test joins it through SAVEPOINTs, so service code
may ``commit()`` freely while nothing leaks between cases.
"""

from __future__ import annotations

import os

import pytest
from sqlalchemy import event
from sqlalchemy.orm import scoped_session, sessionmaker

from todolist.core.config import TestingConfig
from todolist.core.extensions import db as _db  # Flask-SQLAlchemy instance
from todolist.factory import create_app  # application factory under test
from todolist.services._shared.ports.session_binding import InMemorySessionBinding


@pytest.fixture(scope="session")
def app():
    """Create a Flask application configured for testing.

    Returns
    -------
    flask.Flask
        Application instance with :class:`TestingConfig` applied.
    """
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    app = create_app(TestingConfig, instance_relative_config=False)
    app.logger.setLevel("WARNING")
    return app


def _enable_sqlite_savepoints(engine) -> None:
    """Let pysqlite nest SAVEPOINTs inside an explicit outer transaction.

    pysqlite defers BEGIN on its own, so releasing the first SAVEPOINT would
    commit. Its implicit transaction handling is disabled and SQLAlchemy emits
    BEGIN itself.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")


@pytest.fixture(scope="session")
def db(app):
    """Create database tables once per test session.

    Yields
    ------
    flask_sqlalchemy.SQLAlchemy
        Database extension bound to the testing application.
    """
    with app.app_context():
        _enable_sqlite_savepoints(_db.engine)
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope="session")
def connection(db):
    """Keep a dedicated connection open for the whole session.

    Yields
    ------
    sqlalchemy.engine.Connection
        Connection carrying the per-test outer transaction.
    """
    conn = db.engine.connect()
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(scope="function")
def session(db, connection):
    """Provide a scoped session joined to a per-test outer transaction.

    Yields
    ------
    sqlalchemy.orm.scoping.scoped_session
        Session bound to the shared connection; rolled back after each test.

    Notes
    -----
    ``join_transaction_mode="create_savepoint"`` makes ``session.commit()``
    release a SAVEPOINT and ``session.rollback()`` roll back to it, never
    touching the outer transaction. ``autoflush`` is off like the app session.
    """
    outer = connection.begin()

    factory = sessionmaker(
        bind=connection,
        join_transaction_mode="create_savepoint",
        autoflush=False,
    )
    scoped = scoped_session(factory)

    # App code resolves ``db.session`` at call time.
    original_session = db.session
    db.session.remove()
    db.session = scoped

    try:
        yield scoped
    finally:
        scoped.remove()
        db.session = original_session
        outer.rollback()


@pytest.fixture
def client(app, session):
    """Flask test client sharing the transactional session."""
    return app.test_client()


@pytest.fixture
def binding():
    """Fresh in-memory session binding (one simulated browser session)."""
    return InMemorySessionBinding()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


# -- Hook up Factory Boy to pytest SQLAlchemy session --------------------------
@pytest.fixture(autouse=True)
def _factories_session(session):
    """Wire Factory Boy's session helper to the transactional session fixture."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(session)
    yield
    SQLAlchemySession.set(None)
