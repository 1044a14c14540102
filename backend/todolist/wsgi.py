"""WSGI entry point (``gunicorn todolist.wsgi:app``)."""

from __future__ import annotations

from todolist import create_app

app = create_app()
