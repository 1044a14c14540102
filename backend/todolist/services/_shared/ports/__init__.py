"""
todolist.services._shared.ports
===============================

*Ports* (hexagonal interfaces) the services depend on.

Modules
-------
- :mod:`session_binding`:
    Defines :class:`~.SessionBinding`, the per-session slot holding the
    logged-in user and the locale, and :class:`~.InMemorySessionBinding`.

Concrete adapters (e.g. the Flask cookie session) live under
``todolist.infra``.
"""

from __future__ import annotations

from .session_binding import InMemorySessionBinding, SessionBinding

__all__ = [
    "SessionBinding",
    "InMemorySessionBinding",
]
