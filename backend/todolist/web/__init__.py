"""Server-rendered web layer (Flask blueprints and template helpers)."""

from __future__ import annotations

from flask import Flask, g

from todolist.core.messages import MessageSource


def init_app(app: Flask) -> None:
    """Register blueprints, the message source and the template context."""

    from todolist.web import sessions, users
    from todolist.web.deps import get_session_binding, translate

    app.extensions["messages"] = MessageSource(default_locale=app.config.get("DEFAULT_LOCALE", "en"))

    app.register_blueprint(sessions.bp)
    app.register_blueprint(users.bp)

    @app.before_request
    def _fresh_session_binding() -> None:
        # One binding per request, even when an outer app context is reused.
        g.pop("session_binding", None)

    @app.context_processor
    def _template_helpers():
        # Resolved lazily; error pages never touch the store.
        binding = get_session_binding()
        return {
            "t": translate,
            "current_user": binding.get_user,
            "current_locale": binding.get_locale,
        }


__all__ = ["init_app"]
