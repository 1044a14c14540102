"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

from flask import Flask

from todolist.core.config import BaseConfig, get_config
from todolist.core.logger import configure_logging, init_app as init_logging


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    :param config: Config object, class or import path; defaults to the class
        selected by ``APP_ENV``.
    :param instance_relative_config: Load ``instance/<instance_config_filename>``
        on top of ``config`` when present.
    :returns: The configured application.
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from todolist.core import proxy

    proxy.init_app(app)

    from todolist.core import extensions

    extensions.init_app(app)

    init_logging(app)

    from todolist.web import init_app as init_web

    init_web(app)

    from todolist.core import errors

    errors.init_app(app)

    from todolist import cli as app_cli

    app_cli.init_app(app)

    return app
