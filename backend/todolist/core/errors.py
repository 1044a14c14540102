"""Centralized HTML error pages for the web application."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, render_template
from sqlalchemy.exc import IntegrityError, OperationalError
from werkzeug.exceptions import HTTPException

from todolist.core.logger import ensure_request_id

log = logging.getLogger(__name__)


def _render_error_page(status: int, message: str) -> tuple[str, int]:
    """
    Render ``error.html`` for the given status.

    :param status: HTTP status code.
    :param message: Client-safe explanation (never an internal detail).
    :returns: Flask ``(body, status)`` tuple.
    """
    body = render_template(
        "error.html",
        status=status,
        title=HTTPStatus(status).phrase,
        message=message,
        request_id=ensure_request_id(),
    )
    return body, status


def init_app(app: Flask) -> None:
    """
    Attach error handlers to the Flask app.

    Notes
    -----
    - Every error page carries the correlation ``request_id``.
    - 5xx are logged as errors with ``exc_info``; 4xx as warnings.
    """

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        message = (err.description or HTTPStatus(status).phrase).strip()
        level = log.error if status >= 500 else log.warning
        level(
            "HTTPException: status=%s detail=%s request_id=%s",
            status,
            message,
            ensure_request_id(),
        )
        return _render_error_page(status, message)

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(err: Any):
        log.error("IntegrityError: request_id=%s", ensure_request_id(), exc_info=True)
        return _render_error_page(HTTPStatus.CONFLICT, "The resource was modified concurrently.")

    @app.errorhandler(OperationalError)
    def handle_operational_error(err: Any):
        log.error("OperationalError: request_id=%s", ensure_request_id(), exc_info=True)
        return _render_error_page(
            HTTPStatus.SERVICE_UNAVAILABLE, "Service temporarily unavailable."
        )

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        log.error("Unhandled exception: request_id=%s", ensure_request_id(), exc_info=True)
        return _render_error_page(HTTPStatus.INTERNAL_SERVER_ERROR, "Unexpected error.")
