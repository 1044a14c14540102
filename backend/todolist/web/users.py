"""Account endpoints: registration, home page and account management."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from flask import Blueprint, request
from werkzeug.exceptions import InternalServerError

from todolist.services._shared.errors import (
    CurrentPasswordIncorrectError,
    EmailAlreadyRegisteredError,
    NotAuthenticatedError,
    PasswordConfirmationMismatchError,
    ServiceError,
    ValidationFailedError,
)
from todolist.services._shared.outcome import Outcome
from todolist.services.accounts.dto import (
    PasswordChangeIn,
    ProfileUpdateIn,
    RegistrationIn,
    UserPublicOut,
)
from todolist.services.accounts.service import AccountService
from todolist.web.deps import (
    LOGIN_ENDPOINT,
    get_service_context,
    get_session_binding,
    login_required,
    message_for,
    timing,
)
from todolist.web.outcome import Redirect, RenderForm, RenderView, ViewOutcome

log = logging.getLogger(__name__)

bp = Blueprint("users", __name__)

# Form-level message shown for each failure, per endpoint.
REGISTER_MESSAGES: Mapping[type[ServiceError], str] = {
    ValidationFailedError: "register.error.global",
    PasswordConfirmationMismatchError: "register.error.password.confirmation.error",
    EmailAlreadyRegisteredError: "register.error.global.account",
}
PASSWORD_MESSAGES: Mapping[type[ServiceError], str] = {
    ValidationFailedError: "account.password.error.global",
    PasswordConfirmationMismatchError: "account.password.confirmation.error",
    CurrentPasswordIncorrectError: "account.password.error",
}
UPDATE_MESSAGES: Mapping[type[ServiceError], str] = {
    ValidationFailedError: "account.update.error.global",
    EmailAlreadyRegisteredError: "account.email.alreadyUsed",
}


def _accounts() -> AccountService:
    return AccountService(get_session_binding(), ctx=get_service_context())


def _failure(
    outcome: Outcome[Any],
    view: str,
    messages: Mapping[type[ServiceError], str],
    model: Mapping[str, Any] | None = None,
) -> ViewOutcome:
    """Translate a failed outcome into the endpoint's transport outcome.

    :raises InternalServerError: For errors the endpoint has no message for.
    """
    error = outcome.error
    if error is None:
        raise InternalServerError()
    if isinstance(error, NotAuthenticatedError):
        return Redirect(LOGIN_ENDPOINT)
    message = message_for(error, messages)
    if message is None:
        log.error("Unmapped service failure on %s: %r", request.endpoint, error)
        raise InternalServerError()
    return RenderForm(view, message, model or {})


def _form_values(*names: str) -> dict[str, str]:
    return {name: request.form.get(name, "") for name in names}


# --------------------------------------------------------------------------- #
# Registration
# --------------------------------------------------------------------------- #


@bp.get("/register")
@timing
def register_form():
    return RenderView("user/register", {"form": {}}).to_response()


@bp.post("/register.do")
@timing
def register():
    form = request.form
    dto = RegistrationIn(
        firstname=form.get("firstname", ""),
        lastname=form.get("lastname", ""),
        email=form.get("email", ""),
        password=form.get("password", ""),
        confirmation_password=form.get("confirmationPassword", ""),
    )
    outcome = _accounts().register(dto)
    if outcome.ok:
        return Redirect("users.home").to_response()
    echoed = _form_values("firstname", "lastname", "email")
    return _failure(outcome, "user/register", REGISTER_MESSAGES, {"form": echoed}).to_response()


# --------------------------------------------------------------------------- #
# Home
# --------------------------------------------------------------------------- #


@bp.get("/user/todos")
@login_required
@timing
def home():
    outcome = _accounts().home()
    if not outcome.ok:
        return _failure(outcome, "user/home", {}).to_response()
    return RenderView("user/home", {"todo_list": outcome.value}).to_response()


# --------------------------------------------------------------------------- #
# Account
# --------------------------------------------------------------------------- #


@bp.get("/user/account")
@login_required
@timing
def account():
    outcome = _accounts().account_summary()
    if not outcome.ok:
        return _failure(outcome, "user/account/details", {}).to_response()
    summary = outcome.value
    if summary is None:
        raise InternalServerError()
    return RenderView(
        "user/account/details",
        {
            "user": summary.user,
            "total_count": summary.total_count,
            "todo_count": summary.todo_count,
            "done_count": summary.done_count,
        },
    ).to_response()


@bp.get("/user/account/delete")
@login_required
@timing
def delete_form():
    return RenderView("user/account/delete").to_response()


@bp.post("/user/account/delete.do")
@login_required
@timing
def delete_account():
    outcome = _accounts().delete_account()
    if not outcome.ok:
        return _failure(outcome, "user/account/delete", {}).to_response()
    return RenderView("index").to_response()


@bp.get("/user/account/password")
@login_required
@timing
def password_form():
    return RenderView("user/account/password").to_response()


@bp.post("/user/account/password.do")
@login_required
@timing
def change_password():
    form = request.form
    dto = PasswordChangeIn(
        current_password=form.get("currentpassword", ""),
        password=form.get("password", ""),
        confirmation_password=form.get("confirmpassword", ""),
    )
    outcome = _accounts().change_password(dto)
    if outcome.ok:
        return Redirect("users.account").to_response()
    return _failure(outcome, "user/account/password", PASSWORD_MESSAGES).to_response()


@bp.get("/user/account/update")
@login_required
@timing
def update_form():
    user = get_session_binding().get_user()
    if user is None:
        return Redirect(LOGIN_ENDPOINT).to_response()
    public = UserPublicOut.from_model(user)
    form = {"firstname": public.firstname, "lastname": public.lastname, "email": public.email}
    return RenderView("user/account/update", {"user": public, "form": form}).to_response()


@bp.post("/user/account/update.do")
@login_required
@timing
def update_profile():
    form = request.form
    dto = ProfileUpdateIn(
        firstname=form.get("firstname", ""),
        lastname=form.get("lastname", ""),
        email=form.get("email", ""),
    )
    outcome = _accounts().update_profile(dto)
    if outcome.ok:
        return Redirect("users.account").to_response()
    echoed = _form_values("firstname", "lastname", "email")
    return _failure(outcome, "user/account/update", UPDATE_MESSAGES, {"form": echoed}).to_response()
