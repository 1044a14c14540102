"""Session endpoints: landing page, login and logout."""

from __future__ import annotations

from flask import Blueprint, request

from todolist.services.auth.dto import LoginIn
from todolist.services.auth.service import AuthService
from todolist.web.deps import get_service_context, get_session_binding, timing, translate
from todolist.web.outcome import Redirect, RenderForm, RenderView

bp = Blueprint("sessions", __name__)


def _auth() -> AuthService:
    return AuthService(get_session_binding(), ctx=get_service_context())


@bp.get("/")
@timing
def index():
    return RenderView("index").to_response()


@bp.get("/login")
@timing
def login_form():
    if get_session_binding().get_user() is not None:
        return Redirect("users.home").to_response()
    return RenderView("login", {"form": {}}).to_response()


@bp.post("/login.do")
@timing
def login():
    dto = LoginIn(email=request.form.get("email", ""), password=request.form.get("password", ""))
    outcome = _auth().login(dto)
    if outcome.ok:
        return Redirect("users.home").to_response()
    form = {"email": dto.email}
    return RenderForm("login", translate("login.error.global"), {"form": form}).to_response()


@bp.get("/logout")
@timing
def logout():
    _auth().logout()
    return RenderView("index").to_response()
