"""
Transport outcomes returned by the request handlers.

Each handler decides between re-rendering a form with an error, rendering a
view, or redirecting; the outcome turns that decision into a Flask response.
View names map to Jinja templates ``<view>.html``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from flask import Response, redirect, render_template, url_for


@dataclass(frozen=True, slots=True)
class RenderView:
    """Render ``view`` with ``model`` as the template context."""

    view: str
    model: Mapping[str, Any] = field(default_factory=dict)

    def to_response(self) -> str:
        return render_template(f"{self.view}.html", **self.model)


@dataclass(frozen=True, slots=True)
class RenderForm:
    """Re-render the originating form ``view`` with a localised ``error``."""

    view: str
    error: str
    model: Mapping[str, Any] = field(default_factory=dict)

    def to_response(self) -> str:
        return render_template(f"{self.view}.html", error=self.error, **self.model)


@dataclass(frozen=True, slots=True)
class Redirect:
    """Redirect the client to the route registered as ``endpoint``."""

    endpoint: str

    def to_response(self) -> Response:
        return redirect(url_for(self.endpoint))


ViewOutcome = RenderView | RenderForm | Redirect

__all__ = ["RenderForm", "RenderView", "Redirect", "ViewOutcome"]
