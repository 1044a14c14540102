"""Field-level validation rules for the account forms."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

# Accepts ``local@domain``; the domain may be a single label (``ada@x``).
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"

_required = validate.Length(min=1, error="This field is required.")


def _email_field() -> fields.String:
    return fields.String(
        required=True,
        validate=[
            validate.Length(min=1, max=254),
            validate.Regexp(EMAIL_PATTERN, error="Not a valid email address."),
        ],
    )


class _Blankless(Schema):
    """Schemas whose string fields reject whitespace-only values."""

    def validate(self, data, *, many=None, partial=None):  # type: ignore[override]
        stripped = {
            key: value.strip() if isinstance(value, str) else value
            for key, value in dict(data).items()
        }
        return super().validate(stripped, many=many, partial=partial)


class RegistrationSchema(_Blankless):
    """Registration form: every field required, email well-formed."""

    firstname = fields.String(required=True, validate=[_required, validate.Length(max=100)])
    lastname = fields.String(required=True, validate=[_required, validate.Length(max=100)])
    email = _email_field()
    password = fields.String(required=True, validate=[_required, validate.Length(max=128)])
    confirmation_password = fields.String(required=True, validate=_required)


class PasswordChangeSchema(_Blankless):
    """Password change form: all three fields required."""

    current_password = fields.String(required=True, validate=_required)
    password = fields.String(required=True, validate=[_required, validate.Length(max=128)])
    confirmation_password = fields.String(required=True, validate=_required)


class ProfileUpdateSchema(_Blankless):
    """Profile update form."""

    firstname = fields.String(required=True, validate=[_required, validate.Length(max=100)])
    lastname = fields.String(required=True, validate=[_required, validate.Length(max=100)])
    email = _email_field()


class LoginSchema(_Blankless):
    """Login form."""

    email = _email_field()
    password = fields.String(required=True, validate=_required)
