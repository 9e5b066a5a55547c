"""Authentication and session models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Session(BaseModel):
    """Client session snapshot held by the credential store."""

    token: str | None = None
    user: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)


class LoginResult(BaseModel):
    """Payload of ``POST /auth/login``.

    When ``first_login`` or ``must_change_password`` is set the server withholds
    the session and the caller must continue with the first-login flow.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    token: str | None = None
    user: dict[str, Any] | None = None
    first_login: bool = Field(default=False, alias="firstLogin")
    must_change_password: bool = Field(default=False, alias="mustChangePassword")

    @property
    def requires_password_setup(self) -> bool:
        return self.first_login or self.must_change_password


class FirstLoginValidation(BaseModel):
    """Payload of ``GET /auth/first-login/validate``."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    valid: bool = False
    username: str | None = None
    email: str | None = None
