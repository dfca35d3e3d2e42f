"""
Request and response models for the authentication endpoints.

Request models (client -> server) are sent as URL-encoded form bodies, so each
exposes ``to_form()``. Secrets are held as ``SecretStr`` and only unwrapped
when the form body is built.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, SecretStr

from xfbridge.models.user import User

# ============================================================================
# REQUEST MODELS (Client → Server)
# ============================================================================


class PasswordCredentials(BaseModel):
    """
    Form body for ``POST /api/auth``.

    Attributes:
        login: Username or email address.
        password: Plain text password.
    """

    model_config = ConfigDict(frozen=True)

    login: str
    password: SecretStr

    def to_form(self) -> dict[str, str]:
        return {"login": self.login, "password": self.password.get_secret_value()}


class SessionCredentials(BaseModel):
    """
    Form body for ``POST /api/auth/from-session``.

    Attributes:
        session_id: Value of the forum's session cookie.
    """

    model_config = ConfigDict(frozen=True)

    session_id: SecretStr

    def to_form(self) -> dict[str, str]:
        return {"session_id": self.session_id.get_secret_value()}


# ============================================================================
# RESPONSE MODELS (Server → Client)
# ============================================================================


class AuthFromSessionResponse(BaseModel):
    """
    Envelope returned by ``/api/auth/from-session``.

    The server answers an unknown or expired session with a normal response
    whose ``user`` is null or missing, so ``user`` is optional here and the
    caller decides what a missing user means.
    """

    model_config = ConfigDict(frozen=True)

    user: User | None = None
