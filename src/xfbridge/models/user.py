"""User payload returned by the authentication endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from xfbridge.models.fields import U64


class User(BaseModel):
    """
    A XenForo user as returned by ``/api/auth`` and ``/api/auth/from-session``.

    Only ``user_id`` and ``username`` are required. Every other field the
    server sends (avatar URLs, group ids, permissions, ...) is kept as-is and
    is reachable by attribute access or through ``model_extra``.

    Attributes:
        user_id: Numeric user id.
        username: Display name.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    user_id: U64
    username: str
