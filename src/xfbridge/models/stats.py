"""Models for the ``/api/stats`` response."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict

from xfbridge.models.fields import U64, NumberFromString


class Totals(BaseModel):
    """Content and membership totals."""

    model_config = ConfigDict(frozen=True)

    threads: NumberFromString
    messages: NumberFromString
    users: U64


class LatestUser(BaseModel):
    """
    The most recently registered member.

    Attributes:
        user_id: Numeric user id.
        username: Display name.
        register_date: Registration time as a Unix timestamp.
    """

    model_config = ConfigDict(frozen=True)

    user_id: U64
    username: str
    register_date: U64

    @property
    def registered_at(self) -> datetime:
        """Registration time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.register_date, tz=timezone.utc)


class Online(BaseModel):
    """Visitors online now, split into members and guests."""

    model_config = ConfigDict(frozen=True)

    total: NumberFromString
    members: NumberFromString
    guests: NumberFromString


class StatsResponse(BaseModel):
    """Aggregate forum statistics."""

    model_config = ConfigDict(frozen=True)

    totals: Totals
    latest_user: LatestUser
    online: Online
