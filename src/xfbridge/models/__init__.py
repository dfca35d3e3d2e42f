"""
Typed models for XenForo bridge requests and responses.

Request models are serialized to URL-encoded form bodies; response models are
validated from JSON with pydantic.
"""

from xfbridge.models.auth import AuthFromSessionResponse, PasswordCredentials, SessionCredentials
from xfbridge.models.fields import U64, U64_MAX, NumberFromString
from xfbridge.models.stats import LatestUser, Online, StatsResponse, Totals
from xfbridge.models.user import User

__all__ = [
    "AuthFromSessionResponse",
    "LatestUser",
    "NumberFromString",
    "Online",
    "PasswordCredentials",
    "SessionCredentials",
    "StatsResponse",
    "Totals",
    "U64",
    "U64_MAX",
    "User",
]
