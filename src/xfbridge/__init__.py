"""xfbridge: an async client for the XenForo bridge API.

Authenticates forum users (by password or by session token) and fetches the
forum's aggregate statistics, decoding responses into typed, immutable models.

    from xfbridge import XfBridge, InvalidSession

    bridge = XfBridge("https://forum.example.com", api_key="...")
    stats = await bridge.get_stats()

Version Management
------------------
``__version__`` is read from the installed package metadata; the single source
of truth is the ``version`` field in ``pyproject.toml``.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from xfbridge.bridge import XfBridge
from xfbridge.client import USER_AGENT, build_client
from xfbridge.config import BridgeConfig
from xfbridge.errors import (
    DecodeError,
    HeaderEncodingError,
    InvalidSession,
    TransportError,
    XfBridgeError,
)
from xfbridge.models import (
    LatestUser,
    Online,
    PasswordCredentials,
    SessionCredentials,
    StatsResponse,
    Totals,
    User,
)

try:
    __version__: str = version("xfbridge")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = [
    "USER_AGENT",
    "BridgeConfig",
    "DecodeError",
    "HeaderEncodingError",
    "InvalidSession",
    "LatestUser",
    "Online",
    "PasswordCredentials",
    "SessionCredentials",
    "StatsResponse",
    "Totals",
    "TransportError",
    "User",
    "XfBridge",
    "XfBridgeError",
    "__version__",
    "build_client",
]
