"""
Configuration for the XenForo bridge client.

All settings are passed explicitly by the embedding application; nothing is
read from the environment or from files. The configuration is immutable once
created, so a single :class:`BridgeConfig` can be shared by concurrent calls.

Example:
    config = BridgeConfig(
        base_url="https://forum.example.com",
        api_key="secret",
        super_user_id=1,
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx


@dataclass(frozen=True)
class BridgeConfig:
    """
    Immutable configuration container for :class:`xfbridge.bridge.XfBridge`.

    Attributes:
        base_url: Forum root URL (e.g., "https://forum.example.com").
                  Used as given; should NOT include a trailing slash.
        api_key: XenForo API key sent with every request. Hidden from repr.
        super_user_id: User id to act as when ``api_key`` is a super user key.
                       None sends no ``XF-Api-User`` header.
        timeout: Request timeout in seconds. None keeps the httpx default.
        transport: Optional httpx transport used by every client built from
                   this configuration (for tests or custom networking).
    """

    base_url: str
    api_key: str = field(repr=False)
    super_user_id: int | None = None
    timeout: float | None = None
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        """
        Validate configuration values after initialization.

        The base URL is deliberately not checked here; a malformed URL
        surfaces as a transport error when a request is made.

        Raises:
            ValueError: If super_user_id is not a non-negative integer or
                        timeout is not positive.
        """
        if self.super_user_id is not None:
            # bool is an int subclass but never a user id
            if isinstance(self.super_user_id, bool) or not isinstance(self.super_user_id, int):
                raise ValueError("super_user_id must be an integer")
            if self.super_user_id < 0:
                raise ValueError("super_user_id cannot be negative")

        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be a positive number")
