"""
The XenForo bridge facade.

``XfBridge`` is the single entry point of the library. It holds the
configuration and exposes three independent coroutines:

    bridge = XfBridge("https://forum.example.com", api_key="...", super_user_id=1)

    stats = await bridge.get_stats()
    user = await bridge.login_with_name_and_password("alice", "hunter2")
    user = await bridge.login_with_session(session_cookie)

Each call builds its own HTTP client, sends one request and closes the client
again, so an instance holds no connection state and may be shared freely
between concurrent tasks. Nothing is retried; every failure is raised to the
caller as a subclass of :class:`xfbridge.errors.XfBridgeError`.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from xfbridge.client import build_client
from xfbridge.config import BridgeConfig
from xfbridge.errors import DecodeError, InvalidSession, TransportError
from xfbridge.models.auth import AuthFromSessionResponse, PasswordCredentials, SessionCredentials
from xfbridge.models.stats import StatsResponse
from xfbridge.models.user import User

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

STATS_PATH = "/api/stats"
AUTH_PATH = "/api/auth"
AUTH_FROM_SESSION_PATH = "/api/auth/from-session"


class XfBridge:
    """
    Async client for the XenForo bridge API.

    Args:
        base_url: Forum root URL, without a trailing slash.
        api_key: XenForo API key.
        super_user_id: Id of the user to act as when ``api_key`` is a super
                       user key.
        timeout: Optional request timeout in seconds.
        transport: Optional httpx transport for every request.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        super_user_id: int | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = BridgeConfig(
            base_url=base_url,
            api_key=api_key,
            super_user_id=super_user_id,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(cls, config: BridgeConfig) -> XfBridge:
        """Create a bridge from an existing configuration."""
        return cls(
            config.base_url,
            config.api_key,
            config.super_user_id,
            timeout=config.timeout,
            transport=config.transport,
        )

    @property
    def config(self) -> BridgeConfig:
        return self._config

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._config.base_url!r})"

    # -------------------------------------------------------------------------
    # Public operations
    # -------------------------------------------------------------------------

    async def get_stats(self) -> StatsResponse:
        """
        Fetch the forum statistics.

        Returns:
            StatsResponse: Totals, latest registered user and online counts.

        Raises:
            HeaderEncodingError: If the configuration cannot be sent as headers.
            TransportError: If the request fails to complete.
            DecodeError: If the body does not match ``StatsResponse``.
        """
        response = await self._send("GET", STATS_PATH)
        return self._decode(response, StatsResponse)

    async def login_with_name_and_password(self, username: str, password: str) -> User:
        """
        Authenticate a user by name (or email) and password.

        Args:
            username: The login name.
            password: The password.

        Returns:
            User: The authenticated user.

        Raises:
            HeaderEncodingError: If the configuration cannot be sent as headers.
            TransportError: If the request fails to complete.
            DecodeError: If the body is not a user. This includes rejected
                credentials; ``DecodeError.status_code`` carries the HTTP
                status the server answered with.
        """
        credentials = PasswordCredentials(login=username, password=password)
        response = await self._send("POST", AUTH_PATH, form=credentials.to_form())
        return self._decode(response, User)

    async def login_with_session(self, session: str) -> User:
        """
        Authenticate a user from a forum session token.

        Args:
            session: Value of the forum's session cookie.

        Returns:
            User: The user owning the session.

        Raises:
            InvalidSession: If the server does not recognise the session.
            HeaderEncodingError: If the configuration cannot be sent as headers.
            TransportError: If the request fails to complete.
            DecodeError: If the body is not a session envelope.
        """
        credentials = SessionCredentials(session_id=session)
        response = await self._send("POST", AUTH_FROM_SESSION_PATH, form=credentials.to_form())
        envelope = self._decode(response, AuthFromSessionResponse)

        if envelope.user is None:
            logger.warning("Session login rejected by %s", self._config.base_url)
            raise InvalidSession()

        return envelope.user

    # -------------------------------------------------------------------------
    # Request helpers
    # -------------------------------------------------------------------------

    async def _send(
        self,
        method: str,
        path: str,
        form: dict[str, str] | None = None,
    ) -> httpx.Response:
        """
        Send one request with a freshly built client and read the body.

        Raises:
            HeaderEncodingError: From client construction.
            TransportError: If httpx fails to send or receive.
        """
        url = f"{self._config.base_url}{path}"
        logger.debug("%s %s", method, url)

        async with build_client(self._config) as client:
            try:
                response = await client.request(method, url, data=form)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise TransportError(method, path, str(e) or type(e).__name__) from e

        logger.debug("%s %s -> %d", method, url, response.status_code)
        return response

    @staticmethod
    def _decode(response: httpx.Response, model: type[ModelT]) -> ModelT:
        """
        Validate the response body as ``model``, ignoring the HTTP status.

        Raises:
            DecodeError: If the body is not valid JSON for ``model``.
        """
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            errors: list[dict[str, Any]] = [
                dict(error) for error in e.errors(include_input=False, include_url=False)
            ]
            raise DecodeError(model.__name__, response.status_code, errors) from e
