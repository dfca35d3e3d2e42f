"""Typed exceptions raised by the XenForo bridge client.

Every public operation of :class:`xfbridge.bridge.XfBridge` either returns a
decoded value or raises one of the exceptions below. They share the
:class:`XfBridgeError` base so callers can catch all bridge failures at once,
while still branching on the specific kind:

    try:
        user = await bridge.login_with_session(token)
    except InvalidSession:
        ...  # ask the user to sign in again
    except XfBridgeError:
        ...  # transport, decoding or configuration problem

Messages and attributes never carry the API key, passwords or session tokens.
"""

from __future__ import annotations

from typing import Any


class XfBridgeError(Exception):
    """Base exception for all bridge failures."""


class HeaderEncodingError(XfBridgeError):
    """
    A configuration value cannot be sent as an HTTP header.

    Raised while building the HTTP client, before any request is made.

    Attributes:
        header: Name of the offending header. The value itself is withheld
            because it may be the API key.
    """

    def __init__(self, header: str) -> None:
        super().__init__(f"value for header {header!r} is not valid header text")
        self.header = header


class TransportError(XfBridgeError):
    """
    The request could not be sent or the response could not be received.

    Covers DNS, connection, TLS, timeout and I/O failures as well as URLs the
    transport refuses. The underlying httpx exception is chained as
    ``__cause__``.

    Attributes:
        method: HTTP method of the failed request.
        path: API path of the failed request (e.g. ``"/api/stats"``).
    """

    def __init__(self, method: str, path: str, reason: str) -> None:
        super().__init__(f"{method} {path} failed: {reason}")
        self.method = method
        self.path = path


class DecodeError(XfBridgeError):
    """
    The response body is not JSON or does not match the expected shape.

    The HTTP status is not treated as an error on its own, so an error page
    returned by the server usually ends up here. ``status_code`` lets callers
    tell the two apart.

    Attributes:
        model: Name of the type the body was decoded into.
        status_code: HTTP status code of the response.
        errors: Validation errors with input values stripped.
    """

    def __init__(
        self,
        model: str,
        status_code: int,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.model = model
        self.status_code = status_code
        self.errors = errors or []
        super().__init__(self._format())

    def _format(self) -> str:
        message = f"could not decode {self.model} from response (status {self.status_code})"
        if not self.errors:
            return message
        details = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ())) or '<root>'}: {error.get('msg')}"
            for error in self.errors
        )
        return f"{message}: {details}"


class InvalidSession(XfBridgeError):
    """
    The server did not accept the session token.

    Raised by session login when the response envelope decodes correctly but
    carries no user. This is the one failure with a defined recovery: the
    caller should authenticate the user again.
    """

    def __init__(self) -> None:
        super().__init__("invalid session token")
