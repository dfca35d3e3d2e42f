"""
HTTP client builder for the XenForo bridge.

Every request to the bridge API carries the same set of headers: a fixed
User-Agent, the API key, a form content type and, for super user keys, the id
of the user to act as. ``build_client`` assembles an ``httpx.AsyncClient``
with those defaults so each operation only has to pick a path and a body.

Building a client is purely local: header values are checked and the client
object is allocated, but no connection is opened until a request is sent.
"""

from __future__ import annotations

import re
from typing import Any

import httpx

from xfbridge.config import BridgeConfig
from xfbridge.errors import HeaderEncodingError

# The user agent sent with every request.
USER_AGENT = "xfbridge"

# Header names used by the XenForo REST API.
API_KEY_HEADER = "XF-Api-Key"
API_USER_HEADER = "XF-Api-User"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Visible ASCII plus horizontal tab. Anything else (control characters,
# newlines, non-ASCII text) cannot be placed in a header value.
_HEADER_VALUE = re.compile(r"[\t\x20-\x7e]*")


def encode_header_value(name: str, value: str) -> str:
    """
    Check that ``value`` can be sent as the value of header ``name``.

    Args:
        name: Header name, used only for the error message.
        value: Candidate header value.

    Returns:
        The value unchanged.

    Raises:
        HeaderEncodingError: If the value contains characters that are not
            allowed in a header.
    """
    if not _HEADER_VALUE.fullmatch(value):
        raise HeaderEncodingError(name)
    return value


def build_headers(config: BridgeConfig) -> dict[str, str]:
    """
    Build the default headers for ``config``.

    ``XF-Api-User`` is included only when a super user id is configured;
    otherwise it is left out entirely.

    Raises:
        HeaderEncodingError: If any value is not valid header text.
    """
    headers = {
        "User-Agent": encode_header_value("User-Agent", USER_AGENT),
        API_KEY_HEADER: encode_header_value(API_KEY_HEADER, config.api_key),
        "Content-Type": encode_header_value("Content-Type", FORM_CONTENT_TYPE),
    }
    if config.super_user_id is not None:
        headers[API_USER_HEADER] = encode_header_value(API_USER_HEADER, str(config.super_user_id))
    return headers


def build_client(config: BridgeConfig) -> httpx.AsyncClient:
    """
    Create an ``httpx.AsyncClient`` preconfigured for the bridge API.

    The caller owns the returned client and must close it, typically with
    ``async with build_client(config) as client:``.

    Args:
        config: Bridge configuration supplying the API key, optional super
                user id, timeout and transport.

    Returns:
        A new client with the bridge headers set as defaults.

    Raises:
        HeaderEncodingError: If a header value is invalid. Nothing is
            allocated in that case.
    """
    headers = build_headers(config)

    options: dict[str, Any] = {"headers": headers}
    if config.timeout is not None:
        options["timeout"] = config.timeout
    if config.transport is not None:
        options["transport"] = config.transport

    return httpx.AsyncClient(**options)
