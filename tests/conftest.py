"""
Shared pytest fixtures for the xfbridge test suite.

HTTP traffic is mocked with respx, which intercepts every httpx client the
bridge builds, so no test touches the network.
"""

import copy
from typing import Any

import pytest

from tests.constants import API_KEY, BASE_URL, STATS_PAYLOAD
from xfbridge import XfBridge

# ============================================================================
# BRIDGE FIXTURES
# ============================================================================


@pytest.fixture
def bridge() -> XfBridge:
    """Create a bridge without a super user id."""
    return XfBridge(BASE_URL, API_KEY)


@pytest.fixture
def super_user_bridge() -> XfBridge:
    """Create a bridge acting as user 7."""
    return XfBridge(BASE_URL, API_KEY, super_user_id=7)


# ============================================================================
# PAYLOAD FIXTURES
# ============================================================================


@pytest.fixture
def stats_payload() -> dict[str, Any]:
    """A fresh copy of a valid stats response body, safe to mutate."""
    return copy.deepcopy(STATS_PAYLOAD)
