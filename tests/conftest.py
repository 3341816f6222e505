"""Pytest configuration and shared fixtures.

This module contains pytest configuration and shared fixtures used
across all test files.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from moz_analytics.client.moz_client import MozApiClient
from moz_analytics.tools import moz_tools
from tests.fixtures.sample_data import rpc_body


@pytest.fixture
def client() -> MozApiClient:
    """Create a client with a raw token."""
    return MozApiClient("test-token")


@pytest.fixture
def mock_post(client: MozApiClient) -> AsyncMock:
    """Replace the HTTP post of the client's transport.

    The mock answers every request with ``{"result": {"a": 1}}`` unless the
    test changes its return value or side effect.
    """
    post = AsyncMock(return_value=(200, rpc_body(result={"a": 1})))
    client.transport._post = post
    return post


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock MozApiClient whose calls all succeed."""
    mock = MagicMock(spec=MozApiClient)
    mock.default_locale = "en-US"
    mock.get_site_metrics = AsyncMock(return_value={"site_metrics": {"domain_authority": 40}})
    mock.get_site_brand_authority = AsyncMock(return_value={"brand_authority": 50})
    mock.get_site_ranking_keywords = AsyncMock(
        return_value={"ranking_keywords": [{"keyword": "seo tips", "rank": 3}]}
    )
    mock.get_keyword_metrics = AsyncMock(return_value={"keyword_metrics": {"volume": 1000}})
    mock.get_keyword_difficulty = AsyncMock(return_value={"difficulty": 45})
    mock.get_keyword_volume = AsyncMock(return_value={"volume": 12000})
    mock.get_keyword_search_intent = AsyncMock(return_value={"intent": "informational"})
    return mock


@pytest.fixture(autouse=True)
def reset_tool_client():
    """Make sure no test leaks a shared client into another."""
    moz_tools.set_client(None)
    yield
    moz_tools.set_client(None)
