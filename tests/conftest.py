"""Fixtures for the test suite."""

import pytest
from django.core.cache import cache

from email_subscription.ontraport.client import OntraportClient


@pytest.fixture(autouse=True)
def clear_cache():
    """Reset the throttling history between tests."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(name="ontraport_client")
def fixture_ontraport_client():
    """Generate an Ontraport client."""
    return OntraportClient(
        app_id="test-app-id",
        api_key="test-api-key",
        api_url="https://api.ontraport.com/1",
        timeout=5,
    )
