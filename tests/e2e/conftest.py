"""Shared fixtures for end-to-end tests against a running service."""

import os

import pytest


@pytest.fixture
def api_url():
    """Get API URL from environment.

    Unlike a localhost fallback, an unset API_BASE_URL skips the test so a
    plain ``pytest tests/e2e`` without a live service reports skips, not
    connection errors.
    """
    url = os.environ.get("API_BASE_URL")
    if not url:
        pytest.skip("API_BASE_URL is not set")
    return url.rstrip("/")
