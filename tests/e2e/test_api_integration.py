"""
End-to-end tests for the greeting service running behind uvicorn.
"""

import pytest
import requests


def test_greeting(api_url):
    """Test that the service returns the greeting as plain text."""
    response = requests.get(f"{api_url}/", timeout=1)
    assert response.status_code == 200
    assert response.text == "Hello Worl!"
    assert response.headers["content-type"].startswith("text/plain")


def test_unknown_path_returns_404(api_url):
    response = requests.get(f"{api_url}/nonexistent", timeout=1)
    assert response.status_code == 404


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
def test_other_methods_return_greeting(api_url, method):
    response = requests.request(method, f"{api_url}/", timeout=1)
    assert response.status_code == 200
    assert response.text == "Hello Worl!"


def test_head_returns_200_without_body(api_url):
    response = requests.head(f"{api_url}/", timeout=1)
    assert response.status_code == 200
    assert response.content == b""
