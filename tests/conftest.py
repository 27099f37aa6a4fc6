"""
Pytest configuration and shared fixtures for the translation tests.
"""
import os
import sys
import pytest
from unittest.mock import MagicMock, patch

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def make_response(body, status_code=200, encoding="utf-8"):
    """Build a fake requests.Response carrying a raw body."""
    response = MagicMock()
    response.status_code = status_code
    response.text = body
    response.encoding = encoding
    return response


@pytest.fixture
def hola_response():
    return make_response('[["hola","hello",null,null]]')


@pytest.fixture
def mock_get(hola_response):
    """Patch the outbound GET so no test reaches the network."""
    with patch("services.translator.requests.get", return_value=hola_response) as mock:
        yield mock
