"""Shared fixtures: mocked HTTP responses and sessions."""

from unittest.mock import MagicMock
from unittest.mock import Mock

import pytest
import requests

DENO_JSON = b"""{
  "name": "@formata/stof",
  "version": "0.8.0",
  "license": "Apache-2.0",
  "exports": "./mod.ts"
}
"""


@pytest.fixture
def mock_response():
    """Create a mock response factory."""

    def _create(status_code=200, content=b""):
        response = Mock()
        response.status_code = status_code
        response.content = content
        response.raise_for_status = Mock()
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.exceptions.HTTPError(
                f"{status_code} Client Error", response=response
            )
        return response

    return _create


@pytest.fixture
def session(mock_response):
    """Session whose GET returns deno.json with a 200 status."""
    mock_session = MagicMock(spec=requests.Session)
    mock_session.get.return_value = mock_response(200, DENO_JSON)
    return mock_session


@pytest.fixture
def deno_json():
    """Raw body of dev-formata-io/stof web/deno.json."""
    return DENO_JSON
