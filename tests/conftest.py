"""Shared pytest fixtures for jiraattach tests."""

import json
from unittest.mock import MagicMock

import pytest

from jiraattach import jira_api


@pytest.fixture
def mock_session():
    """Provide a mock HTTP session.

    The mock is injected into jira_api and automatically reset after the test.

    Usage:
        def test_something(mock_session, make_response):
            mock_session.post.return_value = make_response(200, [...])
            # Test code that calls jira_api.get_session()
    """
    mock = MagicMock()
    jira_api.set_session(mock)
    yield mock
    jira_api.reset_session()


@pytest.fixture
def make_response():
    """Factory for mock HTTP responses."""

    def _make(status_code: int, payload=None, text: str = ""):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        if isinstance(payload, Exception):
            response.json.side_effect = payload
        else:
            response.json.return_value = payload
        return response

    return _make


@pytest.fixture
def config_file(tmp_path):
    """Write a valid config file and return its path."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"jira_url": "https://x.test", "auth": "bob:pw"}))
    return path
