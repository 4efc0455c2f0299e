"""
Pytest fixtures for the client state store.
The API is faked: responses are registered per (method, path).
"""
from unittest.mock import patch

import pytest

from frontend.api import ApiError, ApiResponse
from frontend.store import create_store


class FakeApi:
    def __init__(self):
        self.token = None
        self.calls = []
        self._responses = {}

    def respond(self, method: str, path: str, data=None, status: int = 200):
        self._responses[(method, path)] = ApiResponse(status, data)

    def fail(self, method: str, path: str, status: int, data=None, status_text: str = "Bad Request"):
        self._responses[(method, path)] = ApiError(status, status_text, data)

    def set_token(self, token):
        self.token = token

    def _call(self, method, path, body=None):
        self.calls.append((method, path, body))
        result = self._responses[(method, path)]
        if isinstance(result, ApiError):
            raise result
        return result

    def get(self, path):
        return self._call("GET", path)

    def post(self, path, json_body=None):
        return self._call("POST", path, json_body)

    def put(self, path, json_body=None):
        return self._call("PUT", path, json_body)

    def delete(self, path):
        return self._call("DELETE", path)


@pytest.fixture
def api():
    return FakeApi()


@pytest.fixture
def store(api):
    return create_store(api=api)


@pytest.fixture(autouse=True)
def no_alert_timers():
    """Alerts never expire on their own during tests."""
    with patch("frontend.actions.alert.threading.Timer") as timer:
        yield timer
