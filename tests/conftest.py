"""
Pytest configuration and shared fixtures.
"""

import json

import httpx
import pytest

from authmgmt import ManagementClient


class FakeApi:
    """Canned responses served through httpx.MockTransport, recording every request."""

    def __init__(self):
        self.requests = []
        self._responses = []

    def reply(self, status_code, body=None):
        self._responses.append((status_code, body))

    def __call__(self, request):
        self.requests.append(request)
        status_code, body = self._responses.pop(0)
        if isinstance(body, Exception):
            raise body
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)

    @property
    def last(self):
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def api():
    return FakeApi()


@pytest.fixture
def client(api):
    """Client pointed at the fake API with the default list options."""
    with ManagementClient("tenant.example.com", "test-token", transport=httpx.MockTransport(api)) as c:
        yield c


@pytest.fixture
def sample_connection():
    """A database connection as the server returns it."""
    return {
        "id": "con_0000000000000001",
        "name": "Username-Password-Authentication",
        "strategy": "auth0",
        "is_domain_connection": False,
        "enabled_clients": ["client-a", "client-b"],
        "realms": ["Username-Password-Authentication"],
        "options": {
            "passwordPolicy": "good",
            "brute_force_protection": True,
            "enabledDatabaseCustomization": False,
            "customScripts": {"login": "function login(email, password, callback) {}"},
            "password_history": {"enable": True, "size": 5},
            "community_base_url": None,
            "strategy_version": None,
        },
    }
