"""Root conftest for all tests.

This file makes shared fixtures available across all test modules: a local
store in a temp directory, a mock working-hours endpoint served through
httpx.MockTransport, and a loguru message capture.
"""

import json
import re

import httpx
import pytest
from loguru import logger

from hours_admin.integrations.remote.client import RemoteSyncClient
from hours_admin.persistence.local_store import LocalStore
from hours_admin.schedule.types import RemoteEndpointConfig

API_SECRET = "test-secret-key"  # pragma: allowlist secret
BASE_URL = "https://restaurant.example"


class MockWorkingHoursEndpoint:
    """In-memory stand-in for the site's working-hours API.

    Follows the HTTP contract of the real endpoint:
    - OPTIONS on any path -> 200, no body
    - Missing/unparseable Authorization -> 401, wrong token -> 403
    - GET /api/test -> {"status": "ok"}
    - GET/POST /api/restaurant/working-hours, other methods -> 405
    - POST with malformed JSON or without workingHours -> 400
    """

    def __init__(self, secret: str = API_SECRET) -> None:
        self.secret = secret
        self.stored: dict | None = None
        self.requests: list[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.method == "OPTIONS":
            return httpx.Response(200)

        auth = request.headers.get("Authorization", "")
        match = re.match(r"Bearer\s+(.*)", auth)
        if not match:
            return httpx.Response(401, json={"error": "Missing authorization token"})
        if match.group(1) != self.secret:
            return httpx.Response(403, json={"error": "Invalid API key"})

        if request.url.path == "/api/test":
            return httpx.Response(200, json={"status": "ok", "message": "API is working"})

        if request.url.path != "/api/restaurant/working-hours":
            return httpx.Response(404, json={"error": "Not found"})

        if request.method == "GET":
            return httpx.Response(200, json=self.stored if self.stored is not None else {})

        if request.method == "POST":
            try:
                data = json.loads(request.content)
            except json.JSONDecodeError:
                return httpx.Response(400, json={"error": "Invalid JSON"})
            if not isinstance(data, dict) or "workingHours" not in data:
                return httpx.Response(400, json={"error": "workingHours is missing"})
            self.stored = data
            return httpx.Response(200, json={"success": True, "message": "Data saved"})

        return httpx.Response(405, json={"error": "Method not supported"})


@pytest.fixture
def store(tmp_path) -> LocalStore:
    """Local store rooted in a per-test temp directory."""
    return LocalStore(tmp_path / "store")


@pytest.fixture
def mock_endpoint() -> MockWorkingHoursEndpoint:
    return MockWorkingHoursEndpoint()


@pytest.fixture
def sync_client(mock_endpoint: MockWorkingHoursEndpoint) -> RemoteSyncClient:
    """Sync client whose requests go to mock_endpoint."""
    return RemoteSyncClient(transport=httpx.MockTransport(mock_endpoint.handler))


@pytest.fixture
def endpoint_config() -> RemoteEndpointConfig:
    return RemoteEndpointConfig(base_url=f"{BASE_URL}/", api_key=API_SECRET, enabled=True)


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages: list = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
