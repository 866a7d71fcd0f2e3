"""Remote working-hours endpoint client.

Thin async client for the site that displays the card:
- Push the full schedule (POST, wrapped as {"workingHours": ...})
- Pull the stored schedule (GET, {} when nothing is stored)
- Check the diagnostic path with the saved credentials

Stateless and reentrant. Every call is a single attempt: no retries, no
backoff. Failures come back as SyncResult values, never as exceptions.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from hours_admin.config.settings import settings
from hours_admin.integrations.remote.errors import (
    HttpError,
    MalformedError,
    TransportError,
    UnconfiguredError,
)
from hours_admin.integrations.remote.types import RemoteState, SyncResult
from hours_admin.schedule.types import RemoteEndpointConfig, WeekSchedule

WORKING_HOURS_PATH = "/api/restaurant/working-hours"
TEST_PATH = "/api/test"


class RemoteSyncClient:
    """Client mirroring the schedule to a remote HTTP endpoint.

    - Bearer auth with the endpoint's API key
    - One httpx.AsyncClient per call
    - Configuration checked before any network attempt
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            timeout: Request timeout in seconds. Defaults to settings.http_timeout_seconds.
            transport: Optional httpx transport (tests inject httpx.MockTransport)
        """
        self._timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self._transport = transport

    @staticmethod
    def _headers(endpoint: RemoteEndpointConfig) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {endpoint.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def _request(
        self,
        method: str,
        endpoint: RemoteEndpointConfig,
        path: str,
        *,
        body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send one request and raise a SyncError subclass on failure.

        Raises:
            UnconfiguredError: If base URL or API key is empty, or the key
                cannot be sent in a header
            TransportError: On DNS, connection or timeout failures
            HttpError: On non-2xx responses
        """
        if not endpoint.is_configured:
            raise UnconfiguredError()
        # HTTP header values are ASCII-only
        if not endpoint.api_key.isascii():
            raise UnconfiguredError("API key must contain only ASCII characters")

        url = f"{endpoint.normalized_base_url}{path}"
        logger.debug(f"[REMOTE_SYNC] {method} {url}")

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.request(method, url, headers=self._headers(endpoint), json=body)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            detail = str(e) or type(e).__name__
            logger.warning(f"[REMOTE_SYNC] {method} {url} failed: {detail}")
            raise TransportError(detail) from e

        if not response.is_success:
            logger.warning(f"[REMOTE_SYNC] {method} {url} returned {response.status_code} {response.reason_phrase}")
            raise HttpError(response.status_code, response.reason_phrase)

        return response

    async def push(self, endpoint: RemoteEndpointConfig, schedule: WeekSchedule) -> SyncResult[None]:
        """Write the full schedule to the endpoint.

        Persisting the schedule locally after a successful push is the
        caller's responsibility.
        """
        try:
            await self._request("POST", endpoint, WORKING_HOURS_PATH, body=schedule.to_wrapped_payload())
        except (UnconfiguredError, HttpError, TransportError) as e:
            return SyncResult.failure(e)

        logger.info("[REMOTE_SYNC] Schedule pushed to remote endpoint")
        return SyncResult.success()

    async def pull(self, endpoint: RemoteEndpointConfig) -> SyncResult[WeekSchedule | RemoteState]:
        """Fetch the stored schedule.

        Returns:
            SyncResult holding the WeekSchedule, or RemoteState.EMPTY when the
            server has nothing stored yet
        """
        try:
            response = await self._request("GET", endpoint, WORKING_HOURS_PATH)
        except (UnconfiguredError, HttpError, TransportError) as e:
            return SyncResult.failure(e)

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"[REMOTE_SYNC] Pull response is not JSON: {e}")
            return SyncResult.failure(MalformedError(f"response is not valid JSON: {e}"))

        # An unsaved PHP endpoint answers json_encode([]), i.e. "[]"
        if data == {} or data == [] or data == {"workingHours": {}}:
            logger.info("[REMOTE_SYNC] Remote endpoint has no schedule stored")
            return SyncResult.success(RemoteState.EMPTY)

        try:
            schedule = WeekSchedule.from_payload(data)
        except ValidationError as e:
            logger.warning(f"[REMOTE_SYNC] Pull response is not a valid schedule ({e.error_count()} errors)")
            return SyncResult.failure(MalformedError(f"response is not a valid schedule ({e.error_count()} errors)"))

        logger.info("[REMOTE_SYNC] Schedule pulled from remote endpoint")
        return SyncResult.success(schedule)

    async def test_connection(self, endpoint: RemoteEndpointConfig) -> SyncResult[None]:
        """Authenticated GET of the diagnostic path; any 2xx is success."""
        try:
            await self._request("GET", endpoint, TEST_PATH)
        except (UnconfiguredError, HttpError, TransportError) as e:
            return SyncResult.failure(e)

        logger.info("[REMOTE_SYNC] Connection test succeeded")
        return SyncResult.success()
