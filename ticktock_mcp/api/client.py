"""
Clockify API client for handling HTTP requests and authentication.
"""

import json
import logging
from typing import Any, Dict, Optional

import httpx

from ticktock_mcp.api.errors import (
    API_ERROR,
    DECODE_ERROR,
    ENCODE_ERROR,
    RATE_LIMIT_MESSAGE,
    RATE_LIMITED,
    REQUEST_ERROR,
    TRANSPORT_ERROR,
    ClockifyAPIError,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://api.clockify.me/api/v1"
REPORTS_URL = "https://reports.api.clockify.me/v1"
DEFAULT_TIMEOUT = 30.0


class ClockifyApiClient:
    """
    API client for interacting with the Clockify API.

    Talks to two hosts: the primary CRUD API and the separate reports API.
    Every call is a single attempt; failures surface as ClockifyAPIError.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        reports_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the client.

        Args:
            api_key: Clockify API key sent as X-Api-Key
            base_url: Override for the primary API host
            reports_url: Override for the reports API host
            timeout: Per-request timeout in seconds
        """
        if not api_key:
            raise ValueError("Clockify API key missing")

        self.api_key = api_key
        self.base_url = (base_url or BASE_URL).rstrip("/")
        self.reports_url = (reports_url or REPORTS_URL).rstrip("/")
        self.timeout = timeout
        self.headers = self._get_auth_headers()

    def _get_auth_headers(self) -> Dict[str, str]:
        return {
            "X-Api-Key": self.api_key,
            "Content-Type": "application/json",
        }

    async def request(
        self,
        method: str,
        endpoint: str,
        data: Any = None,
        params: Optional[Dict[str, Any]] = None,
        base_url: Optional[str] = None,
    ) -> Any:
        """
        Send an authenticated request and decode the JSON response.

        Args:
            method: HTTP verb
            endpoint: API path relative to the base URL (e.g. "/workspaces")
            data: Optional JSON-serializable request body
            params: Optional query parameters
            base_url: Host to send to; defaults to the primary API

        Returns:
            The decoded JSON body, or None when the response body is empty

        Raises:
            ClockifyAPIError: on encoding, transport, status or decoding failure
        """
        url = f"{base_url or self.base_url}{endpoint}"

        content = None
        if data is not None:
            try:
                content = json.dumps(data)
            except (TypeError, ValueError) as e:
                raise ClockifyAPIError(ENCODE_ERROR, f"marshal request body: {e}") from e

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                request = client.build_request(
                    method.upper(), url, headers=self.headers, params=params, content=content
                )
            except (httpx.InvalidURL, TypeError, ValueError) as e:
                raise ClockifyAPIError(REQUEST_ERROR, f"create request: {e}") from e

            logger.debug(f"{request.method} {request.url}")

            try:
                response = await client.send(request)
            except httpx.RequestError as e:
                logger.warning(f"Clockify request to {endpoint} failed: {e!r}")
                raise ClockifyAPIError(
                    TRANSPORT_ERROR, f"request failed: {str(e) or type(e).__name__}"
                ) from e

        if response.status_code == 429:
            logger.warning(f"Clockify rate limit hit on {endpoint}")
            raise ClockifyAPIError(RATE_LIMITED, RATE_LIMIT_MESSAGE, 429)

        if not 200 <= response.status_code < 300:
            logger.warning(f"Clockify returned {response.status_code} for {method.upper()} {endpoint}")
            raise ClockifyAPIError(
                API_ERROR,
                f"clockify API error ({response.status_code}): {response.text}",
                response.status_code,
            )

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ClockifyAPIError(DECODE_ERROR, f"unmarshal response: {e}") from e

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Send a GET request to the primary API."""
        return await self.request("GET", endpoint, params=params)

    async def post(self, endpoint: str, data: Any) -> Any:
        """Send a POST request to the primary API."""
        return await self.request("POST", endpoint, data=data)

    async def put(self, endpoint: str, data: Any) -> Any:
        """Send a PUT request to the primary API."""
        return await self.request("PUT", endpoint, data=data)

    async def patch(self, endpoint: str, data: Any = None) -> Any:
        """Send a PATCH request to the primary API."""
        return await self.request("PATCH", endpoint, data=data)

    async def delete(self, endpoint: str) -> None:
        """Send a DELETE request to the primary API."""
        await self.request("DELETE", endpoint)

    async def post_report(self, endpoint: str, data: Any) -> Any:
        """Send a POST request to the reports API."""
        return await self.request("POST", endpoint, data=data, base_url=self.reports_url)
