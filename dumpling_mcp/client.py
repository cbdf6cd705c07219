"""
Dumpling AI HTTP client.

One authenticated POST per call against {base_url}/api/v1/{path}.
"""

import json
import logging
from typing import Any, Dict, Optional

import httpx

from .base import MalformedResponse, MissingCredential, TransportFailure, UpstreamError
from .config import API_KEY_ENV, Settings

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class DumplingClient:
    """
    Thin async wrapper around httpx for the Dumpling AI API.

    A fresh AsyncClient is opened per request so that concurrent tool calls
    share nothing. `transport` lets tests substitute an httpx.MockTransport.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    def endpoint(self, path: str) -> str:
        return f"{self.settings.base_url}{API_PREFIX}/{path.lstrip('/')}"

    def require_credential(self, tool_name: str = None) -> str:
        if not self.settings.api_key:
            raise MissingCredential(f"{API_KEY_ENV} environment variable not set", tool_name=tool_name)
        return self.settings.api_key

    async def post(
        self,
        path: str,
        payload: Dict[str, Any],
        action: str = "call Dumpling AI",
        tool_name: str = None,
    ) -> Dict[str, Any]:
        """
        POST `payload` as JSON and return the decoded JSON object.

        Raises MissingCredential before any I/O, TransportFailure for network
        faults, UpstreamError for non-2xx answers and MalformedResponse when a
        success body is not a JSON object.
        """
        api_key = self.require_credential(tool_name)
        url = self.endpoint(path)
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.settings.timeout) as client:
                response = await client.post(url, json=payload, headers=headers)
        except httpx.TimeoutException as e:
            raise TransportFailure(f"Failed to {action}: request timed out ({e})", tool_name=tool_name) from e
        except httpx.RequestError as e:
            raise TransportFailure(f"Failed to {action}: {e}", tool_name=tool_name) from e

        if not response.is_success:
            logger.warning(f"{path} returned HTTP {response.status_code}")
            raise UpstreamError(
                f"Failed to {action}: {response.status_code} {response.text}",
                status_code=response.status_code,
                body=response.text,
                tool_name=tool_name,
            )

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedResponse(f"Failed to {action}: response is not valid JSON ({e})", tool_name=tool_name) from e

        if not isinstance(data, dict):
            raise MalformedResponse(
                f"Failed to {action}: expected a JSON object, got {type(data).__name__}",
                tool_name=tool_name,
            )
        return data
