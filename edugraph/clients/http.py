"""
HTTP relay for backend calls.

Performs one request per call and hands back whatever the backend replied,
parsed as JSON when possible and as raw text otherwise. There is no retry
and no status-code branching: a 404 or 500 body is returned like any other.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional, Union

import httpx

from edugraph.utils.logger_config import get_logger

logger = get_logger("clients.http")


@dataclass(frozen=True)
class JsonResult:
    """A reply whose body parsed as JSON."""
    value: Any


@dataclass(frozen=True)
class TextResult:
    """A reply whose body was not valid JSON (kept verbatim)."""
    text: str


ApiResult = Union[JsonResult, TextResult]


def parse_body(text: str) -> ApiResult:
    """Parse a reply body, falling back to the raw text."""
    try:
        return JsonResult(json.loads(text))
    except ValueError:
        return TextResult(text)


class RestRelay:
    """
    Thin async wrapper around httpx for backend calls.

    Attributes:
        timeout: Per-call timeout in seconds (None waits forever)
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the relay.

        Args:
            timeout: Per-call timeout in seconds, None for no timeout.
            transport: Optional httpx transport (used to fake backends).
        """
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def call(self, method: str, url: str, body: Any = None) -> ApiResult:
        """
        Perform one backend call.

        Args:
            method: HTTP method
            url: Absolute URL including any query string
            body: JSON-serializable body; omitted from the request when None

        Returns:
            JsonResult or TextResult
        """
        headers = {}
        content = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            content = json.dumps(body)

        response = await self.client.request(
            method, url, headers=headers, content=content
        )
        logger.debug(f"{method} {url} status={response.status_code}")

        return parse_body(response.text)

    async def aclose(self) -> None:
        """Close the underlying client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
