"""HTTP client helper."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import aiohttp

from ...core.exceptions import TransportError
from .response import Response

logger = logging.getLogger(__name__)


def encode_query(params: Mapping[str, Any] | None) -> dict[str, str] | None:
    """Convert query values into the strings sent on the wire.

    Booleans become ``true``/``false``, lists are comma-joined and mappings
    are sent as compact JSON.
    """
    if not params:
        return None
    encoded: dict[str, str] = {}
    for key, value in params.items():
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        elif isinstance(value, Mapping):
            encoded[key] = json.dumps(value, separators=(",", ":"))
        elif isinstance(value, (list, tuple)):
            encoded[key] = ",".join(str(item) for item in value)
        else:
            encoded[key] = str(value)
    return encoded


def collect_headers(headers: Any) -> dict[str, str]:
    """Flatten response headers, joining repeated names with ``", "``."""
    collected: dict[str, str] = {}
    for key, value in headers.items():
        collected[key] = f"{collected[key]}, {value}" if key in collected else value
    return collected


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def build_url(self, url: str) -> str:
        """Resolve ``url`` against ``base_url`` unless it is absolute."""
        if self.base_url and not url.startswith(("http://", "https://")):
            return f"{self.base_url}/{url.lstrip('/')}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        """Send a request and decode the response.

        A ``str`` or ``bytes`` body is sent as-is, anything else as JSON.

        Raises:
            TransportError: If the server answers with a non-2xx status
        """
        url = self.build_url(url)
        merged_headers = {**self.headers, **(headers or {})}
        kwargs: dict[str, Any] = {"params": encode_query(params), "headers": merged_headers or None}
        if isinstance(body, (str, bytes)):
            kwargs["data"] = body
        elif body is not None:
            kwargs["json"] = body

        async with self.session.request(method, url, **kwargs) as response:
            if not 200 <= response.status < 300:
                payload = await self._read_body(response, lenient=True)
                logger.warning(
                    "Request failed",
                    extra={"method": method, "url": url, "status": response.status},
                )
                raise TransportError(
                    f"{method} {url} failed with status {response.status}",
                    status_code=response.status,
                    body=payload,
                )
            return Response(
                status=response.status,
                headers=collect_headers(response.headers),
                body=await self._read_body(response),
            )

    @staticmethod
    async def _read_body(response: aiohttp.ClientResponse, *, lenient: bool = False) -> Any:
        """Decode the body; with ``lenient`` undecodable JSON falls back to text."""
        text = await response.text()
        if not text:
            return None
        if "json" in (response.content_type or ""):
            try:
                return json.loads(text)
            except ValueError:
                if not lenient:
                    raise
        return text

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
