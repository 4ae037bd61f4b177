"""REST transport used by the action runner."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .http_client import HTTPClient
from .response import Response


class RESTTransport:
    """Thin wrapper exposing ``perform_request`` over an ``HTTPClient``."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout, headers=headers)

    async def perform_request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        return await self._http.request(method, path, params=params, body=body, headers=headers)

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
