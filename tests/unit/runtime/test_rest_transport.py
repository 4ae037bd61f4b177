"""Precise unit tests for RESTTransport.

Tests focus on HTTPClient delegation.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from es_actions.runtime.rest import RESTTransport, Response


class TestRESTTransport:
    """Test RESTTransport wrapper."""

    def test_init(self):
        """Test RESTTransport initialization."""
        transport = RESTTransport(base_url="http://localhost:9200", timeout=5.0)
        assert transport._http.base_url == "http://localhost:9200"
        assert transport._http.timeout.total == 5.0

    @pytest.mark.asyncio
    async def test_perform_request_delegates_to_http_client(self):
        """Test perform_request() delegates to HTTPClient.request()."""
        transport = RESTTransport(base_url="http://localhost:9200")
        response = Response(status=200, body={"acknowledged": True})
        transport._http.request = AsyncMock(return_value=response)

        result = await transport.perform_request(
            "PUT", "_xpack/watcher/watch/w1/_deactivate", {"master_timeout": "30s"}, None
        )

        assert result is response
        transport._http.request.assert_called_once_with(
            "PUT",
            "_xpack/watcher/watch/w1/_deactivate",
            params={"master_timeout": "30s"},
            body=None,
            headers=None,
        )

    @pytest.mark.asyncio
    async def test_close_delegates_to_http_client(self):
        """Test close() delegates to HTTPClient."""
        transport = RESTTransport(base_url="http://localhost:9200")
        transport._http.close = AsyncMock()

        async with transport:
            pass

        transport._http.close.assert_called_once()
