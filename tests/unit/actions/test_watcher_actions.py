"""Unit tests for watcher actions."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from es_actions import SearchClient
from es_actions.core import MissingRequiredArgumentError
from es_actions.runtime.rest import RESTTransport, Response


@pytest.fixture
def mock_transport():
    """Create mock REST transport."""
    transport = MagicMock(spec=RESTTransport)
    transport.perform_request = AsyncMock(
        return_value=Response(status=200, body={"_status": {"state": {"active": False}}})
    )
    return transport


@pytest.fixture
def client(mock_transport):
    return SearchClient(transport=mock_transport)


class TestDeactivateWatch:
    """Test deactivate_watch."""

    @pytest.mark.asyncio
    async def test_deactivate_watch(self, client, mock_transport):
        """Test path and params."""
        result = await client.watcher.deactivate_watch(watch_id="w1", master_timeout="30s")

        assert result == {"_status": {"state": {"active": False}}}
        mock_transport.perform_request.assert_called_once_with(
            "PUT", "_xpack/watcher/watch/w1/_deactivate", {"master_timeout": "30s"}, None
        )

    @pytest.mark.asyncio
    async def test_watch_id_not_a_param(self, client, mock_transport):
        """Test watch_id is consumed by the path and unknown keys dropped."""
        await client.watcher.deactivate_watch(watch_id="w1", foo="bar")

        params = mock_transport.perform_request.call_args.args[2]
        assert params == {}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("watch_id", [None, ""])
    async def test_missing_watch_id(self, client, mock_transport, watch_id):
        """Test watch_id is required."""
        with pytest.raises(MissingRequiredArgumentError, match="watch_id"):
            await client.watcher.deactivate_watch(watch_id=watch_id)

        mock_transport.perform_request.assert_not_called()


class TestWatchLifecycle:
    """Test the remaining watcher actions."""

    @pytest.mark.asyncio
    async def test_activate_watch(self, client, mock_transport):
        """Test activate_watch path."""
        await client.watcher.activate_watch(watch_id="w1")

        mock_transport.perform_request.assert_called_once_with(
            "PUT", "_xpack/watcher/watch/w1/_activate", {}, None
        )

    @pytest.mark.asyncio
    async def test_ack_watch(self, client, mock_transport):
        """Test ack_watch with and without an action id."""
        await client.watcher.ack_watch(watch_id="w1")
        await client.watcher.ack_watch(watch_id="w1", action_id=["email", "log"])

        calls = mock_transport.perform_request.call_args_list
        assert calls[0].args[1] == "_xpack/watcher/watch/w1/_ack"
        assert calls[1].args[1] == "_xpack/watcher/watch/w1/_ack/email,log"

    @pytest.mark.asyncio
    async def test_put_watch(self, client, mock_transport):
        """Test put_watch forwards body and params."""
        body = {"trigger": {"schedule": {"interval": "10s"}}}

        await client.watcher.put_watch(id="w1", body=body, active=False)

        mock_transport.perform_request.assert_called_once_with(
            "PUT", "_xpack/watcher/watch/w1", {"active": False}, body
        )

    @pytest.mark.asyncio
    async def test_put_watch_requires_body(self, client):
        """Test put_watch body is required."""
        with pytest.raises(MissingRequiredArgumentError, match="body"):
            await client.watcher.put_watch(id="w1")

    @pytest.mark.asyncio
    async def test_get_watch(self, client, mock_transport):
        """Test get_watch recognizes no params."""
        await client.watcher.get_watch(id="w1", master_timeout="30s")

        mock_transport.perform_request.assert_called_once_with(
            "GET", "_xpack/watcher/watch/w1", {}, None
        )

    @pytest.mark.asyncio
    async def test_delete_watch(self, client, mock_transport):
        """Test delete_watch params."""
        await client.watcher.delete_watch(id="w1", force=True)

        mock_transport.perform_request.assert_called_once_with(
            "DELETE", "_xpack/watcher/watch/w1", {"force": True}, None
        )
