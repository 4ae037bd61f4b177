"""Action namespaces exposed on ``SearchClient``.

Every method takes the action's arguments as keyword arguments and returns
the decoded response body. Keys named by the path template and ``body`` are
consumed; the remaining keys are filtered against the action's recognized
query parameters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..actions.indices import DELETE_WARMER, GET_WARMER, PUT_WARMER
from ..actions.watcher import (
    ACK_WATCH,
    ACTIVATE_WATCH,
    DEACTIVATE_WATCH,
    DELETE_WATCH,
    GET_WATCH,
    PUT_WATCH,
)

if TYPE_CHECKING:
    from ..runtime.rest import ActionRunner, ActionSpec


class Namespace:
    """Group of actions sharing a runner."""

    def __init__(self, runner: ActionRunner) -> None:
        self._runner = runner

    async def _run(self, spec: ActionSpec, arguments: dict[str, Any]) -> Any:
        return await self._runner.run(spec=spec, arguments=arguments)


class IndicesNamespace(Namespace):
    """Index warmer actions."""

    async def put_warmer(self, **arguments: Any) -> Any:
        """Create or update an index warmer.

        Args:
            name: Warmer name (required)
            body: Search request definition (required)
            index: Index name or list of names
            type: Document type or list of types
            allow_no_indices, expand_wildcards, ignore_indices,
            ignore_unavailable: Optional query parameters

        Example:
            >>> await client.indices.put_warmer(
            ...     index="myindex",
            ...     name="main",
            ...     body={"query": {"term": {"published": True}}, "sort": ["created_at"]},
            ... )
        """
        return await self._run(PUT_WARMER, arguments)

    async def get_warmer(self, **arguments: Any) -> Any:
        """Retrieve warmers registered on ``index`` (required)."""
        return await self._run(GET_WARMER, arguments)

    async def delete_warmer(self, **arguments: Any) -> Any:
        """Delete warmer ``name`` from ``index`` (required)."""
        return await self._run(DELETE_WARMER, arguments)


class WatcherNamespace(Namespace):
    """Watch lifecycle actions."""

    async def put_watch(self, **arguments: Any) -> Any:
        """Register or update watch ``id`` with definition ``body``."""
        return await self._run(PUT_WATCH, arguments)

    async def get_watch(self, **arguments: Any) -> Any:
        return await self._run(GET_WATCH, arguments)

    async def delete_watch(self, **arguments: Any) -> Any:
        return await self._run(DELETE_WATCH, arguments)

    async def activate_watch(self, **arguments: Any) -> Any:
        return await self._run(ACTIVATE_WATCH, arguments)

    async def deactivate_watch(self, **arguments: Any) -> Any:
        """Deactivate a currently active watch.

        Args:
            watch_id: Watch ID (required)
            master_timeout: Timeout for the watch write operation
        """
        return await self._run(DEACTIVATE_WATCH, arguments)

    async def ack_watch(self, **arguments: Any) -> Any:
        """Acknowledge ``action_id`` of ``watch_id``, or all actions if omitted."""
        return await self._run(ACK_WATCH, arguments)
