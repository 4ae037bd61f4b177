"""Search engine REST client.

The client owns a transport and an action runner and exposes actions
grouped by namespace (``client.indices``, ``client.watcher``). Any
registered action can also be run by id through ``perform``.

Example:
    >>> async with SearchClient("http://localhost:9200") as client:
    ...     await client.watcher.deactivate_watch(watch_id="w1", master_timeout="30s")
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..actions import default_params_registry, get_action_spec
from ..core.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from ..core.params import ParamsRegistry
from ..runtime.rest import ActionRunner, RESTTransport, Transport
from .namespaces import IndicesNamespace, WatcherNamespace


class SearchClient:
    """Entry point bundling transport, runner and action namespaces."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
        strict_params: bool = False,
        config: ClientConfig | None = None,
        transport: Transport | None = None,
        registry: ParamsRegistry | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Server URL, e.g. ``http://localhost:9200``
            timeout: Total request timeout in seconds
            headers: Headers sent with every request
            strict_params: Reject unrecognized query parameters
            config: Full configuration; overrides the individual options
            transport: Transport to use instead of an internal RESTTransport
            registry: Params registry; defaults to the process-wide one
        """
        self.config = config or ClientConfig(
            base_url=base_url,
            timeout=timeout,
            headers=dict(headers or {}),
            strict_params=strict_params,
        )
        self._owns_transport = transport is None
        self._transport: Transport = transport or RESTTransport(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            headers=self.config.headers,
        )
        self._runner = ActionRunner(
            self._transport,
            registry if registry is not None else default_params_registry(),
            strict_params=self.config.strict_params,
        )
        self.indices = IndicesNamespace(self._runner)
        self.watcher = WatcherNamespace(self._runner)

    @property
    def transport(self) -> Transport:
        return self._transport

    async def perform(self, action_id: str, **arguments: Any) -> Any:
        """Run a registered action by id.

        Raises:
            UnknownActionError: If ``action_id`` is not registered
        """
        spec = get_action_spec(action_id)
        return await self._runner.run(spec=spec, arguments=arguments)

    async def close(self) -> None:
        """Close the transport if the client created it."""
        if self._owns_transport and isinstance(self._transport, RESTTransport):
            await self._transport.close()

    async def __aenter__(self) -> SearchClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
