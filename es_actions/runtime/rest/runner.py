"""Action runner: argument validation, path building and dispatch."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from ...core.exceptions import MissingRequiredArgumentError
from ...utils.path import extract_params, is_blank, listify, pathify
from .response import Response

if TYPE_CHECKING:
    from ...core.params import ParamsRegistry

logger = logging.getLogger(__name__)

HTTP_GET = "GET"
HTTP_PUT = "PUT"
HTTP_POST = "POST"
HTTP_DELETE = "DELETE"

_DYNAMIC = re.compile(r"^\{(\w+)\}$")


class Transport(Protocol):
    async def perform_request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Response: ...


@dataclass(frozen=True)
class ActionSpec:
    """Immutable description of a single REST action.

    ``path`` is an ordered tuple of segments; ``"{name}"`` marks a segment
    filled from the argument of that name, anything else is static.
    """

    id: str
    method: str  # "GET" | "PUT" | "POST" | "DELETE"
    path: tuple[str, ...]
    required: tuple[str, ...] = ()
    params: frozenset[str] = field(default_factory=frozenset)
    body: bool = False

    @property
    def path_args(self) -> tuple[str, ...]:
        return tuple(m.group(1) for m in map(_DYNAMIC.match, self.path) if m)

    @property
    def consumed(self) -> frozenset[str]:
        """Argument keys that never become query parameters."""
        keys = set(self.path_args)
        if self.body:
            keys.add("body")
        return frozenset(keys)

    def validate(self, arguments: Mapping[str, Any]) -> None:
        for name in self.required:
            if is_blank(arguments.get(name)):
                raise MissingRequiredArgumentError(name)

    def build_path(self, arguments: Mapping[str, Any]) -> str:
        segments = []
        for segment in self.path:
            match = _DYNAMIC.match(segment)
            segments.append(listify(arguments.get(match.group(1))) if match else segment)
        return pathify(*segments)


class ActionRunner:
    """Execute action specs against a transport.

    Each run performs exactly one transport call and returns the response
    body unchanged. Transport errors propagate as raised.
    """

    def __init__(
        self,
        transport: Transport,
        registry: ParamsRegistry | None = None,
        *,
        strict_params: bool = False,
    ) -> None:
        self._t = transport
        self._registry = registry
        self._strict = strict_params

    def recognized_params(self, spec: ActionSpec) -> frozenset[str]:
        if self._registry is None:
            return spec.params
        return self._registry.get(spec.id)

    async def run(self, *, spec: ActionSpec, arguments: Mapping[str, Any]) -> Any:
        spec.validate(arguments)

        path = spec.build_path(arguments)
        params = extract_params(
            arguments,
            self.recognized_params(spec),
            consumed=spec.consumed,
            action=spec.id,
            strict=self._strict,
        )
        body = arguments.get("body") if spec.body else None

        logger.debug(
            "Performing action",
            extra={"action": spec.id, "method": spec.method, "path": path},
        )
        response = await self._t.perform_request(spec.method, path, params, body)
        return response.body
