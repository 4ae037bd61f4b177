"""Action registry.

This module collects every action specification from the namespace packages
into a single static table and derives the process-wide params registry
from it.
"""

from __future__ import annotations

from functools import lru_cache

from es_actions.core.exceptions import UnknownActionError
from es_actions.core.params import ParamsRegistry
from es_actions.runtime.rest import ActionSpec

from .indices import DELETE_WARMER, GET_WARMER, PUT_WARMER
from .watcher import (
    ACK_WATCH,
    ACTIVATE_WATCH,
    DEACTIVATE_WATCH,
    DELETE_WATCH,
    GET_WATCH,
    PUT_WATCH,
)

_ACTION_REGISTRY: dict[str, ActionSpec] = {
    spec.id: spec
    for spec in (
        PUT_WARMER,
        GET_WARMER,
        DELETE_WARMER,
        PUT_WATCH,
        GET_WATCH,
        DELETE_WATCH,
        ACTIVATE_WATCH,
        DEACTIVATE_WATCH,
        ACK_WATCH,
    )
}


def get_action_spec(action_id: str) -> ActionSpec:
    """Get action specification by ID.

    Args:
        action_id: Action identifier (e.g., "put_warmer")

    Returns:
        The registered ActionSpec

    Raises:
        UnknownActionError: If no action is registered under ``action_id``
    """
    try:
        return _ACTION_REGISTRY[action_id]
    except KeyError:
        raise UnknownActionError(action_id) from None


def list_actions() -> list[str]:
    """List all available action IDs."""
    return list(_ACTION_REGISTRY.keys())


@lru_cache(maxsize=1)
def default_params_registry() -> ParamsRegistry:
    """Process-wide params registry, built once from the action table."""
    return ParamsRegistry({action_id: spec.params for action_id, spec in _ACTION_REGISTRY.items()})


__all__ = [
    "get_action_spec",
    "list_actions",
    "default_params_registry",
]
