"""Registry of recognized query parameters per action.

Each action accepts a closed set of optional query parameters. The registry
maps an action id to that set and is consulted when an argument bag is
filtered down to the parameters that reach the query string.

The process-wide registry returned by ``default_params_registry()`` is built
once from the static action table and only read afterwards, so it needs no
locking. Standalone registries can be populated with ``register``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_EMPTY: frozenset[str] = frozenset()


class ParamsRegistry:
    """Lookup table from action id to its recognized parameter names."""

    def __init__(self, entries: dict[str, Iterable[str]] | None = None) -> None:
        self._params: dict[str, frozenset[str]] = {}
        for action, params in (entries or {}).items():
            self.register(action, params)

    def register(self, action: str, params: Iterable[str]) -> None:
        """Store the recognized parameters for ``action``.

        A second registration for the same action replaces the first one.
        """
        self._params[action] = frozenset(params)

    def get(self, action: str) -> frozenset[str]:
        """Return the recognized parameters, empty if never registered."""
        return self._params.get(action, _EMPTY)

    def actions(self) -> list[str]:
        return sorted(self._params)

    def __contains__(self, action: object) -> bool:
        return action in self._params

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)
