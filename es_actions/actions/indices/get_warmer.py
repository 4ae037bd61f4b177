"""Retrieve index warmers, optionally filtered by type and warmer name."""

from es_actions.runtime.rest import HTTP_GET, ActionSpec

SPEC = ActionSpec(
    id="get_warmer",
    method=HTTP_GET,
    path=("{index}", "{type}", "_warmer", "{name}"),
    required=("index",),
    params=frozenset(
        {
            "allow_no_indices",
            "expand_wildcards",
            "ignore_indices",
            "ignore_unavailable",
            "local",
        }
    ),
)
