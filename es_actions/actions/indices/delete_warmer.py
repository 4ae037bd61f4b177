"""Delete one or more index warmers."""

from es_actions.runtime.rest import HTTP_DELETE, ActionSpec

SPEC = ActionSpec(
    id="delete_warmer",
    method=HTTP_DELETE,
    path=("{index}", "_warmer", "{name}"),
    required=("index",),
    params=frozenset({"master_timeout"}),
)
