"""Remove a watch."""

from es_actions.runtime.rest import HTTP_DELETE, ActionSpec

SPEC = ActionSpec(
    id="delete_watch",
    method=HTTP_DELETE,
    path=("_xpack", "watcher", "watch", "{id}"),
    required=("id",),
    params=frozenset({"master_timeout", "force"}),
)
