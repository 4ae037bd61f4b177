"""Activate a currently inactive watch."""

from es_actions.runtime.rest import HTTP_PUT, ActionSpec

SPEC = ActionSpec(
    id="activate_watch",
    method=HTTP_PUT,
    path=("_xpack", "watcher", "watch", "{watch_id}", "_activate"),
    required=("watch_id",),
    params=frozenset({"master_timeout"}),
)
