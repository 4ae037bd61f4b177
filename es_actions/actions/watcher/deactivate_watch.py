"""Deactivate a currently active watch.

Arguments:
    watch_id: Watch ID (required)
    master_timeout: Timeout for the watch write operation, e.g. ``"30s"``
"""

from es_actions.runtime.rest import HTTP_PUT, ActionSpec

SPEC = ActionSpec(
    id="deactivate_watch",
    method=HTTP_PUT,
    path=("_xpack", "watcher", "watch", "{watch_id}", "_deactivate"),
    required=("watch_id",),
    params=frozenset({"master_timeout"}),
)
