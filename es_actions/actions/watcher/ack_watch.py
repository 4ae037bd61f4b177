"""Acknowledge a watch, throttling its actions until the condition resets.

Without ``action_id`` every action of the watch is acknowledged.
"""

from es_actions.runtime.rest import HTTP_PUT, ActionSpec

SPEC = ActionSpec(
    id="ack_watch",
    method=HTTP_PUT,
    path=("_xpack", "watcher", "watch", "{watch_id}", "_ack", "{action_id}"),
    required=("watch_id",),
    params=frozenset({"master_timeout"}),
)
