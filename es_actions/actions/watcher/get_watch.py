"""Retrieve a registered watch."""

from es_actions.runtime.rest import HTTP_GET, ActionSpec

SPEC = ActionSpec(
    id="get_watch",
    method=HTTP_GET,
    path=("_xpack", "watcher", "watch", "{id}"),
    required=("id",),
)
