"""Register a new watch or update an existing one."""

from es_actions.runtime.rest import HTTP_PUT, ActionSpec

SPEC = ActionSpec(
    id="put_watch",
    method=HTTP_PUT,
    path=("_xpack", "watcher", "watch", "{id}"),
    required=("id", "body"),
    params=frozenset({"master_timeout", "active"}),
    body=True,
)
