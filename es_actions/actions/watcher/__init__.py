"""Watcher actions."""

from .ack_watch import SPEC as ACK_WATCH
from .activate_watch import SPEC as ACTIVATE_WATCH
from .deactivate_watch import SPEC as DEACTIVATE_WATCH
from .delete_watch import SPEC as DELETE_WATCH
from .get_watch import SPEC as GET_WATCH
from .put_watch import SPEC as PUT_WATCH

__all__ = [
    "PUT_WATCH",
    "GET_WATCH",
    "DELETE_WATCH",
    "ACTIVATE_WATCH",
    "DEACTIVATE_WATCH",
    "ACK_WATCH",
]
