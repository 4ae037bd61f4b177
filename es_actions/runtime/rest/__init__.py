"""REST runtime abstractions."""

from .http_client import HTTPClient
from .response import Response
from .runner import (
    HTTP_DELETE,
    HTTP_GET,
    HTTP_POST,
    HTTP_PUT,
    ActionRunner,
    ActionSpec,
    Transport,
)
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "Response",
    "ActionRunner",
    "ActionSpec",
    "Transport",
    "HTTP_GET",
    "HTTP_PUT",
    "HTTP_POST",
    "HTTP_DELETE",
]
