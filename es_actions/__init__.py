"""es-actions - async client bindings for search engine warmer and watcher APIs."""

from .actions import default_params_registry, get_action_spec, list_actions
from .clients import IndicesNamespace, SearchClient, WatcherNamespace
from .core import (
    ClientConfig,
    ClientError,
    MissingRequiredArgumentError,
    ParamsRegistry,
    TransportError,
    UnknownActionError,
    UnsupportedParameterError,
)
from .runtime.rest import (
    ActionRunner,
    ActionSpec,
    HTTPClient,
    Response,
    RESTTransport,
)

__version__ = "0.1.0"

__all__ = [
    "SearchClient",
    "IndicesNamespace",
    "WatcherNamespace",
    "ClientConfig",
    "ParamsRegistry",
    "default_params_registry",
    "get_action_spec",
    "list_actions",
    "ActionRunner",
    "ActionSpec",
    "HTTPClient",
    "RESTTransport",
    "Response",
    "ClientError",
    "MissingRequiredArgumentError",
    "UnsupportedParameterError",
    "UnknownActionError",
    "TransportError",
]
