"""Core components."""

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from .exceptions import (
    ClientError,
    MissingRequiredArgumentError,
    TransportError,
    UnknownActionError,
    UnsupportedParameterError,
)
from .params import ParamsRegistry

__all__ = [
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "ClientError",
    "MissingRequiredArgumentError",
    "UnsupportedParameterError",
    "UnknownActionError",
    "TransportError",
    "ParamsRegistry",
]
