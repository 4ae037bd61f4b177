"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class ClientError(Exception):
    """Base exception for all library errors."""

    pass


class MissingRequiredArgumentError(ClientError, ValueError):
    """A required action argument is absent or empty.

    Raised before any request is sent, so the call can be retried once the
    caller supplies the argument.
    """

    def __init__(self, argument: str) -> None:
        super().__init__(f"Required argument '{argument}' missing")
        self.argument = argument


class UnsupportedParameterError(ClientError, ValueError):
    """Query parameter is not recognized by the action (strict mode only)."""

    def __init__(self, parameter: str, action: str) -> None:
        super().__init__(f"URL parameter '{parameter}' is not supported by '{action}'")
        self.parameter = parameter
        self.action = action


class UnknownActionError(ClientError, KeyError):
    """No action is registered under the requested id."""

    def __init__(self, action: str) -> None:
        super().__init__(action)
        self.action = action

    def __str__(self) -> str:
        return f"Unknown action: {self.action}"


class TransportError(ClientError):
    """Server answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
