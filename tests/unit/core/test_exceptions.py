"""Unit tests for the exception hierarchy."""

from es_actions.core import (
    ClientError,
    MissingRequiredArgumentError,
    TransportError,
    UnknownActionError,
    UnsupportedParameterError,
)


class TestExceptions:
    """Test exception attributes and hierarchy."""

    def test_missing_argument(self):
        """Test MissingRequiredArgumentError names the argument."""
        error = MissingRequiredArgumentError("watch_id")
        assert error.argument == "watch_id"
        assert str(error) == "Required argument 'watch_id' missing"
        assert isinstance(error, ClientError)
        assert isinstance(error, ValueError)

    def test_unsupported_parameter(self):
        """Test UnsupportedParameterError carries parameter and action."""
        error = UnsupportedParameterError("bogus", "put_watch")
        assert "bogus" in str(error)
        assert "put_watch" in str(error)

    def test_unknown_action(self):
        """Test UnknownActionError is a KeyError with a readable message."""
        error = UnknownActionError("nope")
        assert isinstance(error, KeyError)
        assert str(error) == "Unknown action: nope"

    def test_transport_error(self):
        """Test TransportError carries status and body."""
        error = TransportError("failed", status_code=404, body={"found": False})
        assert error.status_code == 404
        assert error.body == {"found": False}
