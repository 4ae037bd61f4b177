"""Unit tests for ClientConfig."""

import pydantic
import pytest

from es_actions.core import ClientConfig


class TestClientConfig:
    """Test ClientConfig validation."""

    def test_defaults(self):
        """Test default values."""
        config = ClientConfig()
        assert config.base_url == "http://localhost:9200"
        assert config.timeout == 30.0
        assert config.headers == {}
        assert config.strict_params is False

    def test_strips_whitespace(self):
        """Test base_url whitespace is stripped."""
        assert ClientConfig(base_url="  http://es:9200 ").base_url == "http://es:9200"

    def test_rejects_non_positive_timeout(self):
        """Test timeout must be positive."""
        with pytest.raises(pydantic.ValidationError):
            ClientConfig(timeout=0)

    def test_rejects_empty_base_url(self):
        """Test base_url must not be empty."""
        with pytest.raises(pydantic.ValidationError):
            ClientConfig(base_url="")

    def test_frozen(self):
        """Test config is immutable."""
        config = ClientConfig()
        with pytest.raises(pydantic.ValidationError):
            config.timeout = 5.0
