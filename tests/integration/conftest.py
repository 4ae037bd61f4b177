"""Shared fixtures for integration tests."""

import os

import pytest


@pytest.fixture
def base_url():
    return os.environ.get("ES_ACTIONS_URL", "http://localhost:9200")
