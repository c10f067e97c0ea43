"""
Configuration module for pytest.

This module contains fixtures and setup/teardown functions for tests.
"""

import socket

import pytest
from fastapi.testclient import TestClient

from greeter.server.app import create_app

GREETER_ENV_VARS = (
    "GREETER_HOST",
    "GREETER_PORT",
    "GREETER_LOG_LEVEL",
    "GREETER_LOG_DIR",
)


@pytest.fixture
def client():
    """Return a test client for a freshly built application."""
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove greeter environment variables so host settings do not leak in."""
    for var in GREETER_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def occupied_port():
    """Hold a listening socket on a free port for the duration of a test."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind(("127.0.0.1", 0))
        sock.listen(1)
        yield sock.getsockname()[1]
    finally:
        sock.close()


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config file and return its path."""

    def _write(text):
        path = tmp_path / "server.yml"
        path.write_text(text)
        return path

    return _write
