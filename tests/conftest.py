"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from nihongo_proxy.api.handlers import get_http_client
from nihongo_proxy.main import app

from .fixtures import GLM_SERVER_KEY, SERVER_KEY, MockUpstream

CONFIG_ENV_VARS = (
    "API_KEY",
    "GLM_API_KEY",
    "API_URL",
    "DEFAULT_MODEL",
    "REQUEST_TIMEOUT",
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "LOG_FILE",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every configuration variable from the process environment."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def server_keys(clean_env):
    """Configure both server-side fallback keys."""
    clean_env.setenv("API_KEY", SERVER_KEY)
    clean_env.setenv("GLM_API_KEY", GLM_SERVER_KEY)
    return clean_env


@pytest.fixture
def upstream():
    return MockUpstream()


@pytest.fixture
def client(upstream):
    """TestClient whose outbound calls go to the mock upstream."""
    app.dependency_overrides[get_http_client] = lambda: upstream.client
    yield TestClient(app)
    app.dependency_overrides.clear()
