"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from quill.config import AuthSettings, Settings
from quill.interface.api.app import create_app
from quill.util.di.container import setup_di
from tests.di import build_test_container

API_KEY = "test-api-key"


def make_client(settings: Settings, **client_kwargs) -> TestClient:
    """Create test client backed by the test container.

    The app and the container share ``settings``.
    """
    app_instance = create_app(settings)
    test_container = build_test_container(settings=settings)
    setup_di(app_instance, test_container)
    return TestClient(app_instance, headers={"x-api-key": API_KEY}, **client_kwargs)


@pytest.fixture
def client():
    """Create test client with test container and a configured API key."""
    return make_client(Settings(auth=AuthSettings(api_key=API_KEY)))
