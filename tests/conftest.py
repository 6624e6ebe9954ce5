"""Shared fixtures for the lesson tests."""
import pytest

from solid_lessons import create_app
from solid_lessons.config.settings import TestingConfig
from solid_lessons.infrastructure.service_container import ServiceContainer


@pytest.fixture(autouse=True)
def reset_container():
    """Give every test a fresh service container."""
    ServiceContainer.reset()
    yield
    ServiceContainer.reset()


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()
