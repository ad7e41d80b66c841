"""Shared test fixtures for screenplay-kit tests.

This module provides:
- Config isolation: every test sees a temporary config file and no
  SCREENPLAY_* environment variables
- app / domain_driver: a fresh in-memory application per test
- recording_driver: a mock driver that records call order
- restore_logging: undo configure_logging calls made by a test
"""

from unittest.mock import MagicMock

import pytest

from screenplay_kit import Abilities, Actor
from screenplay_kit.config import ENV_VARS
from tests.logging_state import preserved_logging
from tests.mocks import ApplicationDriver, InMemoryApplication

pytest_plugins = ["screenplay_kit.pytest_plugin"]


# =============================================================================
# Config isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config loading at an empty temp file and clear env overrides."""
    config_file = tmp_path / ".screenplay" / "config.yaml"
    monkeypatch.setattr("screenplay_kit.config.get_config_path", lambda: config_file)
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    return config_file


@pytest.fixture
def restore_logging():
    """Put root handlers and structlog configuration back after the test."""
    with preserved_logging():
        yield


# =============================================================================
# Application under test
# =============================================================================


@pytest.fixture
def app() -> InMemoryApplication:
    """Fresh application per scenario."""
    return InMemoryApplication()


@pytest.fixture
def domain_driver(app: InMemoryApplication) -> ApplicationDriver:
    """Driver used by the screenplay_kit.pytest_plugin cast fixture."""
    return ApplicationDriver(app)


@pytest.fixture
def recording_driver() -> MagicMock:
    """Driver double whose method_calls list records every interaction."""
    return MagicMock(spec=ApplicationDriver)


@pytest.fixture
def sue(domain_driver: ApplicationDriver) -> Actor:
    """Sue, acting against the in-memory application."""
    return Actor(Abilities(name="Sue", driver=domain_driver))
