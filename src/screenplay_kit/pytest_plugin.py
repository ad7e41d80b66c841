"""pytest fixtures scoping a cast to a single scenario.

Enable with ``pytest_plugins = ["screenplay_kit.pytest_plugin"]`` and
provide a function-scoped ``domain_driver`` fixture wrapping a fresh
instance of the application under test.
"""

from __future__ import annotations

from collections.abc import Callable, Generator

import pytest

from .cast import Cast, persona_type
from .config import ScreenplayConfig, load_config
from .driver import DomainDriver
from .shared.logging import configure_logging


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "scenario: behaviour scenario played by a cast")
    configure_logging(load_config().log_level)


def actor_parameter_types(
    config: ScreenplayConfig | None = None,
) -> dict[str, Callable[[str], str]]:
    """``extra_types`` for step parsers, built from the configured roster.

    Step parsers are compiled when step modules are imported, so the roster
    is read at that point (file + environment).
    """
    roster = (config or load_config()).personas
    return {"Actor": persona_type(roster)}


@pytest.fixture
def screenplay_config() -> ScreenplayConfig:
    """Configuration for the current test (file + environment)."""
    return load_config()


@pytest.fixture
def cast(
    domain_driver: DomainDriver, screenplay_config: ScreenplayConfig
) -> Generator[Cast, None, None]:
    """Cast sharing this scenario's driver; dismissed after the test."""
    scenario_cast = Cast(
        domain_driver,
        personas=screenplay_config.personas,
        cache_actors=screenplay_config.cache_actors,
    )
    yield scenario_cast
    scenario_cast.dismiss()
