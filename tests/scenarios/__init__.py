"""Scenario tests for screenplay-kit.

Gherkin features under features/ are bound to screenplay steps with
pytest-bdd. Each scenario gets a fresh in-memory application and a cast
from screenplay_kit.pytest_plugin.
"""
