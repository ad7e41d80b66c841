"""Test mocks for screenplay-kit.

Provides mock implementations for testing:
- InMemoryApplication: Simulates the application under test
- ApplicationDriver: DomainDriver over the in-memory application
"""

from .inmemory_app import ApplicationDriver, InMemoryApplication

__all__ = ["ApplicationDriver", "InMemoryApplication"]
