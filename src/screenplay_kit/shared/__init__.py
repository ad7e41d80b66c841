"""Shared modules for screenplay-kit.

This module provides functionality used by both the CLI and the pytest
plugin:
- Paths (~/.screenplay/)
- Logging (structlog setup)
"""

from .logging import configure_logging, get_logger
from .paths import CONFIG_FILE, SCREENPLAY_DIR

__all__ = [
    # Paths
    "SCREENPLAY_DIR",
    "CONFIG_FILE",
    # Logging
    "configure_logging",
    "get_logger",
]
