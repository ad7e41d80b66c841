"""Logging configuration for screenplay-kit.

Actors and casts log every step they attempt at debug level. This module
wires those structlog events to stderr (human-readable) or to a file as
JSON lines, so a failing scenario can be replayed step by step.
"""

import logging
import sys
from pathlib import Path

import structlog


def _processors(json_output: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def configure_logging(
    level: str = "warning",
    log_file: str | Path | None = None,
    json_output: bool | None = None,
) -> None:
    """Configure stdlib logging and structlog.

    Args:
        level: Log level (debug, info, warning, error, critical)
        log_file: Optional path to a log file; stderr otherwise
        json_output: Render JSON lines. Defaults to True when writing to a file.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)
    if json_output is None:
        json_output = log_file is not None

    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(str(log_file))
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    logging.basicConfig(
        level=log_level,
        handlers=[handler],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=_processors(json_output),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
