"""
utils/logging_setup.py
----------------------

Central logging configuration for the inflection engine.

Goals:
- Provide a single place to configure structlog processors and renderer.
- Make it easy to get a logger in any module:
      import structlog
      logger = structlog.get_logger()
- Take the level and renderer from `app.shared.config.settings`
  (LOG_LEVEL, LOG_FORMAT), which can be overridden from the environment
  or a `.env` file.

Usage
=====

Library modules only emit events:

    logger.debug("custom_noun_defined", singular="octopus", plural="octopodes")

Importing `engines` calls `configure_logging()` once, before the default
engine is built, so debug events stay quiet unless LOG_LEVEL asks for them.
An application that wants another level or renderer reconfigures:

    from utils.logging_setup import configure_logging

    configure_logging(level="DEBUG", force=True)

Implementation notes
====================

- `configure_logging` is idempotent; calling it multiple times is safe
  unless `force=True` is passed.
- JSON output is meant for production pipelines, the console renderer for
  local development.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from app.shared.config import LogFormat, settings

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False


def _resolve_level(level_name: Optional[str]) -> int:
    """
    Map a level name (e.g. "DEBUG") to a logging level.
    Defaults to logging.INFO if unset or invalid.
    """
    name = (level_name or settings.LOG_LEVEL or "INFO").upper()
    return getattr(logging, name, logging.INFO)


def configure_logging(
    level: Optional[str] = None,
    log_format: Optional[LogFormat] = None,
    *,
    force: bool = False,
) -> None:
    """
    Configure structlog and the standard logging library.

    Args:
        level:
            Level name. If None, `settings.LOG_LEVEL` is used.
        log_format:
            Renderer choice. If None, `settings.LOG_FORMAT` is used.
        force:
            If True, reconfigure even if logging was already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    numeric_level = _resolve_level(level)
    fmt = LogFormat(log_format) if log_format is not None else settings.LOG_FORMAT

    # 1. Processor chain
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Output format
    if fmt == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # 3. Structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # 4. Standard library logging (third-party libraries)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )

    _INITIALIZED = True


def get_logger(name: Optional[str] = None) -> structlog.typing.FilteringBoundLogger:
    """
    Get a structlog logger, ensuring logging is configured.

    Args:
        name:
            Logger name, usually __name__ of the calling module.
    """
    if not _INITIALIZED:
        configure_logging()
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger(name)


__all__ = ["configure_logging", "get_logger"]
