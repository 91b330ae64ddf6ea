"""Structured logging for the catalogue using structlog.

Log records go through the standard library logging machinery so handlers,
levels and rotation are configured in one place. Console records are written
to stderr: stdout belongs to the demos.
"""
from __future__ import annotations

import logging
import os
import threading
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List, Optional

import structlog

if TYPE_CHECKING:
    from pattern_catalog.config.schemas import LoggingConfig

LOG_FORMAT = "%(message)s"

_configure_lock = threading.Lock()
_structlog_configured = False


def _configure_structlog() -> None:
    """Route structlog through stdlib logging (idempotent)."""
    global _structlog_configured
    with _configure_lock:
        if _structlog_configured:
            return
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.processors.CallsiteParameterAdder(
                    {
                        structlog.processors.CallsiteParameter.MODULE,
                        structlog.processors.CallsiteParameter.FUNC_NAME,
                        structlog.processors.CallsiteParameter.LINENO,
                    }
                ),
                structlog.processors.KeyValueRenderer(
                    key_order=["timestamp", "level", "logger", "event"]
                ),
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        _structlog_configured = True


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application.

    Args:
        config: Logging configuration. If None, defaults are used.

    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from pattern_catalog.config.schemas import LoggingConfig

        config = LoggingConfig()

    _configure_structlog()

    level_name = getattr(config.level, "value", config.level)
    destination = getattr(config.destination, "value", config.destination)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, str(level_name).upper()))

    handlers: List[logging.Handler] = []
    formatter = logging.Formatter(LOG_FORMAT)

    if destination in ("file", "both"):
        log_path = os.path.expandvars(config.file.path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.file.max_size_mb * 1024 * 1024,
            backupCount=config.file.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if destination in ("stdout", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        root_logger.addHandler(handler)

    logger = get_logger(__name__)
    logger.debug(
        "Logging configured",
        log_level=str(level_name),
        log_destination=str(destination),
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to ``name``."""
    _configure_structlog()
    return structlog.get_logger(name)
