import os
import logging
import structlog
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from azurerm_plugin.config.schemas import LoggingConfig, LogDestination

# Processors shared by structlog loggers and records from plain stdlib loggers.
SHARED_PROCESSORS = [
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


class DetailedFormatter(structlog.stdlib.ProcessorFormatter):
    """Formatter that includes caller information."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    if config.destination in (LogDestination.FILE, LogDestination.BOTH):
        log_path = os.path.expandvars(config.file.path)
        if os.path.dirname(log_path):
            os.makedirs(os.path.dirname(log_path), exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_path,
            maxBytes=config.file.max_size_mb * 1024 * 1024,
            backupCount=config.file.backup_count,
        ))

    if config.destination in (LogDestination.CONSOLE, LogDestination.BOTH):
        # stderr, so that stdout carries only command output
        handlers.append(logging.StreamHandler())

    formatter = DetailedFormatter(
        processor=structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
        foreign_pre_chain=SHARED_PROCESSORS,
        fmt=config.format,
    )
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the plugin using structlog.

    Replaces any handlers already installed on the root logger, so calling it
    again applies a new configuration.

    Args:
        config: Logging configuration. If None, defaults are used.
    Returns:
        Configured structlog logger instance.
    """
    config = config or LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in _build_handlers(config):
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[structlog.stdlib.filter_by_level]
        + SHARED_PROCESSORS
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("azurerm_plugin")
    logger.debug("Logging configured", log_level=config.level, log_destination=config.destination.value)
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    return structlog.get_logger(name)
