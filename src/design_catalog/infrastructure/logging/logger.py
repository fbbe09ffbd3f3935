"""Structured logging for the catalog, built on structlog over stdlib logging."""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional, TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from design_catalog.config.schemas.logging_schema import LoggingConfig

_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Log records never go to stdout, which is reserved for demonstration output.

    Args:
        config: Logging configuration. If None, defaults are used.

    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from design_catalog.config.schemas.logging_schema import LoggingConfig
        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper()))

    if config.json_format:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )

    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both"):
        log_path = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        handlers.append(file_handler)

    if config.destination in ("stderr", "both"):
        handlers.append(logging.StreamHandler(sys.stderr))

    if not handlers:
        handlers.append(logging.NullHandler())

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = structlog.get_logger("design_catalog")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the given name."""
    return structlog.get_logger(name)


# Route structlog through stdlib logging even before setup_logging() runs,
# so nothing is printed to stdout by default.
if not structlog.is_configured():
    _configure_structlog()
