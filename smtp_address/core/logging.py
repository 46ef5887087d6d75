"""Structured logging configuration -- structlog + stdlib integration.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves. Applications that want the package's log
records rendered consistently call :func:`configure_logging` once at
start-up; every stdlib record then flows through the structlog processor
pipeline and is rendered as console text or single-line JSON.
"""

import logging
import sys
from typing import Any, List, Optional

import structlog

from smtp_address.core.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog with stdlib logging integration.

    Args:
        settings: Settings to read level and format from; defaults to the
            cached package settings
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level)

    shared_processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger("smtp_address")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    get_logger(__name__).debug(
        "logging_configured",
        level=settings.log_level,
        log_format=settings.log_format,
    )


def get_logger(name: Optional[str] = None) -> Any:
    """Return a structlog bound logger."""
    return structlog.get_logger(name)
