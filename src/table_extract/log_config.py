"""structlog setup for applications embedding table_extract."""

import logging
import sys

import structlog

from table_extract.config.settings import LoggingSettings, get_settings


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog rendering and level.

    Library code only emits events; call this once from the application to
    choose JSON or console output. Until it is called, structlog's defaults
    apply: every level prints to stdout and ``LoggingSettings.level`` is ignored.

    Args:
        settings: Logging settings. Defaults to the cached application settings.
    """
    settings = settings or get_settings().logging

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.format == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(settings.level)),
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=False,
    )
