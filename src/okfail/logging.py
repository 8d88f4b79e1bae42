"""
structlog setup for applications using okfail's execution contexts.

okfail never configures logging on import. Call configure_logging() at the
application's entry point; calling it again later takes effect for every
logger, module-level ones included, since loggers are not cached:

    from okfail.logging import configure_logging

    configure_logging()                                  # from OKFAIL_* env vars
    configure_logging(LoggingSettings(log_level="DEBUG"))
"""

from __future__ import annotations

import structlog

from okfail.config import LoggingSettings


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """
    Configure structlog for structured logging.

    Console rendering by default (colored, human-readable); JSON lines when
    settings.json_logs is set.
    """
    settings = settings or LoggingSettings()
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(settings.level_number),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
