import logging
import sys

import structlog

from mc_templater import config


def configure_logging(humanize=None, level=None):
    """
    Configure structlog for the process.

    Args:
        humanize: Render coloured key=value lines instead of JSON, defaults to
            ``settings.HUMANIZE_LOGS``
        level: Minimum stdlib log level to emit, defaults to ``settings.LOG_LEVEL``
    """
    if humanize is None:
        humanize = config.settings.HUMANIZE_LOGS
    if level is None:
        level = config.settings.LOG_LEVEL

    if humanize:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def ensure_logging():
    """Configure logging from settings unless the host application already has."""
    if not structlog.is_configured():
        configure_logging()


def get_logger(name):
    return structlog.get_logger(name)
