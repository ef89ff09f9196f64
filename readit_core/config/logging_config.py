"""Logging configuration for the scraper.

Configures structlog to use clean, concise logging without verbose tracebacks.
"""

import logging
import sys

import structlog


def configure_logging(debug_mode: bool = False, log_level: str = "INFO"):
    """Configure structlog and standard logging.

    Args:
        debug_mode: Enable debug logging if True (overrides log_level)
        log_level: Name of the level used when debug_mode is off
    """
    level = logging.DEBUG if debug_mode else logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    # Configure standard logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )

    # Silence noisy loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
            structlog.dev.set_exc_info,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
