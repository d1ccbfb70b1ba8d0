"""structlog setup for the command line."""
from __future__ import annotations

import logging

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Console logging at INFO, or DEBUG when verbose."""
    level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
