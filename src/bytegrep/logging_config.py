"""structlog setup for the bytegrep CLI."""

from __future__ import annotations

import logging
import os
import sys

import structlog

DEBUG_ENV = "BYTEGREP_DEBUG"


def _stderr_logger(*_args: object) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so redirected streams are honored
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(*, debug: bool | None = None) -> None:
    """Send structured logs to stderr.

    Warnings and above by default; debug output when `debug` is True or
    BYTEGREP_DEBUG is set.
    """
    if debug is None:
        debug = bool(os.environ.get(DEBUG_ENV))
    level = logging.DEBUG if debug else logging.WARNING

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )
