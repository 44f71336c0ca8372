"""Structlog configuration for the modelprint CLI."""

from __future__ import annotations

import logging as std_logging
import sys
from typing import TextIO

import structlog

STDLIB_FORMAT = "%(levelname)s %(name)s: %(message)s"


def level_from_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return std_logging.WARNING
    if verbosity == 1:
        return std_logging.INFO
    return std_logging.DEBUG


def configure_logging(
    json_mode: bool = False,
    verbosity: int = 0,
    *,
    stream: TextIO | None = None,
) -> None:
    """Send stdlib and structlog records to `stream` (stderr by default).

    Rendered models go to stdout, so diagnostics never share it.
    """

    target = stream if stream is not None else sys.stderr
    level = level_from_verbosity(verbosity)
    handler = std_logging.StreamHandler(target)
    handler.setFormatter(std_logging.Formatter(STDLIB_FORMAT))
    std_logging.basicConfig(level=level, handlers=[handler], force=True)

    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer()
        if json_mode
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=target),
        cache_logger_on_first_use=True,
    )
