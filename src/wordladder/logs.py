"""structlog setup for the wordladder CLI.

Module loggers wrap stdlib loggers named after the module, so events from the
loaders and the ladder loop follow stdlib levels and stay silent for library
callers until :func:`configure_logging` (run by the CLI) attaches a handler.
Log lines go to stderr so they never mix with ladders printed on stdout.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Loggers whose level follows --verbose.
PACKAGE_LOGGERS = ("wordladder.ingest", "wordladder.ladder")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog through stdlib logging to stderr.

    Args:
        verbose: DEBUG for the wordladder loggers; WARNING otherwise.
        log_json: Render JSON instead of the console format.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(level)
