"""Structured logging via structlog.

Configures structlog once when a checker is created. Library modules log
through `logging.getLogger(__name__)`; the stdlib bridge routes those
records to the same stream.

Renderer selection:
  debug=True: `ConsoleRenderer` with colours for local development.
  debug=False: `JSONRenderer` for machine-parseable logs.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_structlog(debug: bool = True) -> None:
    """Configure structlog for the process lifetime.

    Calling it more than once is safe.
    """
    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )
