"""Structured logging for test runs.

Every event carries the xdist worker that emitted it; events raised while a
scenario runs also carry the scenario's node id, so interleaved output from
parallel workers can be split back apart.
"""

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from swaglabs.config.settings import Settings, get_settings

# Libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")


def worker_id() -> str:
    """xdist worker name ("gw0", "gw1", ...), "main" without xdist."""
    return os.environ.get("PYTEST_XDIST_WORKER", "main")


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog: JSON lines in CI, console rendering when debugging."""
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level)

    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.debug
        else structlog.processors.JSONRenderer()
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
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(worker=worker_id())

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


@contextmanager
def scenario_context(scenario: str) -> Iterator[None]:
    """Attach `scenario` to every event logged inside the block."""
    with structlog.contextvars.bound_contextvars(scenario=scenario):
        yield


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
