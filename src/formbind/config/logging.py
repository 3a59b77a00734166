"""Route formbind's log records through structlog.

``configure_logging`` installs one stderr handler on the ``formbind`` logger
and stops propagation, so the root logger and other libraries' loggers are
left as the host application configured them. Both structlog loggers and
plain ``logging.getLogger(__name__)`` loggers under ``formbind`` are
rendered by the same ``ProcessorFormatter``: as console lines by default,
or as one JSON object per line with ``--log-json``.

Library users who manage logging themselves never need to call this.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "formbind"

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> logging.Handler:
    """Configure structlog and attach a stderr handler to the ``formbind`` logger.

    Calling it again replaces the handler from the previous call.

    Args:
        verbose: Log bind events at DEBUG. When False, only WARNING+.
        log_json: Render JSON lines instead of console output.

    Returns:
        The installed handler.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers[:] = [handler]
    logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler
