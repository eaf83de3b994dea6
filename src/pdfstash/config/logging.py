"""Logging setup: stdlib records rendered by structlog.

Modules log through ``logging.getLogger(__name__)``; this module only decides
where those records go and how they look. Everything goes to stderr so stdout
stays clean for command results.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "pdfstash"


def _pre_chain() -> list[structlog.types.Processor]:
    """Processors shared by structlog loggers and plain stdlib records."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _render_chain(log_json: bool) -> list[structlog.types.Processor]:
    chain: list[structlog.types.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if log_json:
        # Tracebacks from exc_info=True become a string field.
        chain += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        chain.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    return chain


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Send ``pdfstash`` records to stderr, replacing any earlier setup.

    Only the ``pdfstash`` logger opens up to DEBUG under *verbose*; other
    libraries stay at WARNING.
    """
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=_render_chain(log_json),
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
