"""structlog configuration for rit.

Everything goes to stderr so the child command keeps stdout to itself.
Records from the stdlib loggers used across ``rit.launcher`` are rendered
by the same pipeline, and pick up whatever launch context the CLI bound
(``subcommand``, ``base_command``) through structlog's contextvars.
"""

from __future__ import annotations

import logging
import sys

import structlog

HANDLER_NAME = "rit-stderr"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route rit's logs to stderr.

    Args:
        verbose: Show launcher decisions (DEBUG). Otherwise WARNING+ only.
        log_json: One JSON object per line instead of console output.

    Safe to call repeatedly: the previous rit handler is replaced, other
    root handlers are left alone.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("rit").setLevel(logging.DEBUG if verbose else logging.WARNING)
