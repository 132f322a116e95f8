"""Log routing for the shop CLI.

The domain modules log rejected input (bad address fields, out-of-range
discounts) at DEBUG through plain ``logging.getLogger(__name__)`` and stay
silent until this is called. ``shop-demo --verbose`` surfaces those events on
stderr, rendered by structlog for a terminal or, with ``--log-json``, one JSON
object per rejection. The core Option and Outcome types never log.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "src.shop"


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install one stderr handler that renders shop log records with structlog.

    Calling it again replaces the handler instead of adding another.

    Args:
        verbose: Show validation rejections (DEBUG) from ``src.shop``.
        log_json: Render records as JSON lines instead of console text.
    """
    shop_level = logging.DEBUG if verbose else logging.WARNING

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
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
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

    logging.getLogger(LOGGER_NAME).setLevel(shop_level)
