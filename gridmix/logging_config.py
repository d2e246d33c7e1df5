"""
Logging setup: structlog rendering on top of the standard logging module.

gridmix modules only emit events; they never configure logging themselves.
Applications using gridmix as a library must call configure_logging() (the
gridmix command-line entry points do) so diagnostics such as
"generation_document_decode_failed" go to stderr. Left unconfigured,
structlog falls back to printing on stdout.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

import structlog
from structlog.types import Processor


def configure_logging(level: Optional[str] = None, json_output: bool = False) -> None:
    """
    Configure structlog and the root logger, with a single stderr handler.

    Args:
        level: Log level name. Falls back to LOG_LEVEL, then INFO.
        json_output: Render events as JSON lines instead of the console format.
    """
    log_level = level or os.environ.get("LOG_LEVEL") or "INFO"
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    renderer: Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(numeric_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger for a gridmix module."""
    return structlog.get_logger(name)
