"""Structured logging setup for typed_response."""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor


if TYPE_CHECKING:
    from typed_response.config.core import LoggingSettings


def setup_logging(json_logs: bool = False, log_level_name: str = "INFO") -> None:
    """Configure structlog and the standard library root logger.

    Args:
        json_logs: Render events as JSON lines instead of console output
        log_level_name: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer: Processor
    if json_logs:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
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
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)

    # Transport libraries are noisy at DEBUG
    for logger_name in ["httpx", "httpcore"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to ``name``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog bound logger
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]


def setup_logging_from_settings(settings: "LoggingSettings") -> None:
    """Configure logging from :class:`LoggingSettings`.

    ``auto`` format renders JSON when stderr is not attached to a terminal.
    """
    if settings.format == "auto":
        json_logs = not sys.stderr.isatty()
    else:
        json_logs = settings.format == "json"
    setup_logging(json_logs=json_logs, log_level_name=settings.level)
