"""Core interfaces and logging."""

from .interfaces import Codec, RawResponse
from .logging import get_logger, setup_logging, setup_logging_from_settings


__all__ = [
    "Codec",
    "RawResponse",
    "get_logger",
    "setup_logging",
    "setup_logging_from_settings",
]
