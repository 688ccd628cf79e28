"""Transport adapters."""

from .response import HttpxRawResponse


__all__ = ["HttpxRawResponse"]
