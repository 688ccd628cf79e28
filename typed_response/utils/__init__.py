"""Utility helpers."""

from .headers import get_header


__all__ = ["get_header"]
