"""Header lookup helpers."""

from collections.abc import Mapping
from typing import Any


def get_header(headers: Mapping[str, str] | Any, name: str) -> str | None:
    """Return the value of ``name`` using a case-insensitive key match.

    When several entries match (e.g. ``Content-Type`` and ``content-type`` in
    a plain dict), the last one wins. Multi-value containers such as
    ``httpx.Headers`` are asked for their individual values so repeated
    headers are not comma-joined.
    """
    if headers is None:
        return None

    if hasattr(headers, "get_list"):
        values = headers.get_list(name)
        return values[-1] if values else None

    lowered = name.lower()
    found: str | None = None
    for key, value in headers.items():
        if key.lower() == lowered:
            found = value
    return found
