"""Query parameter normalization."""

from __future__ import annotations

from collections import abc
from typing import Any


def normalize_params(params: abc.Mapping[str, Any] | None) -> dict[str, str]:
    """
    Convert query parameters into strings aiohttp accepts.

    ``None`` values are dropped, booleans become "true"/"false"
    and sequences are joined with commas.
    """
    normalized: dict[str, str] = {}
    if not params:
        return normalized
    for key, value in params.items():
        if value is None:
            continue
        normalized[key] = _serialize_param(value)
    return normalized


def _serialize_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_serialize_param(v) for v in value)
    return str(value)
