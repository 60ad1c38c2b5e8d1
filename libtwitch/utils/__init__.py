"""Utility modules for libtwitch."""

from __future__ import annotations

# JSON utilities
from .json_utils import json_load, json_save

# Query parameters
from .params import normalize_params


__all__ = [
    # JSON utilities
    "json_load",
    "json_save",
    # Query parameters
    "normalize_params",
]
