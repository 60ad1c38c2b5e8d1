"""
HTTP transport for the Kraken API.

This package provides the session-owning HTTP client the core client sends
its requests through.
"""

from __future__ import annotations

from libtwitch.api.http_client import HTTPClient


__all__ = [
    "HTTPClient",
]
