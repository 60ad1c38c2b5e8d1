"""OAuth helpers for the Kraken API."""

from __future__ import annotations

from libtwitch.auth.scopes import Scope, auth_code_flow, format_scopes, imp_grant_flow


__all__ = [
    "Scope",
    "format_scopes",
    "auth_code_flow",
    "imp_grant_flow",
]
