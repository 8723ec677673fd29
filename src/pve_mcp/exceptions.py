"""
Error types raised by the Proxmox gateway.

Startup errors (``ConfigurationError``, ``AuthError``) abort the server.
Everything else is raised per call and turned into an error-flagged result
at the dispatch boundary.
"""
from __future__ import annotations

import json
from typing import Any


class PveError(Exception):
    """Base error for pve-mcp."""


class ConfigurationError(PveError):
    """Raised when credentials or settings are missing or invalid."""


class AuthError(PveError):
    """Raised when a session ticket cannot be obtained."""


class UnknownOperation(PveError):
    """Raised when an operation name is not in the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ValidationError(PveError):
    """Raised when call parameters do not satisfy the operation schema."""


class RemoteApiError(PveError):
    """Raised for any non-success HTTP response from the Proxmox API."""

    def __init__(self, status: int, body: Any) -> None:
        self.status = status
        self.body = body
        super().__init__(f"Proxmox API error: {status} - {_render_body(body)}")


def _render_body(body: Any) -> str:
    if isinstance(body, str):
        return body
    try:
        return json.dumps(body)
    except (TypeError, ValueError):
        return str(body)
