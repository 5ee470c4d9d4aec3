"""Utilities for reading request details from a raw ASGI scope.

Useful where no Starlette ``Request`` is at hand (websockets, LiveView sockets).
"""

from __future__ import annotations

from typing import Any


def _decode_header_value(value: Any) -> str:
    """Decode a header value into a readable string."""
    if isinstance(value, bytes):
        return value.decode("latin1")
    return str(value)


def get_meta_header_from_scope(scope: dict[str, Any] | None, header_name: str) -> str | None:
    """Return the raw value of ``header_name`` from an ASGI scope-like mapping.

    Header names are matched case-insensitively. Returns ``None`` when the scope
    is malformed or the header is absent.
    """
    if not isinstance(scope, dict):
        return None

    wanted = header_name.lower()
    for item in scope.get("headers") or []:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            continue
        name, value = item
        if _decode_header_value(name).lower() == wanted:
            return _decode_header_value(value)
    return None


def get_client_ip_from_scope(scope: dict[str, Any] | None) -> str:
    """Return the client IP, preferring the first ``X-Forwarded-For`` entry.

    Falls back to the ASGI ``client`` tuple, then to ``"unknown"``.
    """
    forwarded_for = get_meta_header_from_scope(scope, "x-forwarded-for")
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first

    if isinstance(scope, dict):
        client = scope.get("client")
        if isinstance(client, (list, tuple)) and client and client[0]:
            return _decode_header_value(client[0])
    return "unknown"
