"""Web framework integration for metadata headers."""

from nmeta.adapters.web.meta_middleware import MetaHeaderMiddleware, get_meta_from_request
from nmeta.adapters.web.scope import get_client_ip_from_scope, get_meta_header_from_scope

__all__ = [
    "MetaHeaderMiddleware",
    "get_client_ip_from_scope",
    "get_meta_from_request",
    "get_meta_header_from_scope",
]
