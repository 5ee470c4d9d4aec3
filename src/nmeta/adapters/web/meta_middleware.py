"""Starlette middleware that parses the client metadata header on every request."""

import logging
from collections.abc import Awaitable, Callable, Iterable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from nmeta.adapters.web.scope import get_client_ip_from_scope
from nmeta.application.services import HeaderParser
from nmeta.domain.errors import HeaderValidationError
from nmeta.domain.models import ClientMetadata, HeaderConfiguration

logger = logging.getLogger(__name__)


def get_meta_from_request(request: Request) -> ClientMetadata | None:
    """Return the metadata stored by ``MetaHeaderMiddleware``, if any."""
    return getattr(request.state, "meta", None)


class MetaHeaderMiddleware(BaseHTTPMiddleware):
    """Middleware that rejects requests with a missing or invalid metadata header."""

    def __init__(
        self,
        app: Callable,
        config: HeaderConfiguration | None = None,
        exempt_paths: Iterable[str] = (),
    ) -> None:
        """Initialize metadata middleware.

        Args:
            app: The ASGI application to wrap.
            config: Header configuration. Defaults to ``default_configuration()``.
            exempt_paths: Request paths that skip parsing (health checks and the like).
        """
        super().__init__(app)
        self.parser = HeaderParser(config)
        self.exempt_paths = frozenset(exempt_paths)
        logger.info(f"Metadata header parsing enabled for header '{self.parser.config.header}'")

    def _create_bad_request_response(
        self, request: Request, error: HeaderValidationError
    ) -> Response:
        """Create bad request response."""
        client_ip = get_client_ip_from_scope(request.scope)
        logger.warning(f"Rejected metadata header from {client_ip}: {error.message}")
        return Response(content=error.message, status_code=error.status_code)

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Parse the header, store it on ``request.state.meta`` and continue."""
        if request.url.path in self.exempt_paths:
            response: Response = await call_next(request)
            return response

        try:
            request.state.meta = self.parser.parse(request.headers.get(self.parser.config.header))
        except HeaderValidationError as e:
            return self._create_bad_request_response(request, e)

        response = await call_next(request)
        return response
