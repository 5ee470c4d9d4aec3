"""Client metadata header parsing and validation."""

from nmeta.application.services import HeaderParser, parse_header, try_parse_header
from nmeta.domain.errors import HeaderValidationError
from nmeta.domain.models import (
    ClientMetadata,
    HeaderConfiguration,
    ParseResult,
    default_configuration,
)

__all__ = [
    "ClientMetadata",
    "HeaderConfiguration",
    "HeaderParser",
    "HeaderValidationError",
    "ParseResult",
    "default_configuration",
    "parse_header",
    "try_parse_header",
]
