"""Domain layer - header models and errors."""

from nmeta.domain.errors import HeaderValidationError
from nmeta.domain.models import (
    ClientMetadata,
    ErrorDetails,
    HeaderConfiguration,
    ParseResult,
    default_configuration,
)

__all__ = [
    "ClientMetadata",
    "ErrorDetails",
    "HeaderConfiguration",
    "HeaderValidationError",
    "ParseResult",
    "default_configuration",
]
