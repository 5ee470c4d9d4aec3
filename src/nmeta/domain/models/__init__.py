"""Domain models for client metadata headers."""

from nmeta.domain.models.client_metadata import WEB_PLATFORM, ClientMetadata
from nmeta.domain.models.error_details import ErrorDetails
from nmeta.domain.models.header_configuration import (
    HEADER_FORMAT,
    HeaderConfiguration,
    default_configuration,
)
from nmeta.domain.models.parse_result import ParseResult
from nmeta.domain.models.version import ZERO_VERSION, split_version_numbers

__all__ = [
    "HEADER_FORMAT",
    "WEB_PLATFORM",
    "ZERO_VERSION",
    "ClientMetadata",
    "ErrorDetails",
    "HeaderConfiguration",
    "ParseResult",
    "default_configuration",
    "split_version_numbers",
]
