"""Application services for metadata headers."""

from nmeta.application.services.header_parser import (
    HeaderParser,
    parse_header,
    try_parse_header,
)

__all__ = ["HeaderParser", "parse_header", "try_parse_header"]
