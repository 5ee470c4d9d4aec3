"""Parsing and validation of the client metadata header."""

import logging

from nmeta.domain.errors import HeaderValidationError
from nmeta.domain.models import (
    HEADER_FORMAT,
    WEB_PLATFORM,
    ClientMetadata,
    HeaderConfiguration,
    ParseResult,
    default_configuration,
    split_version_numbers,
)

logger = logging.getLogger(__name__)

SEGMENT_DELIMITER = ";"


def _segment(segments: list[str], index: int) -> str | None:
    return segments[index] if index < len(segments) else None


def _parse_allowed(
    value: str | None, allowed: tuple[str, ...], label: str, config: HeaderConfiguration
) -> str:
    """Return value if it is in the allow-list, otherwise raise."""
    if value is None or value not in allowed:
        raise HeaderValidationError(
            f"{config.header} header: {label} is not supported, "
            f"should be: {','.join(allowed)} - format: {HEADER_FORMAT}"
        )
    return value


def _require(value: str | None, missing: str, config: HeaderConfiguration) -> str:
    if value is None:
        raise HeaderValidationError(
            f"{config.header} header: Missing {missing} - format: {HEADER_FORMAT}"
        )
    return value


def _parse_version_numbers(version: str, config: HeaderConfiguration) -> tuple[int, int, int]:
    try:
        return split_version_numbers(version)
    except ValueError:
        raise HeaderValidationError(
            f"{config.header} header: Invalid version {version} - format: {HEADER_FORMAT}"
        ) from None


def parse_header(
    header: str | None, config: HeaderConfiguration | None = None
) -> ClientMetadata:
    """Parse a raw ``platform;environment;version;os-version;device`` header.

    Checks run in header order and the first failure wins.

    Args:
        header: Raw header value, as sent by the client.
        config: Allow-lists and header name. Defaults to ``default_configuration()``.

    Returns:
        The validated metadata.

    Raises:
        HeaderValidationError: If the header is missing or a segment is invalid.
    """
    if config is None:
        config = default_configuration()

    if not header:
        raise HeaderValidationError(f"{config.header} header is missing")

    segments = header.split(SEGMENT_DELIMITER)

    platform = _parse_allowed(_segment(segments, 0), config.platforms, "Platform", config)
    environment = _parse_allowed(
        _segment(segments, 1), config.environments, "Environment", config
    )

    # Web clients send a regular User-Agent, nothing further is read
    if platform == WEB_PLATFORM:
        return ClientMetadata(platform=platform, environment=environment)

    version = _require(_segment(segments, 2), "version", config)
    major, minor, patch = _parse_version_numbers(version, config)
    device_os_version = _require(_segment(segments, 3), "device os version", config)
    device = _require(_segment(segments, 4), "device", config)

    return ClientMetadata(
        platform=platform,
        environment=environment,
        version=version,
        major_version=major,
        minor_version=minor,
        patch_version=patch,
        device_os_version=device_os_version,
        device=device,
    )


def try_parse_header(
    header: str | None, config: HeaderConfiguration | None = None
) -> ParseResult:
    """Like ``parse_header`` but returns a ``ParseResult`` instead of raising."""
    try:
        return ParseResult.success(parse_header(header, config))
    except HeaderValidationError as e:
        logger.debug(f"Rejected metadata header {header!r}: {e.message}")
        return ParseResult.failure(e.to_error_details())


class HeaderParser:
    """Parser bound to a single configuration."""

    def __init__(self, config: HeaderConfiguration | None = None) -> None:
        """Initialize with a header configuration, or the default one."""
        self._config = config if config is not None else default_configuration()

    @property
    def config(self) -> HeaderConfiguration:
        return self._config

    def parse(self, header: str | None) -> ClientMetadata:
        """Parse header, raising ``HeaderValidationError`` when invalid."""
        return parse_header(header, self._config)

    def try_parse(self, header: str | None) -> ParseResult:
        """Parse header into a ``ParseResult``."""
        return try_parse_header(header, self._config)
