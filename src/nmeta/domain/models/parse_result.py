"""Parse result domain model."""

from dataclasses import dataclass

from nmeta.domain.models.client_metadata import ClientMetadata
from nmeta.domain.models.error_details import ErrorDetails


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a header: either metadata or error details, never both."""

    metadata: ClientMetadata | None = None
    error: ErrorDetails | None = None

    def __post_init__(self) -> None:
        if (self.metadata is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of metadata or error")

    @property
    def ok(self) -> bool:
        return self.metadata is not None

    @classmethod
    def success(cls, metadata: ClientMetadata) -> "ParseResult":
        return cls(metadata=metadata)

    @classmethod
    def failure(cls, error: ErrorDetails) -> "ParseResult":
        return cls(error=error)
