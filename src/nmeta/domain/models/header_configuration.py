"""Header configuration domain model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

HEADER_FORMAT = "platform;environment;version;os-version;device"  # ios;local;1.0.0;10.1;iphone-x

DEFAULT_HEADER = "Meta"
DEFAULT_PLATFORMS = ("android", "ios", "web")
DEFAULT_ENVIRONMENTS = ("local", "development", "staging", "production")


class HeaderConfiguration(BaseModel):
    """Allow-lists and display name used when validating a metadata header.

    The header name is only used in error messages; extracting the raw value from
    a request is the caller's job.
    """

    model_config = ConfigDict(frozen=True)

    header: str = Field(default=DEFAULT_HEADER, min_length=1)
    platforms: tuple[str, ...] = Field(default=DEFAULT_PLATFORMS, min_length=1)
    environments: tuple[str, ...] = Field(default=DEFAULT_ENVIRONMENTS, min_length=1)

    @field_validator("platforms", "environments")
    @classmethod
    def validate_entries(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject blank allow-list entries."""
        if any(not entry for entry in v):
            raise ValueError("allow-list entries must be non-empty strings")
        return v


def default_configuration() -> HeaderConfiguration:
    """Return the default configuration (header ``Meta``, mobile platforms plus web)."""
    return HeaderConfiguration()
