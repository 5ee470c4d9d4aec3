"""Client metadata domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from nmeta.domain.models.version import ZERO_VERSION, split_version_numbers

WEB_PLATFORM = "web"


class ClientMetadata(BaseModel):
    """Validated contents of a client metadata header.

    Web clients send a regular User-Agent, so for them the version is fixed to
    ``0.0.0`` and the device fields stay ``None``.
    """

    model_config = ConfigDict(frozen=True)

    platform: str = Field(min_length=1)
    environment: str = Field(min_length=1)
    version: str = ZERO_VERSION
    major_version: int = 0
    minor_version: int = 0
    patch_version: int = 0
    device_os_version: str | None = None
    device: str | None = None

    @model_validator(mode="after")
    def validate_platform_fields(self) -> "ClientMetadata":
        """Keep version and device fields consistent with the platform."""
        numbers = (self.major_version, self.minor_version, self.patch_version)
        if self.is_web:
            if self.version != ZERO_VERSION or numbers != (0, 0, 0):
                raise ValueError("web metadata must have version 0.0.0")
            if self.device_os_version is not None or self.device is not None:
                raise ValueError("web metadata must not carry device fields")
            return self

        if self.device_os_version is None or self.device is None:
            raise ValueError("device_os_version and device are required for non-web platforms")
        if split_version_numbers(self.version) != numbers:
            raise ValueError(
                f"version numbers {numbers} do not match version {self.version!r}"
            )
        return self

    @property
    def is_web(self) -> bool:
        return self.platform == WEB_PLATFORM

    def to_dict(self) -> dict[str, Any]:
        """Return all fields keyed by their header-facing names, ``None`` included."""
        return {
            "platform": self.platform,
            "environment": self.environment,
            "version": self.version,
            "majorVersion": self.major_version,
            "minorVersion": self.minor_version,
            "patchVersion": self.patch_version,
            "deviceOsVersion": self.device_os_version,
            "device": self.device,
        }

    def to_header_string(self) -> str:
        """Serialize back to header form, e.g. ``ios;local;1.0.0;10.1;iphone-x``.

        Web metadata serializes to ``web;<environment>;`` since nothing after the
        environment is read for web clients.
        """
        if self.is_web:
            return f"{self.platform};{self.environment};"
        return (
            f"{self.platform};{self.environment};{self.version};"
            f"{self.device_os_version};{self.device}"
        )
