"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from nmeta.domain.models import HeaderConfiguration
from nmeta.domain.models.header_configuration import (
    DEFAULT_ENVIRONMENTS,
    DEFAULT_HEADER,
    DEFAULT_PLATFORMS,
)


def _clean_header(v: str) -> str:
    """Strip the header name and reject blank values."""
    if not v.strip():
        raise ValueError("header must not be empty")
    return v.strip()


def _split_list(v: Any) -> Any:
    """Accept comma separated strings as well as lists."""
    if isinstance(v, str):
        return [item.strip() for item in v.split(",") if item.strip()]
    if isinstance(v, (list, tuple)):
        return [str(item).strip() for item in v if str(item).strip()]
    return v


class AppConfig(BaseSettings):
    """Header configuration following 12-factor principles.

    Values come from ``NMETA_*`` environment variables (or ``.env``). When
    ``config_file`` points at a TOML file, its ``[nmeta]`` table overrides them.
    """

    model_config = SettingsConfigDict(
        env_prefix="NMETA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    header: str = Field(
        default=DEFAULT_HEADER, description="Name of the HTTP header carrying client metadata"
    )
    platforms: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_PLATFORMS),
        description="Allowed platforms, comma separated (e.g. 'android,ios,web')",
    )
    environments: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_ENVIRONMENTS),
        description="Allowed environments, comma separated",
    )

    # TOML config file path, optional
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with an [nmeta] table",
    )

    @field_validator("platforms", "environments", mode="before")
    @classmethod
    def split_lists(cls, v: Any) -> Any:
        """Parse comma separated allow-lists."""
        return _split_list(v)

    @field_validator("header")
    @classmethod
    def validate_header(cls, v: str) -> str:
        """Validate header name is not blank."""
        return _clean_header(v)

    def _load_toml_data(self) -> dict[str, Any]:
        """Load the ``[nmeta]`` table from the TOML file."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        section = toml_data.get("nmeta", {})
        if not isinstance(section, dict):
            raise ValueError("TOML config 'nmeta' must be a table")
        for key in ("platforms", "environments"):
            if key in section and not isinstance(section[key], list):
                raise ValueError(f"TOML config 'nmeta.{key}' must be a list")
        if "header" in section and not isinstance(section["header"], str):
            raise ValueError("TOML config 'nmeta.header' must be a string")
        return section

    def to_header_configuration(self) -> HeaderConfiguration:
        """Build the immutable configuration handed to the parser.

        Raises:
            FileNotFoundError: If ``config_file`` is set but missing.
            ValueError: If the TOML table or the resulting allow-lists are invalid.
        """
        section = self._load_toml_data()
        header = _clean_header(section.get("header", self.header))
        platforms = _split_list(section.get("platforms", self.platforms))
        environments = _split_list(section.get("environments", self.environments))
        return HeaderConfiguration(
            header=header,
            platforms=tuple(platforms),
            environments=tuple(environments),
        )
