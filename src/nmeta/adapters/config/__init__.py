"""Configuration adapters."""

from nmeta.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
