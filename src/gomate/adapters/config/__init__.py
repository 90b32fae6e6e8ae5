"""Configuration adapters."""

from gomate.adapters.config.app_config import DEFAULT_STATIONS, AppConfig

__all__ = ["DEFAULT_STATIONS", "AppConfig"]
