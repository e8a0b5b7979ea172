"""Configuration adapters."""

from bus_countdown.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
