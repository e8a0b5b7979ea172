"""Adapters layer - catalog loading and configuration."""

from bus_countdown.adapters.catalog import InMemoryCatalog, JsonCatalogLoader
from bus_countdown.adapters.config import AppConfig

__all__ = [
    "AppConfig",
    "InMemoryCatalog",
    "JsonCatalogLoader",
]
