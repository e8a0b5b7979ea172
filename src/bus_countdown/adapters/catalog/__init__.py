"""Static catalog adapters."""

from bus_countdown.adapters.catalog.in_memory_catalog import InMemoryCatalog
from bus_countdown.adapters.catalog.json_catalog_loader import JsonCatalogLoader
from bus_countdown.adapters.catalog.records import RouteRecord, StopRecord

__all__ = [
    "InMemoryCatalog",
    "JsonCatalogLoader",
    "RouteRecord",
    "StopRecord",
]
