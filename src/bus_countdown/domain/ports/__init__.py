"""Ports (interfaces) for the ports-and-adapters architecture."""

from bus_countdown.domain.ports.static_catalog import StaticCatalog

__all__ = ["StaticCatalog"]
