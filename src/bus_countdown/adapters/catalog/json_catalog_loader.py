"""Static catalog loader for the routes and stops JSON files."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from bus_countdown.adapters.catalog.in_memory_catalog import InMemoryCatalog
from bus_countdown.adapters.catalog.records import RouteRecord, StopRecord
from bus_countdown.adapters.config.app_config import AppConfig

logger = logging.getLogger(__name__)

_ROUTE_RECORDS = TypeAdapter(list[RouteRecord])
_STOP_RECORDS = TypeAdapter(list[StopRecord])


class JsonCatalogLoader:
    """Loads the static catalog from routes.json and stops.json."""

    @staticmethod
    def _read_json(path: Path) -> Any:
        if not path.exists():
            raise FileNotFoundError(f"Catalog file not found: {path}")
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    @staticmethod
    def load_from_files(routes_json: str | Path, stops_json: str | Path) -> InMemoryCatalog:
        """Parse and validate both files, rejecting malformed records eagerly.

        Raises:
            FileNotFoundError: If either file is missing.
            ValueError: If a record does not match the schema, or routes and
                stops are inconsistent with each other.
        """
        routes_data = JsonCatalogLoader._read_json(Path(routes_json))
        stops_data = JsonCatalogLoader._read_json(Path(stops_json))

        route_records = _ROUTE_RECORDS.validate_python(routes_data)
        stop_records = _STOP_RECORDS.validate_python(stops_data)

        catalog = InMemoryCatalog(
            routes=[record.to_route() for record in route_records],
            stops=[record.to_stop() for record in stop_records],
        )
        logger.info(
            f"Loaded catalog with {len(route_records)} route(s) and {len(stop_records)} stop(s)"
        )
        return catalog

    @staticmethod
    def load(config: AppConfig) -> InMemoryCatalog:
        """Load the catalog from the files named in the app config."""
        return JsonCatalogLoader.load_from_files(config.routes_json, config.stops_json)
