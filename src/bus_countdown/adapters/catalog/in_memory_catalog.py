"""In-memory static catalog with fuzzy stop matching."""

import logging
from collections.abc import Iterable

import jellyfish

from bus_countdown.domain.models.direction import DIRECTIONS
from bus_countdown.domain.models.route import Route
from bus_countdown.domain.models.stop import Stop
from bus_countdown.domain.ports.static_catalog import StaticCatalog

logger = logging.getLogger(__name__)


def stop_similarity(text: str, description: str) -> float:
    """Jaro-Winkler similarity in [0, 1]; identical strings score 1.0."""
    if text == description:
        # jellyfish scores two empty strings 0.0
        return 1.0
    return jellyfish.jaro_winkler_similarity(description, text)


class InMemoryCatalog(StaticCatalog):
    """Read-only table of routes and stops, loaded once and shared by reference."""

    def __init__(
        self,
        routes: Iterable[Route],
        stops: Iterable[Stop],
        directions: tuple[str, ...] = DIRECTIONS,
    ) -> None:
        """Initialize with routes and stops, validating their cross references.

        Raises:
            ValueError: If ids are duplicated or a route and a stop disagree
                about which routes serve which stops in which directions.
        """
        self._directions = tuple(directions)
        self._routes = self._index(routes, "route")
        self._stops = self._index(stops, "stop")
        self._validate()

    @staticmethod
    def _index(records: Iterable[Route] | Iterable[Stop], kind: str) -> dict:
        index: dict = {}
        for record in records:
            if record.id in index:
                raise ValueError(f"Duplicate {kind} id: {record.id}")
            index[record.id] = record
        return index

    def _validate(self) -> None:
        """Check that routes and stops describe the same network."""
        for route in self._routes.values():
            for direction in route.directions:
                if direction not in self._directions:
                    raise ValueError(f"Route {route.id} uses unknown direction {direction!r}")
            unknown_stops = route.stop_ids.difference(self._stops)
            if unknown_stops:
                raise ValueError(f"Route {route.id} lists unknown stop(s): {sorted(unknown_stops)}")

        for stop in self._stops.values():
            serving_directions: set[str] = set()
            for route_id in stop.route_ids:
                route = self._routes.get(route_id)
                if route is None:
                    raise ValueError(f"Stop {stop.id} lists unknown route {route_id}")
                if stop.id not in route.stop_ids:
                    raise ValueError(f"Stop {stop.id} lists route {route_id}, which never serves it")
                serving_directions.update(route.directions)
            stray = stop.directions - serving_directions
            if stray:
                raise ValueError(
                    f"Stop {stop.id} lists direction(s) {sorted(stray)} not run by its routes"
                )

    def all_route_ids(self) -> tuple[str, ...]:
        return tuple(self._routes)

    def all_stop_ids(self) -> tuple[str, ...]:
        return tuple(self._stops)

    def direction_vocabulary(self) -> tuple[str, ...]:
        return self._directions

    def route(self, route_id: str) -> Route:
        return self._routes[route_id]

    def stop(self, stop_id: str) -> Stop:
        return self._stops[stop_id]

    def scored_stop_matches(self, text: str, threshold: float = 0.7) -> list[tuple[Stop, float]]:
        """Stops scoring at least `threshold` against `text`, best match first."""
        scored = [(stop, stop_similarity(text, stop.description)) for stop in self._stops.values()]
        matches = [(stop, score) for stop, score in scored if score >= threshold]
        matches.sort(key=lambda match: match[1], reverse=True)
        return matches

    def fuzzy_match_stops(self, text: str, threshold: float = 0.7) -> tuple[str, ...]:
        """Ids of stops whose description is at least `threshold` similar to `text`.

        There is no cap on the number of matches; ids are returned in catalog order.
        """
        matched = tuple(
            stop.id
            for stop in self._stops.values()
            if stop_similarity(text, stop.description) >= threshold
        )
        logger.debug(f"Fuzzy match {text!r} at {threshold}: {len(matched)} stop(s)")
        return matched
