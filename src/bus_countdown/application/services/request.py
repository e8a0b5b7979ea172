"""Candidate-set refinement for countdown requests."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace

from bus_countdown.domain.models.errors import EmptyCandidateSet
from bus_countdown.domain.models.refinement import FIXED_POINT, REFINEMENT_MODES, SINGLE_PASS
from bus_countdown.domain.ports.static_catalog import StaticCatalog

logger = logging.getLogger(__name__)


def _narrow(current: tuple[str, ...], allowed: Iterable[str]) -> tuple[str, ...]:
    """Keep the members of `current` that are in `allowed`, preserving order."""
    allowed_set = set(allowed)
    return tuple(item for item in current if item in allowed_set)


def _unique(items: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))


@dataclass(frozen=True)
class Request:
    """Immutable snapshot of the route, direction and stop candidate sets.

    Every narrowing or selection returns a new Request. Constructing a Request
    with any empty candidate set raises EmptyCandidateSet, so a Request always
    has at least one candidate per dimension.
    """

    route_ids: tuple[str, ...]
    directions: tuple[str, ...]
    stop_ids: tuple[str, ...]
    catalog: StaticCatalog = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        # Accept any iterable but store ordered, duplicate-free tuples
        object.__setattr__(self, "route_ids", _unique(self.route_ids))
        object.__setattr__(self, "directions", _unique(self.directions))
        object.__setattr__(self, "stop_ids", _unique(self.stop_ids))

        if not self.route_ids:
            raise EmptyCandidateSet("routes")
        if not self.directions:
            raise EmptyCandidateSet("directions")
        if not self.stop_ids:
            raise EmptyCandidateSet("stops")

    @classmethod
    def seed(
        cls,
        catalog: StaticCatalog,
        query_text: str,
        route: str | None = None,
        direction: str | None = None,
        threshold: float = 0.7,
    ) -> "Request":
        """Build the initial request for a free-text stop query.

        Args:
            catalog: Catalog the candidates are drawn from.
            query_text: Free text fuzzy-matched against stop descriptions.
            route: Optional route identifier restricting the route set.
            direction: Optional direction restricting the direction set.
            threshold: Minimum similarity (inclusive) for a stop to match.

        Raises:
            EmptyCandidateSet: If no stop matches, or route/direction are unknown.
        """
        route_ids = catalog.all_route_ids()
        if route is not None:
            route_ids = _narrow((route,), route_ids)

        directions = catalog.direction_vocabulary()
        if direction is not None:
            directions = _narrow((direction,), directions)

        stop_ids = catalog.fuzzy_match_stops(query_text, threshold=threshold)
        logger.debug(f"Stop query {query_text!r} matched {len(stop_ids)} stop(s)")
        return cls(route_ids, directions, stop_ids, catalog)

    # Explicit user selections

    def select_route(self, route_id: str) -> "Request":
        """Replace the route set with the single given route."""
        return replace(self, route_ids=_narrow((route_id,), self.catalog.all_route_ids()))

    def select_direction(self, direction: str) -> "Request":
        """Replace the direction set with the single given direction."""
        return replace(
            self, directions=_narrow((direction,), self.catalog.direction_vocabulary())
        )

    def select_stop(self, stop_id: str) -> "Request":
        """Replace the stop set with the single given stop."""
        return replace(self, stop_ids=_narrow((stop_id,), self.catalog.all_stop_ids()))

    # Pairwise narrowing

    def refine_routes_with_stops(self) -> "Request":
        served_by: set[str] = set()
        for stop_id in self.stop_ids:
            served_by |= self.catalog.stop(stop_id).route_ids
        return replace(self, route_ids=_narrow(self.route_ids, served_by))

    def refine_routes_with_directions(self) -> "Request":
        wanted = set(self.directions)
        route_ids = tuple(
            route_id
            for route_id in self.route_ids
            if wanted.intersection(self.catalog.route(route_id).directions)
        )
        return replace(self, route_ids=route_ids)

    def refine_directions_with_routes(self) -> "Request":
        route_directions: set[str] = set()
        for route_id in self.route_ids:
            route_directions.update(self.catalog.route(route_id).directions)
        return replace(self, directions=_narrow(self.directions, route_directions))

    def refine_directions_with_stops(self) -> "Request":
        stop_directions: set[str] = set()
        for stop_id in self.stop_ids:
            stop_directions |= self.catalog.stop(stop_id).directions
        return replace(self, directions=_narrow(self.directions, stop_directions))

    def refine_stops_with_routes(self) -> "Request":
        route_stops: set[str] = set()
        for route_id in self.route_ids:
            route_stops |= self.catalog.route(route_id).stop_ids
        return replace(self, stop_ids=_narrow(self.stop_ids, route_stops))

    def refine_stops_with_directions(self) -> "Request":
        wanted = set(self.directions)
        stop_ids = tuple(
            stop_id
            for stop_id in self.stop_ids
            if not wanted.isdisjoint(self.catalog.stop(stop_id).directions)
        )
        return replace(self, stop_ids=stop_ids)

    def refine_single_pass(self) -> "Request":
        """Apply each narrowing step once, in a fixed order.

        Resolves most stop-plus-optional-route/direction queries, but is an
        approximation: it can stop short of the fixed point when constraints
        interact transitively. Use refine_all() for the exact result.
        """
        request = self
        for step in _NARROWING_ORDER:
            request = step(request)
        return request

    def refine_all(self) -> "Request":
        """Narrow all three candidate sets until none of them changes.

        Terminates because every step only shrinks its target set and no set
        can drop below one member without raising EmptyCandidateSet.
        """
        request = self
        passes = 0
        while True:
            passes += 1
            refined = request.refine_single_pass()
            if refined.sizes == request.sizes:
                logger.debug(
                    f"Refinement reached fixed point {refined.sizes} after {passes} pass(es)"
                )
                return refined
            request = refined

    def refine(self, mode: str = FIXED_POINT) -> "Request":
        """Refine using the named mode ("fixed_point" or "single_pass")."""
        if mode == FIXED_POINT:
            return self.refine_all()
        if mode == SINGLE_PASS:
            return self.refine_single_pass()
        raise ValueError(f"refinement mode must be one of {REFINEMENT_MODES}, got {mode!r}")

    # Read accessors

    @property
    def sizes(self) -> tuple[int, int, int]:
        """Sizes of the route, direction and stop candidate sets."""
        return (len(self.route_ids), len(self.directions), len(self.stop_ids))

    @property
    def min_results(self) -> int:
        """Lower bound on the number of interpretations still open."""
        return max(self.sizes)

    @property
    def is_resolved(self) -> bool:
        return self.min_results == 1

    @property
    def route_names(self) -> list[str]:
        """Short names of the candidate routes, aligned with route_ids."""
        return [self.catalog.route(route_id).short_name for route_id in self.route_ids]

    @property
    def stop_descriptions(self) -> list[str]:
        """Descriptions of the candidate stops, aligned with stop_ids."""
        return [self.catalog.stop(stop_id).description for stop_id in self.stop_ids]


_NARROWING_ORDER: tuple[Callable[[Request], Request], ...] = (
    Request.refine_routes_with_stops,
    Request.refine_directions_with_stops,
    Request.refine_routes_with_directions,
    Request.refine_stops_with_directions,
    Request.refine_directions_with_routes,
    Request.refine_stops_with_routes,
)
