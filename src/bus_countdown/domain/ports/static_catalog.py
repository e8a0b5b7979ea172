"""Static catalog port."""

from typing import Protocol

from bus_countdown.domain.models.route import Route
from bus_countdown.domain.models.stop import Stop


class StaticCatalog(Protocol):
    """Port for the read-only table of routes, stops and directions."""

    def all_route_ids(self) -> tuple[str, ...]:
        """All route identifiers, in catalog order."""
        ...

    def all_stop_ids(self) -> tuple[str, ...]:
        """All stop identifiers, in catalog order."""
        ...

    def direction_vocabulary(self) -> tuple[str, ...]:
        """The fixed, ordered list of direction labels."""
        ...

    def route(self, route_id: str) -> Route:
        """Look up a route by identifier."""
        ...

    def stop(self, stop_id: str) -> Stop:
        """Look up a stop by identifier."""
        ...

    def fuzzy_match_stops(self, text: str, threshold: float = 0.7) -> tuple[str, ...]:
        """Stops whose description is at least `threshold` similar to `text`."""
        ...
