"""Route domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Route:
    """A bus route with exactly two traversal directions.

    Each direction has its own set of served stop identifiers. The order of
    stops within a direction is irrelevant to request resolution.
    """

    id: str
    short_name: str
    direction_0: str
    direction_1: str
    direction_0_stop_ids: frozenset[str]
    direction_1_stop_ids: frozenset[str]

    @property
    def directions(self) -> tuple[str, str]:
        """Both direction labels, direction_0 first."""
        return (self.direction_0, self.direction_1)

    @property
    def stop_ids(self) -> frozenset[str]:
        """All stops served in either direction."""
        return self.direction_0_stop_ids | self.direction_1_stop_ids

    def stop_ids_for(self, direction: str) -> frozenset[str]:
        """Stops served in the given direction (empty if the route never runs that way)."""
        if direction == self.direction_0:
            return self.direction_0_stop_ids
        if direction == self.direction_1:
            return self.direction_1_stop_ids
        return frozenset()
