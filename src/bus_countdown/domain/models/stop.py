"""Stop domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Stop:
    """Represents a bus stop."""

    id: str
    description: str
    route_ids: frozenset[str]  # Routes that serve this stop
    directions: frozenset[str]  # Directions in which any of those routes serve it
