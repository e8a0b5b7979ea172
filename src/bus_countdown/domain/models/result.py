"""Result domain model."""

from dataclasses import dataclass

from .route import Route
from .stop import Stop


@dataclass(frozen=True)
class Result:
    """A mutually consistent (route, direction, stop) triple."""

    route: Route
    direction: str
    stop: Stop

    def __str__(self) -> str:
        return f"{self.route.short_name} {self.direction} to {self.stop.description}"
