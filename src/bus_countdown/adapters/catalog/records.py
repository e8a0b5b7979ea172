"""Validated record schema for the static route and stop JSON files."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from bus_countdown.domain.models.direction import DIRECTIONS
from bus_countdown.domain.models.route import Route
from bus_countdown.domain.models.stop import Stop


def _check_direction(direction: str) -> str:
    if direction not in DIRECTIONS:
        raise ValueError(f"direction must be one of {DIRECTIONS}, got {direction!r}")
    return direction


class RouteRecord(BaseModel):
    """One entry of routes.json."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    route_id: str
    route_short_name: str
    direction_0: str
    direction_1: str
    direction_0_stop_ids: list[str] = Field(default_factory=list)
    direction_1_stop_ids: list[str] = Field(default_factory=list)

    @field_validator("direction_0", "direction_1")
    @classmethod
    def validate_direction(cls, v: str) -> str:
        """Validate the direction is part of the vocabulary."""
        return _check_direction(v)

    @model_validator(mode="after")
    def validate_distinct_directions(self) -> "RouteRecord":
        """Validate the route runs in two different directions."""
        if self.direction_0 == self.direction_1:
            raise ValueError(
                f"route {self.route_id} has the same direction twice: {self.direction_0!r}"
            )
        return self

    def to_route(self) -> Route:
        return Route(
            id=self.route_id,
            short_name=self.route_short_name,
            direction_0=self.direction_0,
            direction_1=self.direction_1,
            direction_0_stop_ids=frozenset(self.direction_0_stop_ids),
            direction_1_stop_ids=frozenset(self.direction_1_stop_ids),
        )


class StopRecord(BaseModel):
    """One entry of stops.json."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    stop_id: str
    stop_desc: str
    route_ids: list[str] = Field(default_factory=list)
    directions: list[str] = Field(default_factory=list)

    @field_validator("directions")
    @classmethod
    def validate_directions(cls, v: list[str]) -> list[str]:
        """Validate every direction is part of the vocabulary."""
        return [_check_direction(direction) for direction in v]

    def to_stop(self) -> Stop:
        return Stop(
            id=self.stop_id,
            description=self.stop_desc,
            route_ids=frozenset(self.route_ids),
            directions=frozenset(self.directions),
        )
