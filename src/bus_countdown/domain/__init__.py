"""Domain layer - core business logic and models."""

from bus_countdown.domain.models import (
    DIRECTIONS,
    EmptyCandidateSet,
    InvalidRequest,
    Result,
    Route,
    Stop,
)
from bus_countdown.domain.ports import StaticCatalog

__all__ = [
    "DIRECTIONS",
    "EmptyCandidateSet",
    "InvalidRequest",
    "Result",
    "Route",
    "StaticCatalog",
    "Stop",
]
