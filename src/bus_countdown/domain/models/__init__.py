"""Domain models for bus countdown requests."""

from bus_countdown.domain.models.direction import DIRECTIONS
from bus_countdown.domain.models.errors import EmptyCandidateSet, InvalidRequest
from bus_countdown.domain.models.refinement import FIXED_POINT, REFINEMENT_MODES, SINGLE_PASS
from bus_countdown.domain.models.result import Result
from bus_countdown.domain.models.route import Route
from bus_countdown.domain.models.stop import Stop

__all__ = [
    "DIRECTIONS",
    "EmptyCandidateSet",
    "FIXED_POINT",
    "InvalidRequest",
    "REFINEMENT_MODES",
    "Result",
    "Route",
    "SINGLE_PASS",
    "Stop",
]
