"""Application services."""

from bus_countdown.application.services.request import (
    FIXED_POINT,
    REFINEMENT_MODES,
    SINGLE_PASS,
    Request,
)
from bus_countdown.application.services.result_enumerator import results

__all__ = [
    "FIXED_POINT",
    "REFINEMENT_MODES",
    "SINGLE_PASS",
    "Request",
    "results",
]
