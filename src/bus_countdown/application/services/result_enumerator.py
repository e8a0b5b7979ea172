"""Expansion of a refined request into concrete results."""

import logging

from bus_countdown.application.services.request import Request
from bus_countdown.domain.models.result import Result

logger = logging.getLogger(__name__)


def results(request: Request) -> list[Result]:
    """List every (route, direction, stop) triple consistent with the request.

    Routes are visited in the request's order, and within a route direction_0
    comes before direction_1. An empty list means the candidate sets share no
    concrete triple ("no matching departures"); that is a normal outcome, not
    an error.
    """
    catalog = request.catalog
    wanted_directions = set(request.directions)
    found: list[Result] = []

    for route_id in request.route_ids:
        route = catalog.route(route_id)
        for direction in route.directions:
            if direction not in wanted_directions:
                continue
            served = route.stop_ids_for(direction)
            for stop_id in request.stop_ids:
                if stop_id in served:
                    found.append(Result(route, direction, catalog.stop(stop_id)))

    logger.debug(f"Request {request.sizes} expanded to {len(found)} result(s)")
    return found
