"""Shared fixtures: small catalogs with known relational structure."""

import pytest

from bus_countdown.adapters.catalog import InMemoryCatalog
from tests.catalog_factories import make_route, make_stop


@pytest.fixture
def catalog() -> InMemoryCatalog:
    """R1 runs Inbound {A,B,C} / Outbound {C,D}; R2 runs North {A} / South {}."""
    return InMemoryCatalog(
        routes=[
            make_route("R1", "1", ("Inbound", "Outbound"), {"A", "B", "C"}, {"C", "D"}),
            make_route("R2", "60", ("North", "South"), {"A"}, set()),
        ],
        stops=[
            make_stop("A", "Kennedy Plaza", {"R1", "R2"}, {"Inbound", "North"}),
            make_stop("B", "Hope St", {"R1"}, {"Inbound"}),
            make_stop("C", "Thayer St", {"R1"}, {"Inbound", "Outbound"}),
            make_stop("D", "Broad St", {"R1"}, {"Outbound"}),
        ],
    )


@pytest.fixture
def transitive_catalog() -> InMemoryCatalog:
    """Catalog where one fixed-order pass stops short of the fixed point.

    R1 serves A northbound. R2 runs North/South but only serves X southbound,
    so with directions {North} stop X drops out late in a pass and R2 only
    drops out on the following pass.
    """
    return InMemoryCatalog(
        routes=[
            make_route("R1", "1", ("North", "South"), {"A"}, set()),
            make_route("R2", "2", ("North", "South"), set(), {"X"}),
        ],
        stops=[
            make_stop("A", "Kennedy Plaza", {"R1"}, {"North"}),
            make_stop("X", "Kennedy Plaza East", {"R2"}, {"South"}),
        ],
    )


@pytest.fixture
def crossed_catalog() -> InMemoryCatalog:
    """R1 serves A only southbound and R2 serves A only northbound.

    The request (R1, North, A) is pairwise consistent and a fixed point of
    refinement, yet has no concrete result.
    """
    return InMemoryCatalog(
        routes=[
            make_route("R1", "1", ("North", "South"), set(), {"A"}),
            make_route("R2", "2", ("North", "South"), {"A"}, set()),
        ],
        stops=[make_stop("A", "Kennedy Plaza", {"R1", "R2"}, {"North", "South"})],
    )
