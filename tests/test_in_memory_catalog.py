"""Tests for the in-memory catalog and fuzzy stop matching."""

import pytest

from bus_countdown.adapters.catalog import InMemoryCatalog
from bus_countdown.adapters.catalog.in_memory_catalog import stop_similarity
from tests.catalog_factories import make_route, make_stop


class TestFuzzyMatching:
    """Tests for matching free text against stop descriptions."""

    def test_identical_strings_score_one(self) -> None:
        """Given identical strings, when scoring, then similarity is 1.0."""
        assert stop_similarity("Kennedy Plaza", "Kennedy Plaza") == 1.0

    def test_empty_query_matches_empty_description_exactly(self) -> None:
        """Given a stop with an empty description, when matching "" at 1.0, then the stop is found."""
        catalog = InMemoryCatalog(
            routes=[make_route("R1", "1", ("North", "South"), {"A"}, set())],
            stops=[make_stop("A", "", {"R1"}, {"North"})],
        )

        assert stop_similarity("", "") == 1.0
        assert catalog.fuzzy_match_stops("", threshold=1.0) == ("A",)

    def test_threshold_one_returns_exact_matches_only(self, catalog: InMemoryCatalog) -> None:
        """Given threshold 1.0, when matching, then only the identical description matches."""
        assert catalog.fuzzy_match_stops("Kennedy Plaza", threshold=1.0) == ("A",)
        assert catalog.fuzzy_match_stops("kennedy plaza", threshold=1.0) == ()

    def test_prefix_query_matches_at_default_threshold(self, catalog: InMemoryCatalog) -> None:
        """Given a partial name, when matching at 0.7, then the stop is still found."""
        assert catalog.fuzzy_match_stops("Kennedy") == ("A",)

    def test_unrelated_query_matches_nothing(self, catalog: InMemoryCatalog) -> None:
        """Given unrelated text, when matching, then no stop is returned."""
        assert catalog.fuzzy_match_stops("zzzzzzzz") == ()

    def test_scored_matches_are_sorted_best_first(self, catalog: InMemoryCatalog) -> None:
        """Given a permissive threshold, when scoring, then the best match comes first."""
        matches = catalog.scored_stop_matches("Kennedy Plaza", threshold=0.0)

        assert matches[0][0].id == "A"
        assert matches[0][1] == 1.0
        assert len(matches) == 4
        scores = [score for _, score in matches]
        assert scores == sorted(scores, reverse=True)


class TestLookups:
    """Tests for catalog accessors."""

    def test_ids_are_in_catalog_order(self, catalog: InMemoryCatalog) -> None:
        """Given the sample catalog, when listing ids, then insertion order is kept."""
        assert catalog.all_route_ids() == ("R1", "R2")
        assert catalog.all_stop_ids() == ("A", "B", "C", "D")
        assert len(catalog.direction_vocabulary()) == 6

    def test_unknown_id_raises_key_error(self, catalog: InMemoryCatalog) -> None:
        """Given an unknown id, when looking it up, then KeyError is raised."""
        with pytest.raises(KeyError):
            catalog.route("R99")
        with pytest.raises(KeyError):
            catalog.stop("Z")


class TestValidation:
    """Tests for eager rejection of inconsistent catalogs."""

    def test_duplicate_route_id_is_rejected(self) -> None:
        """Given two routes with the same id, when building the catalog, then ValueError is raised."""
        route = make_route("R1", "1", ("Inbound", "Outbound"), set(), set())

        with pytest.raises(ValueError, match="Duplicate route id"):
            InMemoryCatalog(routes=[route, route], stops=[])

    def test_route_with_unknown_direction_is_rejected(self) -> None:
        """Given a route direction outside the vocabulary, when building, then ValueError is raised."""
        route = make_route("R1", "1", ("Inbound", "Sideways"), set(), set())

        with pytest.raises(ValueError, match="unknown direction"):
            InMemoryCatalog(routes=[route], stops=[])

    def test_route_with_unknown_stop_is_rejected(self) -> None:
        """Given a route listing a missing stop, when building, then ValueError is raised."""
        route = make_route("R1", "1", ("Inbound", "Outbound"), {"A"}, set())

        with pytest.raises(ValueError, match="unknown stop"):
            InMemoryCatalog(routes=[route], stops=[])

    def test_stop_listing_route_that_skips_it_is_rejected(self) -> None:
        """Given a stop claiming a route that never serves it, when building, then ValueError is raised."""
        route = make_route("R1", "1", ("Inbound", "Outbound"), set(), set())
        stop = make_stop("A", "Kennedy Plaza", {"R1"}, {"Inbound"})

        with pytest.raises(ValueError, match="never serves it"):
            InMemoryCatalog(routes=[route], stops=[stop])

    def test_stop_with_direction_not_run_by_its_routes_is_rejected(self) -> None:
        """Given a stop direction none of its routes run, when building, then ValueError is raised."""
        route = make_route("R1", "1", ("Inbound", "Outbound"), {"A"}, set())
        stop = make_stop("A", "Kennedy Plaza", {"R1"}, {"North"})

        with pytest.raises(ValueError, match="not run by its routes"):
            InMemoryCatalog(routes=[route], stops=[stop])
