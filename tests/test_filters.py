"""Tests for the catalog derivations: filtering, region index, lookups and years."""

import pytest

from winelist.schemas.views import FilterState
from winelist.schemas.wine import WineRecord, WineType
from winelist.services.filters import (
    build_region_index,
    count_by_type,
    derive,
    distinct_regions,
    duplicate_ids,
    extract_year,
    filter_wines,
    find_by_name,
    matches_search,
    resolve_wine,
)


def ids(wines: list[WineRecord]) -> list[str]:
    return [wine.id for wine in wines]


def pairs(index) -> list[tuple[str, int]]:
    return [(entry.region, entry.count) for entry in index]


class TestExtractYear:
    """Tests for pulling a year out of a vintage string."""

    @pytest.mark.parametrize(
        "vintage, expected",
        [
            ("1998 Barrel Reserve", "1998"),
            ("1999 Reserve", "1999"),
            ("Riserva 2015", "2015"),
            ("2016/2017 blend", "2016"),
            ("2099", "2099"),
        ],
    )
    def test_finds_first_year(self, vintage, expected):
        assert extract_year(vintage) == expected

    @pytest.mark.parametrize("vintage", ["", None, "Barrel Reserve", "NV"])
    def test_missing_year_is_placeholder(self, vintage):
        assert extract_year(vintage) == "N/A"

    @pytest.mark.parametrize("vintage", ["1899", "2100", "12345", "1998Reserve"])
    def test_out_of_range_or_embedded_digits(self, vintage):
        """Only a standalone 19xx or 20xx counts as a year."""
        assert extract_year(vintage) == "N/A"


class TestFilterWines:
    """Tests for the filter engine."""

    def test_no_filters_returns_whole_catalog(self, catalog):
        assert filter_wines(catalog, FilterState()) == catalog

    def test_type_filter(self, catalog):
        result = filter_wines(catalog, FilterState(type_filter=WineType.RED))
        assert ids(result) == ["1", "3", "4"]

    def test_region_filter_is_exact(self, catalog):
        assert ids(filter_wines(catalog, FilterState(region_filter="TOSCANA"))) == ["1", "4"]
        assert filter_wines(catalog, FilterState(region_filter="tosc")) == []
        assert filter_wines(catalog, FilterState(region_filter="toscana")) == []

    def test_type_and_region_combined(self, catalog):
        filters = FilterState(type_filter=WineType.SPARKLING, region_filter="VENETO")
        assert ids(filter_wines(catalog, filters)) == ["5"]

    def test_search_is_case_insensitive_on_name(self, catalog):
        assert ids(filter_wines(catalog, FilterState(search_text="BAROLO"))) == ["3"]

    def test_search_matches_region(self, catalog):
        assert ids(filter_wines(catalog, FilterState(search_text="vene"))) == ["2", "5"]

    def test_search_matches_varietals(self, catalog):
        assert ids(filter_wines(catalog, FilterState(search_text="nebbiolo"))) == ["3"]

    def test_search_combined_with_type(self, catalog):
        filters = FilterState(type_filter=WineType.RED, search_text="toscana")
        assert ids(filter_wines(catalog, filters)) == ["1", "4"]

    def test_missing_varietals_never_matches(self, make_wine):
        wine = make_wine(varietals=None, name="Rosso", region="LAZIO")
        assert matches_search(wine, "sangiovese") is False
        assert matches_search(wine, "rosso") is True

    def test_end_to_end_type_filter(self):
        catalog = [
            WineRecord(id=1, name="Chianti", type=WineType.RED, region="TOSCANA", price=25),
            WineRecord(id=2, name="Pinot Grigio", type=WineType.WHITE, region="VENETO", price=18),
        ]
        result = filter_wines(catalog, FilterState(type_filter=WineType.RED))
        assert result == [catalog[0]]

    @pytest.mark.parametrize(
        "filters",
        [
            FilterState(),
            FilterState(type_filter=WineType.RED),
            FilterState(region_filter="VENETO"),
            FilterState(search_text="o"),
            FilterState(type_filter=WineType.WHITE, search_text="pinot"),
            FilterState(region_filter="NOWHERE"),
        ],
    )
    def test_result_is_ordered_subsequence_and_idempotent(self, catalog, filters):
        first = filter_wines(catalog, filters)
        assert first == filter_wines(catalog, filters)

        positions = [catalog.index(wine) for wine in first]
        assert positions == sorted(positions)

    def test_empty_catalog(self):
        assert filter_wines([], FilterState(search_text="anything")) == []


class TestRegionIndex:
    """Tests for the region index builder."""

    def test_sorted_with_counts_and_blanks_excluded(self, make_wine):
        catalog = [
            make_wine("1", region="TOSCANA"),
            make_wine("2", region="TOSCANA"),
            make_wine("3", region="PIEMONTE"),
            make_wine("4", region=""),
            make_wine("5", region=None),
        ]
        assert pairs(build_region_index(catalog)) == [("PIEMONTE", 1), ("TOSCANA", 2)]

    def test_whitespace_region_is_blank(self, make_wine):
        catalog = [make_wine("1", region="   "), make_wine("2", region="LAZIO")]
        assert distinct_regions(catalog) == ["LAZIO"]

    def test_sorting_is_case_sensitive(self, make_wine):
        catalog = [make_wine("1", region="abruzzo"), make_wine("2", region="VENETO")]
        assert distinct_regions(catalog) == ["VENETO", "abruzzo"]

    def test_search_narrows_regions_but_not_counts(self, make_wine):
        catalog = [
            make_wine("1", region="TOSCANA"),
            make_wine("2", region="TOSCANA (BOLGHERI)"),
            make_wine("3", region="TOSCANA"),
            make_wine("4", region="PIEMONTE"),
        ]
        index = build_region_index(catalog, "tosc")
        assert pairs(index) == [("TOSCANA", 2), ("TOSCANA (BOLGHERI)", 1)]

    def test_ignores_type_and_region_filters(self, catalog):
        derived = derive(catalog, FilterState(type_filter=WineType.WHITE, region_filter="VENETO"))
        assert pairs(derived.region_index) == [("PIEMONTE", 1), ("TOSCANA", 2), ("VENETO", 2)]
        assert ids(derived.filtered_wines) == ["2"]

    def test_search_with_no_region_match(self, catalog):
        assert build_region_index(catalog, "zzz") == []

    def test_empty_catalog(self):
        assert build_region_index([]) == []


class TestLookups:
    """Tests for the detail resolver and related lookups."""

    def test_resolve_present_id(self, make_wine):
        catalog = [make_wine("W100"), make_wine("W123"), make_wine("W200")]
        assert resolve_wine(catalog, "W123") is catalog[1]

    def test_resolve_absent_id(self, make_wine):
        catalog = [make_wine("W123")]
        assert resolve_wine(catalog, "W999") is None

    def test_resolve_compares_string_form(self, catalog):
        assert resolve_wine(catalog, 3).name == "Barolo"

    def test_resolve_none(self, catalog):
        assert resolve_wine(catalog, None) is None

    def test_first_duplicate_wins(self, make_wine):
        catalog = [make_wine("7", name="First"), make_wine("7", name="Second")]
        assert resolve_wine(catalog, "7").name == "First"
        assert duplicate_ids(catalog) == ["7"]

    def test_find_by_name(self, catalog):
        assert find_by_name(catalog, "Prosecco").id == "5"
        assert find_by_name(catalog, "prosecco") is None

    def test_count_by_type_includes_every_type(self, catalog):
        assert count_by_type(catalog) == {
            WineType.RED: 3,
            WineType.WHITE: 1,
            WineType.ROSE: 1,
            WineType.SPARKLING: 1,
        }
        assert count_by_type([]) == {wine_type: 0 for wine_type in WineType}
