"""
Crime zone aggregation tests.
"""

import pytest

from safe_routing.algorithms.crime_zones import (
    CRIME_TYPE_LABELS,
    crime_type_for_area,
    find_crime_zones_along_route,
    group_by_type,
    street_locations_for_area,
)
from safe_routing.data import CrimeRecord, CrimeType, Point, SafetyZone, StreetLocation
from safe_routing.data.distance_utils import distance_to_polyline, offset_point

from conftest import straight_line

START = Point(17.70, 83.30)
END = offset_point(START, 0, 6000)
ROUTE = straight_line(START, END, 60)


@pytest.fixture
def table():
    return {
        "Riverside": offset_point(START, 0, 1000),
        "Hillview": offset_point(offset_point(START, 0, 3000), 90, 500),
        "Harbour": offset_point(offset_point(START, 0, 4000), 90, 300),
        "Far Point": offset_point(START, 90, 5000),
        "Calm Park": offset_point(START, 0, 2000),
    }


@pytest.fixture
def zones():
    return [
        SafetyZone(area="Riverside", safety_score=40, crime_count=6),
        SafetyZone(area="Hillview", safety_score=25, crime_count=3),
        SafetyZone(area="Harbour", safety_score=40, crime_count=2),
        SafetyZone(area="Far Point", safety_score=10, crime_count=9),
        SafetyZone(area="Calm Park", safety_score=85, crime_count=1),
        SafetyZone(area="Quiet Lane", safety_score=30, crime_count=0),
    ]


class TestFindCrimeZones:

    def test_filters_and_orders(self, zones, table):
        hits = find_crime_zones_along_route(ROUTE, zones, area_table=table)
        assert [hit.area for hit in hits] == ["Hillview", "Riverside", "Harbour"]

    def test_within_distance_and_unique(self, zones, table):
        hits = find_crime_zones_along_route(ROUTE, zones, max_distance_meters=800, area_table=table)
        areas = [hit.area for hit in hits]
        assert len(areas) == len(set(areas))
        for hit in hits:
            assert hit.distance_meters < 800
            assert hit.distance_meters >= distance_to_polyline(table[hit.area], ROUTE) - 1

    def test_smaller_radius(self, zones, table):
        hits = find_crime_zones_along_route(ROUTE, zones, max_distance_meters=400, area_table=table)
        assert [hit.area for hit in hits] == ["Riverside", "Harbour"]

    def test_duplicate_zone_rows(self, table):
        zones = [SafetyZone(area="Riverside", safety_score=40, crime_count=6)] * 3
        hits = find_crime_zones_along_route(ROUTE, zones, area_table=table)
        assert len(hits) == 1

    def test_empty_inputs(self, zones, table):
        assert find_crime_zones_along_route([], zones, area_table=table) == []
        assert find_crime_zones_along_route(ROUTE, [], area_table=table) == []

    def test_hit_details(self, zones, table):
        records = [CrimeRecord("Riverside", CrimeType.ASSAULT, 4)]
        hits = find_crime_zones_along_route(ROUTE, zones, area_table=table, crime_records=records,
                                            crime_type_table={})
        by_area = {hit.area: hit for hit in hits}
        assert by_area["Riverside"].crime_type is CrimeType.ASSAULT
        assert by_area["Riverside"].crime_count == 6
        assert by_area["Hillview"].crime_type is CrimeType.THEFT


class TestCrimeType:

    def test_dominant_record(self):
        records = [
            CrimeRecord("Gajuwaka", CrimeType.THEFT, 2),
            CrimeRecord("Gajuwaka", CrimeType.ROBBERY, 5),
            CrimeRecord("MVP Colony", CrimeType.MURDER, 9),
        ]
        assert crime_type_for_area("gajuwaka", records) is CrimeType.ROBBERY

    def test_tie_goes_to_earlier_category(self):
        records = [
            CrimeRecord("Area", CrimeType.ROBBERY, 3),
            CrimeRecord("Area", CrimeType.KIDNAP, 3),
        ]
        assert crime_type_for_area("Area", records) is CrimeType.KIDNAP

    def test_table_fallback(self):
        assert crime_type_for_area("Area", [], {"Area": CrimeType.MURDER}) is CrimeType.MURDER

    def test_default(self):
        assert crime_type_for_area("Nowhere", [], {}) is CrimeType.THEFT


def test_group_by_type_has_every_category(zones, table):
    grouped = group_by_type(find_crime_zones_along_route(ROUTE, zones, area_table=table,
                                                         crime_type_table={}))
    assert set(grouped) == set(CrimeType)
    assert len(grouped[CrimeType.THEFT]) == 3
    assert grouped[CrimeType.MURDER] == []


def test_every_category_has_a_label():
    assert set(CRIME_TYPE_LABELS) == set(CrimeType)


class TestStreetLocations:

    @pytest.fixture
    def streets(self):
        return {
            "Gajuwaka": (
                StreetLocation("Main Road", Point(17.68, 83.20), (CrimeType.ACCIDENT,)),
                StreetLocation("Market Street", Point(17.69, 83.21), (CrimeType.THEFT, CrimeType.ROBBERY)),
            )
        }

    def test_all_streets(self, streets):
        assert len(street_locations_for_area("gajuwaka", street_table=streets)) == 2

    def test_filtered_by_type(self, streets):
        found = street_locations_for_area("Gajuwaka", CrimeType.ROBBERY, street_table=streets)
        assert [loc.street for loc in found] == ["Market Street"]

    def test_unknown_area(self, streets):
        assert street_locations_for_area("Elsewhere", street_table=streets) == []

    def test_bundled_table(self):
        assert street_locations_for_area("Gajuwaka")
