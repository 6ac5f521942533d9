"""
Tests for the intermediate waypoint strategies.
"""

import pytest

from safe_routing.algorithms import SafetyIndex
from safe_routing.algorithms.diversity.waypoint_strategies import (
    KnownAreaStrategy,
    PerpendicularOffsetStrategy,
    SafeZoneStrategy,
    create_default_strategies,
    perpendicular_point,
)
from safe_routing.data import Point, SafetyZone, haversine_distance

START = Point(17.70, 83.30)
END = Point(17.74, 83.30)

AREAS = {
    "mid": Point(17.72, 83.30),
    "early": Point(17.701, 83.30),
    "behind": Point(17.68, 83.30),
    "side": Point(17.72, 83.31),
    "low": Point(17.73, 83.295),
}


class TestKnownAreaStrategy:

    def test_areas_along_the_way(self):
        assert KnownAreaStrategy(AREAS).propose(START, END) == [AREAS["mid"], AREAS["low"], AREAS["side"]]

    def test_excludes_areas_outside_the_corridor(self):
        proposals = KnownAreaStrategy(AREAS).propose(START, END)
        assert AREAS["early"] not in proposals
        assert AREAS["behind"] not in proposals

    def test_limit(self):
        assert len(KnownAreaStrategy(AREAS, limit=1).propose(START, END)) == 1

    def test_same_endpoints(self):
        assert KnownAreaStrategy(AREAS).propose(START, START) == []


class TestSafeZoneStrategy:

    @pytest.fixture
    def index(self):
        zones = [
            SafetyZone(area="mid", safety_score=80),
            SafetyZone(area="side", safety_score=90),
            SafetyZone(area="low", safety_score=40),
        ]
        return SafetyIndex(zones, AREAS)

    def test_high_scoring_zones_with_a_real_detour(self, index):
        assert SafeZoneStrategy(index).propose(START, END) == [AREAS["side"]]

    def test_threshold_from_config(self, index):
        index.config.safe_zone_min_score = 95
        assert SafeZoneStrategy(index).propose(START, END) == []


class TestPerpendicularOffsets:

    def test_left_of_northbound_is_west(self):
        midpoint = Point(17.72, 83.30)
        left = perpendicular_point(START, END, 0.5, 'left')
        right = perpendicular_point(START, END, 0.5, 'right')

        assert left.lng < midpoint.lng < right.lng
        assert left.lat == pytest.approx(midpoint.lat)
        assert haversine_distance(left, midpoint) == pytest.approx(500, abs=10)

    def test_left_of_eastbound_is_north(self):
        left = perpendicular_point(START, Point(17.70, 83.34), 1.0, 'left')
        assert left.lat > START.lat

    def test_offsets_smallest_first(self):
        waypoints = PerpendicularOffsetStrategy().propose(START, END)
        assert len(waypoints) == 8
        distances = [haversine_distance(wp, Point(17.72, 83.30)) for wp in waypoints]
        rounded = [round(d) for d in distances]
        assert rounded == sorted(rounded)
        assert distances[-1] == pytest.approx(4000, rel=0.01)

    def test_same_endpoints(self):
        assert PerpendicularOffsetStrategy().propose(START, START) == []


def test_default_tier_order():
    names = [s.name for s in create_default_strategies(SafetyIndex([], AREAS), AREAS)]
    assert names == ['known_areas', 'safe_zones', 'perpendicular_offsets']
