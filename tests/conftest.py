"""
Shared fixtures for the safe routing tests.
"""

from typing import List, Sequence

import pytest

from safe_routing.data import InMemoryZoneStore, Point, ProviderRoute, SafetyZone, ZoneSnapshotHolder
from safe_routing.data.distance_utils import path_length
from safe_routing.exceptions import ProviderUnavailable
from safe_routing.providers.base import RoutingProvider

SOURCE = Point(17.70, 83.30)
DESTINATION = Point(17.72, 83.33)
MIDPOINT = Point(17.71, 83.315)


def straight_line(a: Point, b: Point, count: int = 20) -> List[Point]:
    """Evenly spaced points from a to b, both included exactly."""
    inner = [Point(a.lat + (b.lat - a.lat) * i / (count - 1),
                   a.lng + (b.lng - a.lng) * i / (count - 1))
             for i in range(1, count - 1)]
    return [a] + inner + [b]


def polyline(waypoints: Sequence[Point], points_per_leg: int = 20) -> List[Point]:
    """Straight legs between consecutive waypoints without repeating junctions."""
    path: List[Point] = []
    for a, b in zip(waypoints, waypoints[1:]):
        leg = straight_line(a, b, points_per_leg)
        path.extend(leg if not path else leg[1:])
    return path


class StraightLineProvider(RoutingProvider):
    """Routing provider drawing straight legs through the requested waypoints."""

    def __init__(self, fail_direct: bool = False, empty: bool = False):
        self.calls = []
        self.fail_direct = fail_direct
        self.empty = empty

    async def route(self, waypoints, alternatives=False):
        self.calls.append((tuple(waypoints), alternatives))
        if self.empty:
            return []
        if self.fail_direct and len(waypoints) == 2:
            raise ProviderUnavailable("direct route disabled")
        path = tuple(polyline(list(waypoints)))
        distance = path_length(path)
        return [ProviderRoute(distance_meters=distance, duration_seconds=distance / 8.0, path=path)]


@pytest.fixture
def area_table():
    return {"X": MIDPOINT}


@pytest.fixture
def risky_zone():
    return SafetyZone(area="X", safety_score=30, crime_count=10)


@pytest.fixture
def zone_holder(risky_zone):
    return ZoneSnapshotHolder(InMemoryZoneStore([risky_zone]))


@pytest.fixture
def provider():
    return StraightLineProvider()
