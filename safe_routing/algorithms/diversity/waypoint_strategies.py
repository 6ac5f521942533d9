"""
Intermediate waypoint strategies for generating alternative routes.

Each strategy proposes points to route through between a source and a
destination. The planner routes ``[source, waypoint, destination]`` for every
proposal and keeps the results that pass validation. Strategies are tried in
order, cheapest and most natural first:

1. provider-native alternatives (requested directly by the planner)
2. known area centres roughly along the way
3. centres of zones with a high safety score
4. perpendicular offsets from the midpoint (last resort)
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import List, Mapping, Optional, Sequence, Tuple

from ...config.routing_config import RoutingConfig
from ...data.area_tables import AREA_COORDINATES
from ...data.distance_utils import bearing, bearing_delta, haversine_distance
from ...data.models import Point
from ..safety.safety_index import SafetyIndex

logger = logging.getLogger(__name__)

# Kilometre to degree factors used for perpendicular offsets
LAT_KM_TO_DEG = 1 / 110.574
LNG_KM_PER_DEG_EQUATOR = 111.320


class WaypointStrategy(ABC):
    """Base class for waypoint proposal strategies."""

    name = 'base'

    def __init__(self, config: Optional[RoutingConfig] = None):
        self.config = config or RoutingConfig()

    @abstractmethod
    def propose(self, source: Point, destination: Point) -> List[Point]:
        """
        Propose intermediate waypoints, best first.

        Args:
            source: Trip start
            destination: Trip end

        Returns:
            Waypoints to route through (may be empty)
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def detour_extra(source: Point, waypoint: Point, destination: Point) -> float:
    """Straight-line extra distance of going via a waypoint, in meters."""
    return (haversine_distance(source, waypoint) + haversine_distance(waypoint, destination)
            - haversine_distance(source, destination))


class KnownAreaStrategy(WaypointStrategy):
    """
    Route through known area centres lying along the direction of travel.

    An area qualifies when it lies between the configured fractions of the
    trip, adds at most the configured ratio of extra distance and deviates at
    most the configured bearing from the direct course.
    """

    name = 'known_areas'

    def __init__(self, area_table: Optional[Mapping[str, Point]] = None,
                 config: Optional[RoutingConfig] = None, limit: int = 5):
        super().__init__(config)
        self.area_table = AREA_COORDINATES if area_table is None else area_table
        self.limit = limit

    def propose(self, source: Point, destination: Point) -> List[Point]:
        direct = haversine_distance(source, destination)
        if direct == 0:
            return []
        main_bearing = bearing(source, destination)

        scored: List[Tuple[float, int, Point]] = []
        for order, coords in enumerate(self.area_table.values()):
            waypoint = Point.from_any(coords)
            fraction = haversine_distance(source, waypoint) / direct
            if not self.config.intermediate_min_fraction <= fraction <= self.config.intermediate_max_fraction:
                continue
            extra = detour_extra(source, waypoint, destination)
            if extra > direct * self.config.intermediate_max_extra_ratio:
                continue
            if bearing_delta(main_bearing, bearing(source, waypoint)) > self.config.intermediate_max_bearing_deviation:
                continue
            scored.append((extra, order, waypoint))

        scored.sort()
        return [waypoint for _, _, waypoint in scored[:self.limit]]


class SafeZoneStrategy(WaypointStrategy):
    """
    Route through the centres of zones with a high safety score.

    Zones are ranked by score, then by the extra distance they add.
    """

    name = 'safe_zones'

    def __init__(self, safety_index: SafetyIndex, config: Optional[RoutingConfig] = None,
                 limit: int = 5, min_extra_meters: float = 200.0):
        super().__init__(config or safety_index.config)
        self.safety_index = safety_index
        self.limit = limit
        self.min_extra_meters = min_extra_meters

    def propose(self, source: Point, destination: Point) -> List[Point]:
        direct = haversine_distance(source, destination)
        if direct == 0:
            return []
        main_bearing = bearing(source, destination)
        max_extra = min(self.config.max_extra_distance, direct * self.config.intermediate_max_extra_ratio)

        scored: List[Tuple[int, float, int, Point]] = []
        seen = set()
        for rz in self.safety_index.safe_waypoints(self.config.safe_zone_min_score):
            if rz.center in seen:
                continue
            seen.add(rz.center)
            extra = detour_extra(source, rz.center, destination)
            if extra < self.min_extra_meters or extra > max_extra:
                continue
            if bearing_delta(main_bearing, bearing(source, rz.center)) > self.config.intermediate_max_bearing_deviation:
                continue
            scored.append((-rz.zone.safety_score, extra, rz.order, rz.center))

        scored.sort()
        return [center for _, _, _, center in scored[:self.limit]]


def perpendicular_point(source: Point, destination: Point, offset_km: float,
                        side: str, progress: float = 0.5) -> Point:
    """
    Point offset sideways from the straight line between two points.

    Args:
        source: Line start
        destination: Line end
        offset_km: Sideways distance in kilometres
        side: 'left' or 'right' of the direction of travel
        progress: Position along the line, 0.5 is the midpoint

    Returns:
        Offset point
    """
    lat = source.lat + (destination.lat - source.lat) * progress
    lng = source.lng + (destination.lng - source.lng) * progress

    d_lat = destination.lat - source.lat
    d_lng = destination.lng - source.lng
    length = math.sqrt(d_lat * d_lat + d_lng * d_lng)
    if length == 0:
        return Point(lat, lng)

    perp_lat = d_lng / length
    perp_lng = -d_lat / length
    lng_km_to_deg = 1 / (LNG_KM_PER_DEG_EQUATOR * math.cos(math.radians(lat)))
    sign = 1 if side == 'left' else -1

    return Point(lat + perp_lat * offset_km * LAT_KM_TO_DEG * sign,
                 lng + perp_lng * offset_km * lng_km_to_deg * sign)


class PerpendicularOffsetStrategy(WaypointStrategy):
    """Offsets either side of the midpoint, smallest first."""

    name = 'perpendicular_offsets'

    def __init__(self, config: Optional[RoutingConfig] = None, progress: float = 0.5):
        super().__init__(config)
        self.progress = progress

    def propose(self, source: Point, destination: Point) -> List[Point]:
        if source == destination:
            return []
        waypoints = []
        for offset_meters in self.config.perpendicular_offsets:
            for side in ('left', 'right'):
                waypoints.append(perpendicular_point(source, destination, offset_meters / 1000.0,
                                                     side, self.progress))
        return waypoints


def create_default_strategies(safety_index: SafetyIndex,
                              area_table: Optional[Mapping[str, Point]] = None,
                              config: Optional[RoutingConfig] = None) -> Sequence[WaypointStrategy]:
    """Waypoint strategy tiers in the order the planner tries them."""
    config = config or safety_index.config
    return (
        KnownAreaStrategy(area_table, config),
        SafeZoneStrategy(safety_index, config),
        PerpendicularOffsetStrategy(config),
    )
