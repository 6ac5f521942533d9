"""
Safety index over a zone snapshot.

Resolves each safety zone to the centre of its named area once, indexes the
centres in a KD-tree and answers point and path safety queries. A point takes
the score of the nearest zone centre within the zone radius, or the neutral
score when none applies.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np
from scipy.spatial import cKDTree

from ...config.routing_config import RoutingConfig
from ...data.area_tables import AREA_COORDINATES
from ...data.distance_utils import haversine_distance, meters_to_degrees
from ...data.models import Point, SafetyAnalysis, SafetyZone, risk_level_for_score
from .zone_resolver import match_area_name

logger = logging.getLogger(__name__)

UNKNOWN_AREA = 'Unknown Area'

# Degree-space search radius is widened so the spherical approximation never drops a hit
_QUERY_MARGIN = 1.1


class ResolvedZone:
    """A zone paired with its resolved centre and position in the snapshot."""

    __slots__ = ('order', 'zone', 'center')

    def __init__(self, order: int, zone: SafetyZone, center: Point):
        self.order = order
        self.zone = zone
        self.center = center

    def __repr__(self) -> str:
        return f"ResolvedZone({self.zone.area!r}, score={self.zone.safety_score}, center={self.center})"


class SafetyIndex:
    """
    Point and path safety scoring for one immutable zone snapshot.
    """

    def __init__(self, zones: Iterable[SafetyZone],
                 area_table: Optional[Mapping[str, Point]] = None,
                 config: Optional[RoutingConfig] = None):
        """
        Initialize the safety index.

        Args:
            zones: Safety zones of the current snapshot
            area_table: Area name to centre lookup, defaults to the bundled table
            config: Routing configuration parameters
        """
        self.config = config or RoutingConfig()
        self.zones: Tuple[SafetyZone, ...] = tuple(zones)
        self.area_table = AREA_COORDINATES if area_table is None else area_table

        self.resolved: List[ResolvedZone] = []
        self.unresolved: List[SafetyZone] = []
        self._tree: Optional[cKDTree] = None

        self._build_spatial_index()

    def _build_spatial_index(self) -> None:
        for order, zone in enumerate(self.zones):
            match = match_area_name(zone.area, self.area_table)
            if match is None:
                self.unresolved.append(zone)
                continue
            self.resolved.append(ResolvedZone(order, zone, Point.from_any(match[1])))

        if self.resolved:
            centers = np.array([[rz.center.lat, rz.center.lng] for rz in self.resolved])
            self._tree = cKDTree(centers)

        if self.unresolved:
            logger.debug(f"{len(self.unresolved)} zones have no known area centre: "
                         f"{[z.area for z in self.unresolved]}")
        logger.debug(f"SafetyIndex built with {len(self.resolved)}/{len(self.zones)} resolved zones")

    @property
    def is_empty(self) -> bool:
        return not self.zones

    def zones_within(self, point: Point, radius_meters: Optional[float] = None) -> List[Tuple[ResolvedZone, float]]:
        """
        Resolved zones whose centre lies strictly within the radius of a point.

        Returns:
            (resolved zone, distance) pairs ordered by distance, then snapshot order
        """
        if self._tree is None:
            return []
        radius = self.config.zone_radius_meters if radius_meters is None else radius_meters

        degree_radius = meters_to_degrees(radius, point.lat) * _QUERY_MARGIN
        indices = self._tree.query_ball_point([point.lat, point.lng], r=degree_radius)

        hits = []
        for idx in indices:
            rz = self.resolved[idx]
            distance = haversine_distance(point, rz.center)
            if distance < radius:
                hits.append((rz, distance))

        hits.sort(key=lambda hit: (hit[1], hit[0].order))
        return hits

    def nearest_zone(self, point: Point) -> Optional[Tuple[SafetyZone, float]]:
        """Nearest zone within the zone radius and its distance in meters."""
        hits = self.zones_within(point)
        if not hits:
            return None
        rz, distance = hits[0]
        return rz.zone, distance

    def score_for_point(self, point: Point) -> int:
        """
        Safety score at a point.

        Args:
            point: Query point

        Returns:
            Score of the nearest zone within the radius, else the neutral score
        """
        nearest = self.nearest_zone(point)
        if nearest is None:
            return self.config.neutral_score
        return nearest[0].safety_score

    def score_for_path(self, path: Sequence[Point],
                       sample_every_nth: Optional[int] = None) -> SafetyAnalysis:
        """
        Analyze safety along a path.

        Args:
            path: Route geometry
            sample_every_nth: Sampling stride, defaults to len(path) // 50

        Returns:
            SafetyAnalysis with the mean sampled score and per-area classification
        """
        if not path:
            neutral = self.config.neutral_score
            return SafetyAnalysis(neutral, risk_level_for_score(neutral))

        stride = sample_every_nth or max(1, len(path) // self.config.analysis_samples)
        scores: List[int] = []
        area_scores: Dict[str, List[int]] = {}

        for point in path[::stride]:
            point = Point.from_any(point)
            hits = self.zones_within(point)
            scores.append(hits[0][0].zone.safety_score if hits else self.config.neutral_score)
            for rz, _ in sorted(hits, key=lambda hit: hit[0].order):
                area_scores.setdefault(rz.zone.area, []).append(rz.zone.safety_score)

        overall = int(round(sum(scores) / len(scores)))

        dangerous = []
        safe = []
        for area, values in area_scores.items():
            average = sum(values) / len(values)
            if average < self.config.dangerous_score:
                dangerous.append(area)
            elif average >= self.config.safe_area_score:
                safe.append(area)

        return SafetyAnalysis(
            overall_score=overall,
            risk_level=risk_level_for_score(overall),
            dangerous_areas=tuple(dangerous),
            safe_areas=tuple(safe),
        )

    def nearest_landmark(self, point: Point) -> str:
        """Name of the nearest known area regardless of distance."""
        best_name = UNKNOWN_AREA
        best_distance = float('inf')
        for name, coords in self.area_table.items():
            distance = haversine_distance(point, Point.from_any(coords))
            if distance < best_distance:
                best_name, best_distance = name, distance
        return best_name

    def safe_waypoints(self, min_score: Optional[int] = None) -> List[ResolvedZone]:
        """Resolved zones scoring at least ``min_score``, in snapshot order."""
        threshold = self.config.safe_zone_min_score if min_score is None else min_score
        return [rz for rz in self.resolved if rz.zone.safety_score >= threshold]


def route_warnings(analysis: SafetyAnalysis, has_zone_data: bool = True) -> List[str]:
    """Human-readable warnings for a route's safety analysis."""
    if not has_zone_data:
        return ['No safety data available']
    warnings = []
    if analysis.dangerous_areas:
        warnings.append(f"Route passes through risky areas: {', '.join(analysis.dangerous_areas)}")
    return warnings
