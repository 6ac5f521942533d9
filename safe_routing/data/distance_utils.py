"""
Distance and bearing utilities for route geometry.

All functions are pure and operate on (lat, lng) points in degrees.
"""

import math
from typing import Sequence

from .models import Point

EARTH_RADIUS_M = 6371000.0


def haversine_distance(a: Point, b: Point) -> float:
    """
    Calculate the great circle distance between two points on Earth.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in meters
    """
    lat1_rad = math.radians(a.lat)
    lat2_rad = math.radians(b.lat)
    delta_lat = math.radians(b.lat - a.lat)
    delta_lng = math.radians(b.lng - a.lng)

    h = (math.sin(delta_lat / 2) ** 2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lng / 2) ** 2)
    # Rounding can push h a hair above 1 for antipodal points
    h = min(1.0, max(0.0, h))
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_M * c


def bearing(a: Point, b: Point) -> float:
    """
    Initial bearing from a to b.

    Returns:
        Bearing in degrees, normalized to [0, 360)
    """
    delta_lng = math.radians(b.lng - a.lng)
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)

    y = math.sin(delta_lng) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(delta_lng)

    return (math.degrees(math.atan2(y, x)) + 360.0) % 360.0


def bearing_delta(b1: float, b2: float) -> float:
    """Smallest angular difference between two bearings, in [0, 180]."""
    diff = abs(b1 - b2) % 360.0
    if diff > 180.0:
        diff = 360.0 - diff
    return diff


def point_to_segment_distance(p: Point, seg_start: Point, seg_end: Point) -> float:
    """
    Perpendicular distance from a point to a line segment.

    The projection is done in degree space with the parameter t clamped to
    [0, 1]; the distance to the projected point is then measured with haversine.

    Args:
        p: Query point
        seg_start: Segment start
        seg_end: Segment end

    Returns:
        Distance in meters
    """
    dx = seg_end.lng - seg_start.lng
    dy = seg_end.lat - seg_start.lat
    length_squared = dx * dx + dy * dy

    if length_squared == 0:
        return haversine_distance(p, seg_start)

    t = ((p.lng - seg_start.lng) * dx + (p.lat - seg_start.lat) * dy) / length_squared
    t = max(0.0, min(1.0, t))

    closest = Point(seg_start.lat + t * dy, seg_start.lng + t * dx)
    return haversine_distance(p, closest)


def distance_to_polyline(p: Point, path: Sequence[Point]) -> float:
    """
    Minimum distance from a point to any segment of a path.

    Returns:
        Distance in meters, or infinity for an empty path
    """
    if not path:
        return math.inf
    if len(path) == 1:
        return haversine_distance(p, path[0])

    return min(
        point_to_segment_distance(p, path[i], path[i + 1])
        for i in range(len(path) - 1)
    )


def path_length(path: Sequence[Point]) -> float:
    """Total haversine length of a path in meters."""
    return sum(haversine_distance(path[i], path[i + 1]) for i in range(len(path) - 1))


def interpolate(a: Point, b: Point, fraction: float) -> Point:
    """Linear interpolation between two points in degree space."""
    return Point(a.lat + (b.lat - a.lat) * fraction,
                 a.lng + (b.lng - a.lng) * fraction)


def midpoint(a: Point, b: Point) -> Point:
    return interpolate(a, b, 0.5)


def offset_point(origin: Point, bearing_deg: float, meters: float) -> Point:
    """
    Destination point given a start, an initial bearing and a distance.

    Args:
        origin: Start point
        bearing_deg: Bearing in degrees
        meters: Distance to travel

    Returns:
        Destination point
    """
    angular = meters / EARTH_RADIUS_M
    theta = math.radians(bearing_deg)
    lat1 = math.radians(origin.lat)
    lng1 = math.radians(origin.lng)

    lat2 = math.asin(math.sin(lat1) * math.cos(angular) +
                     math.cos(lat1) * math.sin(angular) * math.cos(theta))
    lng2 = lng1 + math.atan2(math.sin(theta) * math.sin(angular) * math.cos(lat1),
                             math.cos(angular) - math.sin(lat1) * math.sin(lat2))

    return Point(math.degrees(lat2), (math.degrees(lng2) + 540.0) % 360.0 - 180.0)


def meters_to_degrees(meters: float, at_lat: float) -> float:
    """
    Convert a metric radius to a degree radius safe for bounding queries.

    Uses the larger of the latitude and longitude conversions at the given
    latitude so that no point within the metric radius is missed.
    """
    lat_deg = meters / 111320.0
    cos_lat = max(math.cos(math.radians(at_lat)), 1e-6)
    lng_deg = meters / (111320.0 * cos_lat)
    return max(lat_deg, lng_deg)
