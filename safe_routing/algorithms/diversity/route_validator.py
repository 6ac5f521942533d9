"""
Route quality checks and geometric diversity.

A candidate route is rejected when it does not connect the requested
endpoints, turns back on itself, or repeatedly moves away from the
destination.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ...config.routing_config import RoutingConfig
from ...data.distance_utils import bearing, bearing_delta, distance_to_polyline, haversine_distance
from ...data.models import Point
from ...exceptions import DegenerateCandidate

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = RoutingConfig()


def endpoints_match(path: Sequence[Point], source: Point, destination: Point,
                    tolerance_meters: float = 200.0) -> bool:
    if not path:
        return False
    return (haversine_distance(path[0], source) <= tolerance_meters and
            haversine_distance(path[-1], destination) <= tolerance_meters)


def count_turns_and_backtracks(path: Sequence[Point], source: Point, destination: Point,
                               config: Optional[RoutingConfig] = None) -> Tuple[int, int]:
    """
    Count sharp turns and backtracking segments along a sampled path.

    A sharp turn is a bearing change above ``sharp_turn_degrees`` between
    consecutive sampled segments, starting from the direct bearing. A
    backtrack is a segment that moves more than ``backtrack_meters`` further
    from the destination while heading at least 90 degrees off the direct
    bearing. Paths shorter than 10 points are not checked.

    Returns:
        (sharp turns, backtracks)
    """
    config = config or _DEFAULT_CONFIG
    if len(path) < 10:
        return 0, 0

    main_bearing = bearing(source, destination)
    stride = max(1, len(path) // 20)
    previous_bearing = main_bearing
    sharp_turns = 0
    backtracks = 0

    for i in range(stride, len(path) - stride, stride):
        current = path[i]
        following = path[min(i + stride, len(path) - 1)]
        segment_bearing = bearing(current, following)

        if bearing_delta(previous_bearing, segment_bearing) > config.sharp_turn_degrees:
            sharp_turns += 1

        moving_forward = bearing_delta(main_bearing, segment_bearing) < 90.0
        if (haversine_distance(following, destination) >
                haversine_distance(current, destination) + config.backtrack_meters
                and not moving_forward):
            backtracks += 1

        previous_bearing = segment_bearing

    return sharp_turns, backtracks


def count_regressions(path: Sequence[Point], destination: Point,
                      config: Optional[RoutingConfig] = None) -> int:
    """Number of sampled steps that move more than ``regression_meters`` away from the destination."""
    config = config or _DEFAULT_CONFIG
    if len(path) < 5:
        return 0

    stride = max(1, len(path) // 15)
    last_distance = haversine_distance(path[0], destination)
    regressions = 0
    for i in range(stride, len(path), stride):
        distance = haversine_distance(path[i], destination)
        if distance > last_distance + config.regression_meters:
            regressions += 1
        last_distance = distance
    return regressions


def is_valid_route(path: Sequence[Point], source: Point, destination: Point,
                   config: Optional[RoutingConfig] = None) -> bool:
    """
    Check that a candidate route is usable.

    Args:
        path: Candidate geometry
        source: Requested start
        destination: Requested end
        config: Routing configuration parameters

    Returns:
        True if the route connects the endpoints without loops, U-turns or
        repeated regressions
    """
    config = config or _DEFAULT_CONFIG
    if not endpoints_match(path, source, destination, config.endpoint_tolerance_meters):
        logger.debug("Route rejected: endpoints do not match the request")
        return False

    sharp_turns, backtracks = count_turns_and_backtracks(path, source, destination, config)
    if sharp_turns > config.max_sharp_turns or backtracks > config.max_backtracks:
        logger.debug(f"Route rejected: {sharp_turns} sharp turns, {backtracks} backtrack segments")
        return False

    regressions = count_regressions(path, destination, config)
    if regressions > config.max_regressions:
        logger.debug(f"Route rejected: {regressions} progress regressions")
        return False

    return True


def ensure_valid_route(path: Sequence[Point], source: Point, destination: Point,
                       config: Optional[RoutingConfig] = None) -> Tuple[Point, ...]:
    """
    Return the path as a tuple, raising if it cannot be used as a candidate.

    Raises:
        DegenerateCandidate: If the path is empty or misses the endpoints
    """
    config = config or _DEFAULT_CONFIG
    if not path:
        raise DegenerateCandidate("Candidate path is empty")
    if not endpoints_match(path, source, destination, config.endpoint_tolerance_meters):
        raise DegenerateCandidate(
            f"Candidate path {path[0]} -> {path[-1]} does not connect {source} -> {destination}"
        )
    return tuple(Point.from_any(p) for p in path)


def interior_samples(path: Sequence[Point], count: int) -> List[Point]:
    """Up to ``count`` evenly spaced points strictly inside the path."""
    if len(path) <= 2:
        return list(path)
    last = len(path) - 1
    indices = sorted({max(1, min(last - 1, round(k * last / (count + 1))))
                      for k in range(1, count + 1)})
    return [path[i] for i in indices]


def are_paths_different(path_a: Sequence[Point], path_b: Sequence[Point],
                        config: Optional[RoutingConfig] = None) -> bool:
    """
    Decide whether two paths are geometrically distinct.

    Samples interior points of ``path_a`` and counts those farther than
    ``diversity_radius_meters`` from ``path_b``. The paths differ when at
    least ``diversity_min_unique`` samples are off the other path.
    """
    config = config or _DEFAULT_CONFIG
    if not path_a or not path_b:
        return bool(path_a) != bool(path_b)

    unique = 0
    for point in interior_samples(path_a, config.diversity_samples):
        if distance_to_polyline(point, path_b) > config.diversity_radius_meters:
            unique += 1
            if unique >= config.diversity_min_unique:
                return True
    return False
