"""
Alternative route generation, validation and ordering.
"""

from .duration import DurationEstimator, TrafficAwareDurationEstimator
from .route_validator import (
    endpoints_match,
    is_valid_route,
    ensure_valid_route,
    are_paths_different,
    count_turns_and_backtracks,
    count_regressions,
)
from .waypoint_strategies import (
    WaypointStrategy,
    KnownAreaStrategy,
    SafeZoneStrategy,
    PerpendicularOffsetStrategy,
    create_default_strategies,
    perpendicular_point,
)
from .route_constraints import enforce_route_ordering

__all__ = [
    'DurationEstimator',
    'TrafficAwareDurationEstimator',
    'endpoints_match',
    'is_valid_route',
    'ensure_valid_route',
    'are_paths_different',
    'count_turns_and_backtracks',
    'count_regressions',
    'WaypointStrategy',
    'KnownAreaStrategy',
    'SafeZoneStrategy',
    'PerpendicularOffsetStrategy',
    'create_default_strategies',
    'perpendicular_point',
    'enforce_route_ordering',
]
