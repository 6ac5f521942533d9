"""
Routing algorithms and planning functionality.

This module contains:
- Zone-based safety scoring
- Path search (fastest, safest, optimized)
- Alternative route generation and validation
- Crime zone detection
- The planning pipeline tying them together
"""

from .safety import SafetyIndex, match_area_name, route_warnings
from .routing import PathSearchEngine, SearchResult, build_path_graph, safety_penalty
from .diversity import (
    DurationEstimator,
    TrafficAwareDurationEstimator,
    is_valid_route,
    are_paths_different,
    enforce_route_ordering,
)
from .crime_zones import (
    CRIME_TYPE_LABELS,
    crime_type_for_area,
    find_crime_zones_along_route,
    group_by_type,
    street_locations_for_area,
)
from .optimization import RoutePlanner, PlanResult, PlannedRoute

__all__ = [
    'SafetyIndex',
    'match_area_name',
    'route_warnings',
    'PathSearchEngine',
    'SearchResult',
    'build_path_graph',
    'safety_penalty',
    'DurationEstimator',
    'TrafficAwareDurationEstimator',
    'is_valid_route',
    'are_paths_different',
    'enforce_route_ordering',
    'CRIME_TYPE_LABELS',
    'crime_type_for_area',
    'find_crime_zones_along_route',
    'group_by_type',
    'street_locations_for_area',
    'RoutePlanner',
    'PlanResult',
    'PlannedRoute',
]
