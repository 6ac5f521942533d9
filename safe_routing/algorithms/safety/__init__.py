"""
Area name resolution and zone-based safety scoring.
"""

from .zone_resolver import match_area_name, resolve_area_value, normalize_area_name
from .safety_index import SafetyIndex, ResolvedZone, route_warnings, UNKNOWN_AREA

__all__ = [
    'match_area_name',
    'resolve_area_value',
    'normalize_area_name',
    'SafetyIndex',
    'ResolvedZone',
    'route_warnings',
    'UNKNOWN_AREA',
]
