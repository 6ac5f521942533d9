"""
Data models, geometry helpers, static area tables and zone loading.
"""

from .models import (
    NEUTRAL_SAFETY_SCORE,
    Point,
    SafetyZone,
    CrimeRecord,
    CrimeType,
    Severity,
    RiskLevel,
    RouteClass,
    RouteCandidate,
    CrimeZoneHit,
    DeviationResult,
    DeviationSeverity,
    SafetyAnalysis,
    ProviderRoute,
    GeocodeResult,
    TripAlert,
    TripSummary,
    clamp_score,
    risk_level_for_score,
)
from .distance_utils import haversine_distance, bearing, distance_to_polyline, path_length
from .area_tables import AREA_COORDINATES, AREA_CRIME_TYPES, STREET_LOCATIONS, StreetLocation
from .zone_loader import (
    load_safety_zones,
    JsonZoneStore,
    InMemoryZoneStore,
    ZoneSnapshot,
    ZoneSnapshotHolder,
)

__all__ = [
    'NEUTRAL_SAFETY_SCORE',
    'Point',
    'SafetyZone',
    'CrimeRecord',
    'CrimeType',
    'Severity',
    'RiskLevel',
    'RouteClass',
    'RouteCandidate',
    'CrimeZoneHit',
    'DeviationResult',
    'DeviationSeverity',
    'SafetyAnalysis',
    'ProviderRoute',
    'GeocodeResult',
    'TripAlert',
    'TripSummary',
    'clamp_score',
    'risk_level_for_score',
    'haversine_distance',
    'bearing',
    'distance_to_polyline',
    'path_length',
    'AREA_COORDINATES',
    'AREA_CRIME_TYPES',
    'STREET_LOCATIONS',
    'StreetLocation',
    'load_safety_zones',
    'JsonZoneStore',
    'InMemoryZoneStore',
    'ZoneSnapshot',
    'ZoneSnapshotHolder',
]
