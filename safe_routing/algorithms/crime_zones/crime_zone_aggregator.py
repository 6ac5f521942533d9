"""
Crime zone aggregation along routes.

Finds the risky safety zones a route passes close to and labels each with its
dominant crime category, either from per-area crime counts or from the static
area table.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ...data.area_tables import AREA_COORDINATES, AREA_CRIME_TYPES, STREET_LOCATIONS, StreetLocation
from ...data.distance_utils import haversine_distance
from ...data.models import CrimeRecord, CrimeType, CrimeZoneHit, Point, SafetyZone
from ..safety.zone_resolver import match_area_name, normalize_area_name, resolve_area_value

logger = logging.getLogger(__name__)

DEFAULT_CRIME_TYPE = CrimeType.THEFT

CRIME_TYPE_LABELS: Dict[CrimeType, str] = {
    CrimeType.KIDNAP: 'Kidnapping Zone',
    CrimeType.ROBBERY: 'Robbery Zone',
    CrimeType.MURDER: 'High Crime Zone',
    CrimeType.ASSAULT: 'Assault Zone',
    CrimeType.ACCIDENT: 'Accident Prone',
    CrimeType.THEFT: 'Theft Zone',
    CrimeType.HARASSMENT: 'Harassment Zone',
}

_CRIME_TYPE_ORDER = {crime_type: i for i, crime_type in enumerate(CrimeType)}


def crime_type_for_area(area: str, crime_records: Optional[Iterable[CrimeRecord]] = None,
                        crime_type_table: Optional[Mapping[str, CrimeType]] = None) -> CrimeType:
    """
    Dominant crime category for an area.

    Args:
        area: Area name
        crime_records: Per-area crime type counts; the highest count for the
            area wins, ties going to the earlier category
        crime_type_table: Static area to crime type table

    Returns:
        Crime type, falling back to theft when nothing matches
    """
    if crime_records:
        normalized = normalize_area_name(area)
        counts: Dict[CrimeType, int] = {}
        for record in crime_records:
            if normalize_area_name(record.area) == normalized and record.count > 0:
                counts[record.crime_type] = counts.get(record.crime_type, 0) + record.count
        if counts:
            return min(counts, key=lambda ct: (-counts[ct], _CRIME_TYPE_ORDER[ct]))

    table = AREA_CRIME_TYPES if crime_type_table is None else crime_type_table
    return resolve_area_value(area, table, DEFAULT_CRIME_TYPE)


def find_crime_zones_along_route(path: Sequence[Point], zones: Iterable[SafetyZone],
                                 max_distance_meters: float = 800.0,
                                 score_threshold: int = 70,
                                 area_table: Optional[Mapping[str, Point]] = None,
                                 crime_records: Optional[Iterable[CrimeRecord]] = None,
                                 crime_type_table: Optional[Mapping[str, CrimeType]] = None
                                 ) -> List[CrimeZoneHit]:
    """
    Find risky zones whose centre lies close to a route.

    Only zones scoring below ``score_threshold`` with at least one recorded
    crime are considered. Each zone appears once, at the closest distance of
    any sampled route point.

    Args:
        path: Route geometry
        zones: Safety zones of the current snapshot
        max_distance_meters: Zone centres at or beyond this distance are ignored
        score_threshold: Zones scoring at or above this are ignored
        area_table: Area name to centre lookup
        crime_records: Per-area crime type counts
        crime_type_table: Static area to crime type table

    Returns:
        Hits ordered by ascending safety score, then ascending distance
    """
    if not path:
        return []

    table = AREA_COORDINATES if area_table is None else area_table
    records = tuple(crime_records or ())

    candidates: List[Tuple[SafetyZone, Point]] = []
    for zone in zones:
        if zone.safety_score >= score_threshold or zone.crime_count <= 0:
            continue
        match = match_area_name(zone.area, table)
        if match is None:
            continue
        candidates.append((zone, Point.from_any(match[1])))

    if not candidates:
        return []

    stride = max(1, len(path) // 50)
    closest: Dict[str, Tuple[float, SafetyZone]] = {}

    for point in path[::stride]:
        point = Point.from_any(point)
        for zone, center in candidates:
            distance = haversine_distance(point, center)
            if distance >= max_distance_meters:
                continue
            existing = closest.get(zone.area)
            if existing is None or distance < existing[0]:
                closest[zone.area] = (distance, zone)

    hits = [
        CrimeZoneHit(
            area=zone.area,
            street=zone.street,
            crime_type=crime_type_for_area(zone.area, records, crime_type_table),
            crime_count=zone.crime_count,
            severity=zone.severity,
            safety_score=zone.safety_score,
            distance_meters=distance,
        )
        for distance, zone in closest.values()
    ]
    hits.sort(key=lambda hit: (hit.safety_score, hit.distance_meters))

    logger.debug(f"Found {len(hits)} crime zones within {max_distance_meters:.0f}m of route")
    return hits


def group_by_type(hits: Iterable[CrimeZoneHit]) -> Dict[CrimeType, List[CrimeZoneHit]]:
    """Group hits by crime type; every category is present, possibly empty."""
    grouped: Dict[CrimeType, List[CrimeZoneHit]] = {crime_type: [] for crime_type in CrimeType}
    for hit in hits:
        grouped[hit.crime_type].append(hit)
    return grouped


def street_locations_for_area(area: str, crime_type: Optional[CrimeType] = None,
                              street_table: Optional[Mapping[str, Sequence[StreetLocation]]] = None
                              ) -> List[StreetLocation]:
    """
    Street-level hotspots recorded for an area.

    Args:
        area: Area name
        crime_type: Only return streets recording this crime type
        street_table: Area to street locations table

    Returns:
        Matching street locations (may be empty)
    """
    table = STREET_LOCATIONS if street_table is None else street_table
    locations = resolve_area_value(area, table, ())
    if crime_type is None:
        return list(locations)
    return [loc for loc in locations if crime_type in loc.crime_types]
