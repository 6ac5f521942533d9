"""
Crime zone detection along routes.
"""

from .crime_zone_aggregator import (
    CRIME_TYPE_LABELS,
    crime_type_for_area,
    find_crime_zones_along_route,
    group_by_type,
    street_locations_for_area,
)

__all__ = [
    'CRIME_TYPE_LABELS',
    'crime_type_for_area',
    'find_crime_zones_along_route',
    'group_by_type',
    'street_locations_for_area',
]
