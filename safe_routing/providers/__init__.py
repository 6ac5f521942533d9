"""
External service ports and their HTTP adapters.
"""

from .base import RoutingProvider, GeocodingProvider, SafetyZoneStore, AlertDispatcher
from .osrm import OSRMRoutingProvider
from .nominatim import NominatimGeocoder
from .alerts import LoggingAlertDispatcher, compose_sos_message, osm_location_url

__all__ = [
    'RoutingProvider',
    'GeocodingProvider',
    'SafetyZoneStore',
    'AlertDispatcher',
    'OSRMRoutingProvider',
    'NominatimGeocoder',
    'LoggingAlertDispatcher',
    'compose_sos_message',
    'osm_location_url',
]
