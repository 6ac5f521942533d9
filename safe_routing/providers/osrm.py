"""
OSRM routing provider.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Sequence

import httpx

from ..data.models import Point, ProviderRoute
from ..exceptions import ProviderUnavailable
from .base import RoutingProvider

logger = logging.getLogger(__name__)

DEFAULT_OSRM_URL = 'https://router.project-osrm.org'


class OSRMRoutingProvider(RoutingProvider):
    """
    Routes through an OSRM ``/route/v1`` endpoint with GeoJSON geometries.
    """

    def __init__(self, base_url: Optional[str] = None, profile: str = 'driving',
                 timeout: float = 10.0, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the provider.

        Args:
            base_url: OSRM server, defaults to SAFE_ROUTING_OSRM_URL or the public demo server
            profile: OSRM routing profile
            timeout: Request timeout in seconds
            client: Shared HTTP client; one is created per request when omitted
        """
        self.base_url = (base_url or os.environ.get('SAFE_ROUTING_OSRM_URL') or DEFAULT_OSRM_URL).rstrip('/')
        self.profile = profile
        self.timeout = timeout
        self.client = client

    def _build_url(self, waypoints: Sequence[Point]) -> str:
        coords = ';'.join(f"{p.lng},{p.lat}" for p in waypoints)
        return f"{self.base_url}/route/v1/{self.profile}/{coords}"

    async def _get(self, url: str, params: Dict[str, str]) -> Dict[str, Any]:
        if self.client is not None:
            response = await self.client.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(url, params=params)
            response.raise_for_status()
            return response.json()

    async def route(self, waypoints: Sequence[Point], alternatives: bool = False) -> List[ProviderRoute]:
        if len(waypoints) < 2:
            return []

        params = {
            'geometries': 'geojson',
            'overview': 'full',
            'continue_straight': 'true',
        }
        if alternatives:
            params['alternatives'] = 'true'

        url = self._build_url(waypoints)
        try:
            data = await self._get(url, params)
        except httpx.HTTPStatusError as e:
            logger.error(f"OSRM HTTP error: {e.response.status_code} - {e.response.text[:200]}")
            raise ProviderUnavailable(f"OSRM returned HTTP {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"OSRM request failed: {e}")
            raise ProviderUnavailable(f"OSRM request failed: {e}") from e

        if data.get('code') != 'Ok':
            logger.warning(f"OSRM returned code {data.get('code')}: {data.get('message', '')}")
            return []

        try:
            routes = [self._parse_route(r) for r in data.get('routes', [])]
        except (AttributeError, TypeError, ValueError) as e:
            logger.error(f"Malformed OSRM route geometry: {e}")
            raise ProviderUnavailable(f"OSRM returned a malformed route: {e}") from e
        return [route for route in routes if route]

    @staticmethod
    def _parse_route(raw: Dict[str, Any]) -> Optional[ProviderRoute]:
        coordinates = (raw.get('geometry') or {}).get('coordinates') or []
        path = tuple(Point(float(lat), float(lng)) for lng, lat, *_ in coordinates)
        if not path:
            return None
        return ProviderRoute(
            distance_meters=float(raw.get('distance', 0.0)),
            duration_seconds=float(raw.get('duration', 0.0)),
            path=path,
        )
