"""
Nominatim geocoding provider.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import httpx

from ..data.models import GeocodeResult, Point
from ..exceptions import ProviderUnavailable
from .base import GeocodingProvider

logger = logging.getLogger(__name__)

DEFAULT_NOMINATIM_URL = 'https://nominatim.openstreetmap.org'
USER_AGENT = 'safe-routing/1.0'


class NominatimGeocoder(GeocodingProvider):
    """Free-text search and reverse geocoding against a Nominatim server."""

    def __init__(self, base_url: Optional[str] = None, timeout: float = 10.0,
                 client: Optional[httpx.AsyncClient] = None):
        self.base_url = (base_url or os.environ.get('SAFE_ROUTING_NOMINATIM_URL')
                         or DEFAULT_NOMINATIM_URL).rstrip('/')
        self.timeout = timeout
        self.client = client

    async def _get(self, path: str, params: Dict[str, Any]) -> Any:
        url = f"{self.base_url}/{path}"
        headers = {'User-Agent': USER_AGENT}
        try:
            if self.client is not None:
                response = await self.client.get(url, params=params, headers=headers, timeout=self.timeout)
                response.raise_for_status()
                return response.json()
            async with httpx.AsyncClient(timeout=self.timeout, headers=headers) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Nominatim HTTP error: {e.response.status_code}")
            raise ProviderUnavailable(f"Nominatim returned HTTP {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Nominatim request failed: {e}")
            raise ProviderUnavailable(f"Nominatim request failed: {e}") from e

    async def search(self, query: str, limit: int = 5) -> List[GeocodeResult]:
        query = (query or '').strip()
        if not query:
            return []

        data = await self._get('search', {
            'format': 'json',
            'q': query,
            'limit': limit,
            'addressdetails': 1,
        })

        results = []
        for item in data or []:
            try:
                results.append(GeocodeResult(
                    display_name=item.get('display_name', ''),
                    lat=float(item['lat']),
                    lng=float(item['lon']),
                ))
            except (KeyError, TypeError, ValueError):
                logger.debug(f"Skipping malformed geocoding result: {item!r}")
        return results

    async def reverse(self, point: Point) -> Optional[str]:
        data = await self._get('reverse', {
            'format': 'json',
            'lat': point.lat,
            'lon': point.lng,
        })
        if not isinstance(data, dict):
            return None
        return data.get('display_name')
