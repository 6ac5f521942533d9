"""
Abstract ports for the external services the planner depends on.

Concrete adapters live beside this module (OSRM, Nominatim, logging alerts)
and in ``safe_routing.data.zone_loader`` (zone stores).
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from ..data.models import CrimeRecord, GeocodeResult, Point, ProviderRoute, SafetyZone


class RoutingProvider(ABC):
    """Road-network routing service."""

    @abstractmethod
    async def route(self, waypoints: Sequence[Point],
                    alternatives: bool = False) -> List[ProviderRoute]:
        """
        Route through the given waypoints in order.

        Args:
            waypoints: Source, optional intermediate points, destination
            alternatives: Ask the provider for native alternative routes

        Returns:
            Routes ordered as the provider ranks them (may be empty)

        Raises:
            ProviderUnavailable: If the provider fails or times out
        """


class GeocodingProvider(ABC):
    """Free-text place search and reverse lookup."""

    @abstractmethod
    async def search(self, query: str, limit: int = 5) -> List[GeocodeResult]:
        pass

    @abstractmethod
    async def reverse(self, point: Point) -> Optional[str]:
        pass


class SafetyZoneStore(ABC):
    """Source of the per-area safety table."""

    @abstractmethod
    def load_zones(self) -> List[SafetyZone]:
        pass

    def load_crime_records(self) -> List[CrimeRecord]:
        """Per-area crime type counts; stores without them return nothing."""
        return []

    def load_table(self) -> Tuple[List[SafetyZone], List[CrimeRecord]]:
        """Zones and crime type counts read together as one consistent table."""
        return self.load_zones(), self.load_crime_records()


class AlertDispatcher(ABC):
    """Outbound emergency notification channel."""

    @abstractmethod
    async def send(self, phone_numbers: Sequence[str], message: str) -> int:
        """
        Send a message to every number.

        Returns:
            Number of recipients the message was delivered to
        """
