"""
Service layer for the safe routing API.
"""

import logging
import os
from typing import Dict, Any, List, Optional, Sequence

import geojson

from safe_routing import __version__
from safe_routing.algorithms import (
    CRIME_TYPE_LABELS,
    RoutePlanner,
    find_crime_zones_along_route,
    group_by_type,
)
from safe_routing.algorithms.optimization import PlannedRoute
from safe_routing.config import RoutingConfig
from safe_routing.data import (
    CrimeZoneHit,
    JsonZoneStore,
    Point,
    ZoneSnapshotHolder,
)
from safe_routing.exceptions import InvalidInput
from safe_routing.monitoring import AreaInfo, check_deviation
from safe_routing.providers import (
    AlertDispatcher,
    GeocodingProvider,
    LoggingAlertDispatcher,
    NominatimGeocoder,
    OSRMRoutingProvider,
    RoutingProvider,
    SafetyZoneStore,
    compose_sos_message,
)
from api.schemas.routing import (
    CrimeZoneResponse,
    CrimeZonesRequest,
    CrimeZonesResponse,
    DeviationRequest,
    DeviationResponse,
    HealthResponse,
    LocationRequest,
    PlanRequest,
    PlanResponse,
    RouteResponse,
    SOSRequest,
    SOSResponse,
)

logger = logging.getLogger(__name__)


class SafeRoutingService:
    """
    Service class that wires the planner, zone snapshot and providers for the API.

    Deployment settings come from environment variables:
    SAFE_ROUTING_OSRM_URL, SAFE_ROUTING_NOMINATIM_URL, SAFE_ROUTING_ZONES_PATH
    and SAFE_ROUTING_REQUEST_TIMEOUT.
    """

    def __init__(self, routing_provider: Optional[RoutingProvider] = None,
                 zone_store: Optional[SafetyZoneStore] = None,
                 geocoder: Optional[GeocodingProvider] = None,
                 dispatcher: Optional[AlertDispatcher] = None,
                 config: Optional[RoutingConfig] = None):
        """Initialize the routing service."""
        self.config = config or RoutingConfig.create_balanced_config()
        timeout = float(os.environ.get('SAFE_ROUTING_REQUEST_TIMEOUT', self.config.provider_timeout_seconds))
        self.config.provider_timeout_seconds = timeout
        self.config.validate()

        self.routing_provider = routing_provider or OSRMRoutingProvider(timeout=timeout)
        self.geocoder = geocoder or NominatimGeocoder(timeout=timeout)
        self.dispatcher = dispatcher or LoggingAlertDispatcher()
        self.zone_holder = ZoneSnapshotHolder(
            zone_store or JsonZoneStore(os.environ.get('SAFE_ROUTING_ZONES_PATH'))
        )
        self.planner = RoutePlanner(self.routing_provider, self.zone_holder, self.config,
                                    geocoder=self.geocoder)

    def get_health_status(self) -> HealthResponse:
        """Get the health status of the routing service."""
        snapshot = self.zone_holder.current()
        return HealthResponse(
            status="degraded" if snapshot.is_empty else "healthy",
            version=__version__,
            zones_loaded=not snapshot.is_empty,
            zone_count=len(snapshot.zones),
            loaded_at=snapshot.loaded_at.isoformat(),
        )

    def refresh_zones(self) -> HealthResponse:
        """Reload the zone store and report the new snapshot."""
        self.zone_holder.refresh()
        return self.get_health_status()

    async def _resolve_location(self, location: Optional[LocationRequest], query: Optional[str],
                                name: str) -> Point:
        if location is not None:
            return Point(location.latitude, location.longitude)

        results = await self.geocoder.search(query, limit=1)
        if not results:
            raise InvalidInput(f"Could not find {name} location: {query!r}")
        logger.info(f"Geocoded {name} {query!r} -> {results[0].display_name}")
        return results[0].point

    async def plan_routes(self, request: PlanRequest) -> PlanResponse:
        """
        Plan up to three routes between two locations.

        Args:
            request: Route planning request

        Returns:
            PlanResponse with routes ordered safest, optimized, fastest
        """
        source = await self._resolve_location(request.source, request.source_query, 'source')
        destination = await self._resolve_location(request.destination, request.destination_query,
                                                   'destination')

        result = await self.planner.plan(source, destination)
        routes = [self._route_response(route, request.include_geojson) for route in result.routes]

        return PlanResponse(
            success=True,
            message=f"Found {len(routes)} route{'s' if len(routes) != 1 else ''}",
            routes=routes,
            zone_count=result.zone_count,
            candidates_considered=result.candidates_considered,
            calculation_time_ms=round(result.calculation_time * 1000, 1) if result.calculation_time else None,
        )

    def find_crime_zones(self, request: CrimeZonesRequest) -> CrimeZonesResponse:
        """Crime zones along an arbitrary path."""
        snapshot = self.zone_holder.current()
        path = self._path(request.path)
        hits = find_crime_zones_along_route(
            path,
            snapshot.zones,
            max_distance_meters=request.max_distance_m or self.config.crime_zone_distance_meters,
            score_threshold=self.config.crime_zone_score_threshold,
            crime_records=snapshot.crime_records,
        )
        grouped = group_by_type(hits)
        return CrimeZonesResponse(
            total=len(hits),
            crime_zones=[self._crime_zone_response(hit) for hit in hits],
            by_type={crime_type.value: len(items) for crime_type, items in grouped.items()},
        )

    def check_deviation(self, request: DeviationRequest) -> DeviationResponse:
        """Classify a position against a route, naming the nearest area."""
        position = Point(request.position.latitude, request.position.longitude)
        index = self.planner.build_safety_index()

        area_info = None
        nearest = index.nearest_zone(position)
        if nearest is not None:
            zone, _ = nearest
            area_info = AreaInfo(zone.area, zone.safety_score)

        result = check_deviation(position, self._path(request.path), area_info)
        return DeviationResponse(
            is_deviated=result.is_deviated,
            distance_m=result.distance_meters,
            severity=result.severity.value,
            message=result.message,
        )

    async def send_sos(self, request: SOSRequest) -> SOSResponse:
        """Compose the SOS text for a location and dispatch it."""
        point = Point(request.location.latitude, request.location.longitude)
        landmark = self.planner.build_safety_index().nearest_landmark(point)
        message = compose_sos_message(point, landmark, request.message)

        delivered = await self.dispatcher.send(request.phone_numbers, message)
        logger.info(f"SOS near {landmark} delivered to {delivered} contacts")
        return SOSResponse(success=delivered > 0, landmark=landmark, message=message, delivered=delivered)

    @staticmethod
    def _path(points: Sequence[LocationRequest]) -> List[Point]:
        return [Point(p.latitude, p.longitude) for p in points]

    @staticmethod
    def _crime_zone_response(hit: CrimeZoneHit) -> CrimeZoneResponse:
        return CrimeZoneResponse(
            area=hit.area,
            street=hit.street,
            crime_type=hit.crime_type.value,
            crime_type_label=CRIME_TYPE_LABELS[hit.crime_type],
            crime_count=hit.crime_count,
            severity=hit.severity.value if hit.severity else None,
            safety_score=hit.safety_score,
            distance_m=round(hit.distance_meters, 1),
        )

    def _route_response(self, route: PlannedRoute, include_geojson: bool = True) -> RouteResponse:
        candidate = route.candidate
        return RouteResponse(
            id=candidate.id,
            type=candidate.route_class.value,
            distance_m=round(candidate.distance_meters, 1),
            duration_s=candidate.duration_seconds,
            safety_score=candidate.safety_score,
            risk_level=candidate.risk_level.value,
            adjusted=candidate.adjusted,
            fallback_used=route.fallback_used,
            dangerous_areas=list(route.analysis.dangerous_areas),
            safe_areas=list(route.analysis.safe_areas),
            warnings=list(route.warnings),
            crime_zones=[self._crime_zone_response(hit) for hit in route.crime_zones],
            route_geojson=self._route_to_geojson(route) if include_geojson else None,
        )

    def _route_to_geojson(self, route: PlannedRoute) -> Dict[str, Any]:
        """
        Convert a planned route to GeoJSON format.

        Args:
            route: Planned route

        Returns:
            GeoJSON FeatureCollection with the line and its end points
        """
        candidate = route.candidate
        # GeoJSON coordinates are (lon, lat)
        coordinates = [[p.lng, p.lat] for p in candidate.path]

        line_feature = geojson.Feature(
            geometry=geojson.LineString(coordinates),
            properties={
                "id": candidate.id,
                "type": candidate.route_class.value,
                "distance_m": round(candidate.distance_meters, 1),
                "duration_s": candidate.duration_seconds,
                "safety_score": candidate.safety_score,
                "risk_level": candidate.risk_level.value,
            }
        )
        start_feature = geojson.Feature(
            geometry=geojson.Point(coordinates[0]),
            properties={"type": "start", "name": "Start Point"}
        )
        end_feature = geojson.Feature(
            geometry=geojson.Point(coordinates[-1]),
            properties={"type": "end", "name": "End Point"}
        )

        return geojson.FeatureCollection([line_feature, start_feature, end_feature])


# Global service instance
routing_service = SafeRoutingService()
