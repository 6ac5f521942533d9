"""
Route planning pipeline.

Given a source and destination, the planner:

1. validates the coordinates and takes the current zone snapshot
2. asks the routing provider for the direct route and its native alternatives
3. tops the candidate pool up through the waypoint strategy tiers until
   enough distinct, valid candidates exist
4. runs the fastest, safest and optimized searches over the pool
5. enforces the ordering constraints between the three classes
6. annotates each route with its safety analysis and nearby crime zones
"""

import asyncio
import logging
import math
import time
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ...config.routing_config import RoutingConfig
from ...data.distance_utils import path_length
from ...data.models import (
    CrimeZoneHit,
    Point,
    ProviderRoute,
    RouteCandidate,
    RouteClass,
    SafetyAnalysis,
    risk_level_for_score,
)
from ...data.zone_loader import ZoneSnapshot, ZoneSnapshotHolder
from ...exceptions import DegenerateCandidate, InvalidInput, NoRouteFound, ProviderUnavailable
from ...providers.base import GeocodingProvider, RoutingProvider
from ..crime_zones.crime_zone_aggregator import find_crime_zones_along_route
from ..diversity.duration import DurationEstimator, TrafficAwareDurationEstimator
from ..diversity.route_constraints import enforce_route_ordering
from ..diversity.route_validator import are_paths_different, ensure_valid_route, is_valid_route
from ..diversity.waypoint_strategies import WaypointStrategy, create_default_strategies
from ..routing.path_graph import safety_penalty
from ..routing.path_search import PathSearchEngine, SearchResult
from ..safety.safety_index import SafetyIndex, route_warnings

logger = logging.getLogger(__name__)

# Presentation order of the returned routes
ROUTE_ORDER = (RouteClass.SAFEST, RouteClass.OPTIMIZED, RouteClass.FASTEST)


def validate_point(value: Any, name: str) -> Point:
    """
    Convert and check a coordinate.

    Raises:
        InvalidInput: If the value is missing, not numeric, not finite or out of range
    """
    if value is None:
        raise InvalidInput(f"{name} is required")
    try:
        point = Point.from_any(value)
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidInput(f"{name} is not a valid coordinate: {value!r}") from e

    if not point.is_finite():
        raise InvalidInput(f"{name} must be finite, got {point}")
    if not -90.0 <= point.lat <= 90.0 or not -180.0 <= point.lng <= 180.0:
        raise InvalidInput(f"{name} is out of range: {point}")
    return point


@dataclass
class PlannedRoute:
    """A recommended route with its safety annotations."""
    candidate: RouteCandidate
    analysis: SafetyAnalysis
    crime_zones: List[CrimeZoneHit] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    fallback_used: bool = False

    def get_summary(self) -> Dict[str, Any]:
        summary = self.candidate.get_summary()
        summary.update({
            'crime_zones': len(self.crime_zones),
            'dangerous_areas': list(self.analysis.dangerous_areas),
            'warnings': list(self.warnings),
        })
        return summary


@dataclass
class PlanResult:
    """Up to three recommended routes, safest first."""
    source: Point
    destination: Point
    routes: List[PlannedRoute]
    zone_count: int
    candidates_considered: int
    calculation_time: Optional[float] = None

    def by_class(self, route_class: RouteClass) -> Optional[PlannedRoute]:
        for route in self.routes:
            if route.candidate.route_class is route_class:
                return route
        return None

    def get_summary(self) -> Dict[str, Any]:
        return {
            'routes': [route.get_summary() for route in self.routes],
            'zone_count': self.zone_count,
            'candidates_considered': self.candidates_considered,
            'calculation_time_ms': round(self.calculation_time * 1000, 1) if self.calculation_time else None,
        }


@dataclass(frozen=True)
class _PoolRoute:
    path: Tuple[Point, ...]
    tier: str


class RoutePlanner:
    """
    Stateless per-request planner over a routing provider and a zone snapshot.
    """

    def __init__(self, routing_provider: RoutingProvider, zone_holder: ZoneSnapshotHolder,
                 config: Optional[RoutingConfig] = None,
                 area_table: Optional[Mapping[str, Point]] = None,
                 duration_estimator: Optional[DurationEstimator] = None,
                 geocoder: Optional[GeocodingProvider] = None):
        """
        Initialize the planner.

        Args:
            routing_provider: Road routing service
            zone_holder: Holder of the current zone snapshot
            config: Routing configuration parameters
            area_table: Area name to centre lookup, defaults to the bundled table
            duration_estimator: Travel time model
            geocoder: Used by ``plan_from_queries``
        """
        self.routing_provider = routing_provider
        self.zone_holder = zone_holder
        self.config = config or RoutingConfig()
        self.config.validate()
        self.area_table = area_table
        self.duration_estimator = duration_estimator or TrafficAwareDurationEstimator()
        self.geocoder = geocoder

    def build_safety_index(self, snapshot: Optional[ZoneSnapshot] = None) -> SafetyIndex:
        snapshot = snapshot or self.zone_holder.current()
        return SafetyIndex(snapshot.zones, self.area_table, self.config)

    def create_strategies(self, safety_index: SafetyIndex) -> Sequence[WaypointStrategy]:
        return create_default_strategies(safety_index, self.area_table, self.config)

    async def plan_from_queries(self, source_query: str, destination_query: str) -> PlanResult:
        """
        Geocode free-text locations and plan between them.

        Raises:
            InvalidInput: If no geocoder is configured or a place is not found
        """
        if self.geocoder is None:
            raise InvalidInput("Free-text locations need a geocoding provider")

        points = []
        for name, query in (('source', source_query), ('destination', destination_query)):
            results = await self.geocoder.search(query, limit=1)
            if not results:
                raise InvalidInput(f"Could not find {name} location: {query!r}")
            logger.info(f"Geocoded {name} {query!r} -> {results[0].display_name}")
            points.append(results[0].point)

        return await self.plan(points[0], points[1])

    async def plan(self, source: Any, destination: Any) -> PlanResult:
        """
        Plan up to three distinct routes between two points.

        Args:
            source: Trip start as a Point, (lat, lng) pair or lat/lng dict
            destination: Trip end

        Returns:
            PlanResult with routes ordered safest, optimized, fastest

        Raises:
            InvalidInput: If a coordinate is missing or invalid
            NoRouteFound: If no strategy produced a valid route
        """
        source = validate_point(source, 'source')
        destination = validate_point(destination, 'destination')
        if source == destination:
            raise InvalidInput("source and destination must differ")

        start_time = time.time()
        snapshot = self.zone_holder.current()
        safety_index = SafetyIndex(snapshot.zones, self.area_table, self.config)

        logger.info(f"Planning routes from {source} to {destination} with {len(snapshot.zones)} zones")

        pool, base = await self._collect_candidates(source, destination, safety_index)
        if base is None:
            raise NoRouteFound(f"No valid route found from {source} to {destination}")

        engine = PathSearchEngine(safety_index, self.config)
        alternatives = [entry.path for entry in pool if entry is not base]

        fastest_result = engine.fastest(base.path)
        safest_result = engine.safest(base.path, alternatives=alternatives or None, fastest=fastest_result)
        optimized_result = engine.optimized(base.path, fastest_result, safest_result, alternatives)

        fastest = self._candidate(RouteClass.FASTEST, fastest_result.path, safety_index)
        safest, safest_fallback = self._pick_safest(safest_result, fastest, pool, safety_index)
        optimized, optimized_fallback = self._pick_optimized(optimized_result, fastest, safest,
                                                             pool, safety_index)

        fastest, safest, optimized = enforce_route_ordering(
            fastest, safest, optimized, self.duration_estimator, self.config
        )

        selected = {
            RouteClass.SAFEST: (safest, safest_fallback),
            RouteClass.OPTIMIZED: (optimized, optimized_fallback),
            RouteClass.FASTEST: (fastest, fastest_result.fallback_used),
        }
        routes = []
        for route_class in ROUTE_ORDER:
            candidate, fallback_used = selected[route_class]
            if candidate is not None:
                routes.append(self._annotate(candidate, snapshot, safety_index, fallback_used))

        result = PlanResult(
            source=source,
            destination=destination,
            routes=routes,
            zone_count=len(snapshot.zones),
            candidates_considered=len(pool),
            calculation_time=time.time() - start_time,
        )
        logger.info(f"Planned {len(routes)} routes from {len(pool)} candidates "
                    f"in {result.calculation_time * 1000:.0f}ms")
        return result

    async def _collect_candidates(self, source: Point, destination: Point,
                                  safety_index: SafetyIndex) -> Tuple[List[_PoolRoute], Optional[_PoolRoute]]:
        pool: List[_PoolRoute] = []
        base: Optional[_PoolRoute] = None

        try:
            native = await self._route_with_timeout([source, destination], alternatives=True)
        except ProviderUnavailable as e:
            logger.warning(f"Direct route unavailable, continuing with waypoint strategies: {e}")
            native = []
        except Exception as e:
            logger.error(f"Unexpected direct routing error, continuing with waypoint strategies: {e!r}")
            native = []

        for i, provider_route in enumerate(native):
            entry = self._consider(pool, provider_route, source, destination, 'provider')
            if entry is not None and i == 0:
                base = entry

        for strategy in self.create_strategies(safety_index):
            if len(pool) >= self.config.max_candidates:
                break
            waypoints = strategy.propose(source, destination)
            if not waypoints:
                continue
            logger.debug(f"Trying {len(waypoints)} waypoints from {strategy.name}")
            routes = await self._route_many([[source, wp, destination] for wp in waypoints])
            for provider_route in routes:
                self._consider(pool, provider_route, source, destination, strategy.name)

        if base is None and pool:
            base = min(pool, key=lambda entry: path_length(entry.path))
            logger.warning(f"Using shortest {base.tier} candidate as the base route")

        return pool, base

    def _consider(self, pool: List[_PoolRoute], provider_route: Optional[ProviderRoute],
                  source: Point, destination: Point, tier: str) -> Optional[_PoolRoute]:
        if provider_route is None:
            return None
        try:
            path = ensure_valid_route(provider_route.path, source, destination, self.config)
        except DegenerateCandidate as e:
            logger.info(f"Dropping {tier} candidate: {e}")
            return None

        if not is_valid_route(path, source, destination, self.config):
            logger.debug(f"Dropping {tier} candidate with poor geometry")
            return None
        if any(not are_paths_different(path, entry.path, self.config) for entry in pool):
            logger.debug(f"Dropping {tier} candidate: too similar to an existing one")
            return None

        entry = _PoolRoute(path, tier)
        pool.append(entry)
        return entry

    async def _route_with_timeout(self, waypoints: Sequence[Point],
                                  alternatives: bool = False) -> List[ProviderRoute]:
        try:
            return await asyncio.wait_for(
                self.routing_provider.route(waypoints, alternatives=alternatives),
                timeout=self.config.provider_timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise ProviderUnavailable("Routing provider timed out") from e

    async def _route_many(self, waypoint_sets: Sequence[Sequence[Point]]) -> List[Optional[ProviderRoute]]:
        """
        Route several waypoint sets concurrently.

        Fan-out is bounded by ``provider_concurrency``. Calls still running
        after ``provider_timeout_seconds`` are cancelled; failed calls yield
        None without affecting the others.
        """
        if not waypoint_sets:
            return []
        semaphore = asyncio.Semaphore(self.config.provider_concurrency)

        async def route_one(waypoints: Sequence[Point]) -> Optional[ProviderRoute]:
            async with semaphore:
                routes = await self.routing_provider.route(waypoints)
            return routes[0] if routes else None

        tasks = [asyncio.ensure_future(route_one(w)) for w in waypoint_sets]
        try:
            done, pending = await asyncio.wait(tasks, timeout=self.config.provider_timeout_seconds)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()

        if pending:
            logger.warning(f"{len(pending)} routing calls timed out and were cancelled")

        results: List[Optional[ProviderRoute]] = []
        for task in tasks:
            if task not in done:
                results.append(None)
                continue
            error = task.exception()
            if error is not None:
                if isinstance(error, ProviderUnavailable):
                    logger.warning(f"Routing call failed: {error}")
                else:
                    logger.error(f"Unexpected routing error: {error!r}")
                results.append(None)
                continue
            results.append(task.result())
        return results

    def _candidate(self, route_class: RouteClass, path: Sequence[Point],
                   safety_index: SafetyIndex, score: Optional[int] = None) -> RouteCandidate:
        distance = path_length(path)
        if score is None:
            score = safety_index.score_for_path(path).overall_score
        return RouteCandidate(
            id=f"route-{route_class.value}",
            route_class=route_class,
            path=tuple(path),
            distance_meters=distance,
            duration_seconds=self.duration_estimator.estimate(distance),
            safety_score=score,
        )

    def _pick_safest(self, result: SearchResult, fastest: RouteCandidate, pool: List[_PoolRoute],
                     safety_index: SafetyIndex) -> Tuple[Optional[RouteCandidate], bool]:
        if not result.fallback_used and are_paths_different(result.path, fastest.path, self.config):
            return self._candidate(RouteClass.SAFEST, result.path, safety_index, result.safety_score), False

        max_distance = fastest.distance_meters + self.config.max_extra_distance
        best = None
        best_key = None
        for entry in pool:
            if not are_paths_different(entry.path, fastest.path, self.config):
                continue
            distance = path_length(entry.path)
            if distance > max_distance:
                continue
            score = safety_index.score_for_path(entry.path).overall_score
            key = (-score, distance)
            if best_key is None or key < best_key:
                best, best_key = entry, key

        if best is None:
            logger.warning("No distinct safest route available")
            return None, True

        logger.info(f"Safest route taken from {best.tier} candidate")
        return self._candidate(RouteClass.SAFEST, best.path, safety_index, -best_key[0]), True

    def _pick_optimized(self, result: SearchResult, fastest: RouteCandidate,
                        safest: Optional[RouteCandidate], pool: List[_PoolRoute],
                        safety_index: SafetyIndex) -> Tuple[Optional[RouteCandidate], bool]:
        if safest is None:
            return None, True

        def distinct(path: Sequence[Point]) -> bool:
            return (are_paths_different(path, fastest.path, self.config) and
                    are_paths_different(path, safest.path, self.config))

        if not result.fallback_used and distinct(result.path):
            return self._candidate(RouteClass.OPTIMIZED, result.path, safety_index, result.safety_score), False

        best = None
        best_cost = math.inf
        for entry in pool:
            if not distinct(entry.path):
                continue
            distance = path_length(entry.path)
            score = safety_index.score_for_path(entry.path).overall_score
            cost = 0.5 * distance + 0.5 * distance * safety_penalty(score)
            if cost < best_cost:
                best, best_cost = entry, cost

        if best is None:
            logger.warning("No distinct optimized route available")
            return None, True

        logger.info(f"Optimized route taken from {best.tier} candidate")
        return self._candidate(RouteClass.OPTIMIZED, best.path, safety_index), True

    def _annotate(self, candidate: RouteCandidate, snapshot: ZoneSnapshot,
                  safety_index: SafetyIndex, fallback_used: bool) -> PlannedRoute:
        analysis = safety_index.score_for_path(candidate.path)
        if analysis.overall_score != candidate.safety_score:
            # keep the reported score in line with ordering adjustments
            analysis = replace(analysis, overall_score=candidate.safety_score,
                               risk_level=risk_level_for_score(candidate.safety_score))
        crime_zones = find_crime_zones_along_route(
            candidate.path,
            snapshot.zones,
            max_distance_meters=self.config.crime_zone_distance_meters,
            score_threshold=self.config.crime_zone_score_threshold,
            area_table=self.area_table,
            crime_records=snapshot.crime_records,
        )
        return PlannedRoute(
            candidate=candidate,
            analysis=analysis,
            crime_zones=crime_zones,
            warnings=route_warnings(analysis, not snapshot.is_empty),
            fallback_used=fallback_used,
        )
