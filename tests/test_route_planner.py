"""
End-to-end route planning tests with a straight-line routing provider.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from safe_routing.algorithms import RoutePlanner, are_paths_different
from safe_routing.data import (
    GeocodeResult,
    InMemoryZoneStore,
    RiskLevel,
    RouteCandidate,
    RouteClass,
    ZoneSnapshotHolder,
)
from safe_routing.exceptions import InvalidInput, NoRouteFound

from conftest import DESTINATION, SOURCE, StraightLineProvider, straight_line


@pytest.fixture
def planner(provider, zone_holder, area_table):
    return RoutePlanner(provider, zone_holder, area_table=area_table)


class TestPlan:

    @pytest.mark.asyncio
    async def test_three_ordered_routes(self, planner):
        result = await planner.plan(SOURCE, DESTINATION)

        assert [r.candidate.route_class for r in result.routes] == [
            RouteClass.SAFEST, RouteClass.OPTIMIZED, RouteClass.FASTEST,
        ]
        fastest = result.by_class(RouteClass.FASTEST).candidate
        safest = result.by_class(RouteClass.SAFEST).candidate
        optimized = result.by_class(RouteClass.OPTIMIZED).candidate

        assert fastest.safety_score == 30
        assert safest.safety_score > fastest.safety_score
        assert safest.distance_meters >= fastest.distance_meters + 500
        assert safest.distance_meters <= fastest.distance_meters + 7000
        assert fastest.distance_meters <= optimized.distance_meters <= safest.distance_meters
        assert fastest.safety_score <= optimized.safety_score <= safest.safety_score

        assert are_paths_different(safest.path, fastest.path)
        assert are_paths_different(optimized.path, fastest.path)
        assert are_paths_different(optimized.path, safest.path)

    @pytest.mark.asyncio
    async def test_routes_connect_endpoints(self, planner):
        result = await planner.plan(SOURCE, DESTINATION)
        for route in result.routes:
            assert route.candidate.path[0] == SOURCE
            assert route.candidate.path[-1] == DESTINATION
            assert route.candidate.duration_seconds > 0

    @pytest.mark.asyncio
    async def test_fastest_is_annotated(self, planner):
        fastest = (await planner.plan(SOURCE, DESTINATION)).by_class(RouteClass.FASTEST)

        assert fastest.analysis.dangerous_areas == ("X",)
        assert fastest.warnings == ["Route passes through risky areas: X"]
        assert [hit.area for hit in fastest.crime_zones] == ["X"]
        assert not fastest.candidate.adjusted

    @pytest.mark.asyncio
    async def test_accepts_pairs_and_dicts(self, planner):
        result = await planner.plan((17.70, 83.30), {"lat": 17.72, "lng": 83.33})
        assert result.source == SOURCE
        assert result.destination == DESTINATION

    @pytest.mark.asyncio
    async def test_summary(self, planner):
        summary = (await planner.plan(SOURCE, DESTINATION)).get_summary()
        assert [r['type'] for r in summary['routes']] == ['safest', 'optimized', 'fastest']
        assert summary['zone_count'] == 1
        assert summary['candidates_considered'] >= 3


class TestPlanErrors:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("source", [None, (float('nan'), 83.3), (95.0, 83.3), "somewhere"])
    async def test_invalid_source(self, planner, source):
        with pytest.raises(InvalidInput):
            await planner.plan(source, DESTINATION)

    @pytest.mark.asyncio
    async def test_same_endpoints(self, planner):
        with pytest.raises(InvalidInput):
            await planner.plan(SOURCE, SOURCE)

    @pytest.mark.asyncio
    async def test_invalid_input_is_checked_before_routing(self, provider, planner):
        with pytest.raises(InvalidInput):
            await planner.plan(None, DESTINATION)
        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_no_route(self, zone_holder, area_table):
        planner = RoutePlanner(StraightLineProvider(empty=True), zone_holder, area_table=area_table)
        with pytest.raises(NoRouteFound):
            await planner.plan(SOURCE, DESTINATION)


class TestDegradedProviders:

    @pytest.mark.asyncio
    async def test_direct_route_failure_uses_waypoint_candidates(self, zone_holder, area_table):
        planner = RoutePlanner(StraightLineProvider(fail_direct=True), zone_holder, area_table=area_table)
        result = await planner.plan(SOURCE, DESTINATION)
        assert result.by_class(RouteClass.FASTEST) is not None

    @pytest.mark.asyncio
    async def test_slow_provider_calls_are_dropped(self, zone_holder, area_table):
        from safe_routing.config import RoutingConfig

        class SlowDetours(StraightLineProvider):
            async def route(self, waypoints, alternatives=False):
                if len(waypoints) > 2:
                    await asyncio.sleep(5)
                return await super().route(waypoints, alternatives)

        config = RoutingConfig(provider_timeout_seconds=0.05)
        planner = RoutePlanner(SlowDetours(), zone_holder, config, area_table=area_table)
        result = await asyncio.wait_for(planner.plan(SOURCE, DESTINATION), timeout=2)

        assert result.by_class(RouteClass.FASTEST) is not None
        assert result.candidates_considered == 1

    @pytest.mark.asyncio
    async def test_empty_snapshot_is_neutral(self, provider, area_table):
        planner = RoutePlanner(provider, ZoneSnapshotHolder(InMemoryZoneStore()), area_table=area_table)
        result = await planner.plan(SOURCE, DESTINATION)
        fastest = result.by_class(RouteClass.FASTEST)
        assert fastest.candidate.safety_score == 70
        assert fastest.warnings == ['No safety data available']


class TestPlanFromQueries:

    @pytest.mark.asyncio
    async def test_geocodes_both_ends(self, provider, zone_holder, area_table):
        geocoder = AsyncMock()
        geocoder.search.side_effect = [
            [GeocodeResult("Source, Visakhapatnam", SOURCE.lat, SOURCE.lng)],
            [GeocodeResult("Destination, Visakhapatnam", DESTINATION.lat, DESTINATION.lng)],
        ]
        planner = RoutePlanner(provider, zone_holder, area_table=area_table, geocoder=geocoder)

        result = await planner.plan_from_queries("source", "destination")
        assert result.source == SOURCE
        assert geocoder.search.await_count == 2

    @pytest.mark.asyncio
    async def test_unknown_place(self, provider, zone_holder):
        geocoder = AsyncMock()
        geocoder.search.return_value = []
        planner = RoutePlanner(provider, zone_holder, geocoder=geocoder)
        with pytest.raises(InvalidInput):
            await planner.plan_from_queries("nowhere", "somewhere")

    @pytest.mark.asyncio
    async def test_requires_geocoder(self, provider, zone_holder):
        with pytest.raises(InvalidInput):
            await RoutePlanner(provider, zone_holder).plan_from_queries("a", "b")


class HangingDetours(StraightLineProvider):
    """Answers the direct route at once and never answers waypoint routes."""

    def __init__(self):
        super().__init__()
        self.started = 0
        self.cancelled = 0

    async def route(self, waypoints, alternatives=False):
        if len(waypoints) == 2:
            return await super().route(waypoints, alternatives)
        self.started += 1
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled += 1
            raise


class TestCancellation:

    @pytest.mark.asyncio
    async def test_cancel_during_waypoint_calls(self, zone_holder, area_table):
        provider = HangingDetours()
        planner = RoutePlanner(provider, zone_holder, area_table=area_table)

        task = asyncio.ensure_future(planner.plan(SOURCE, DESTINATION))
        for _ in range(100):
            if provider.started:
                break
            await asyncio.sleep(0.01)
        assert provider.started > 0

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        for _ in range(5):
            await asyncio.sleep(0)

        assert provider.cancelled == provider.started
        pending = [t for t in asyncio.all_tasks() if t is not asyncio.current_task() and not t.done()]
        assert pending == []


class TestUnexpectedProviderErrors:

    @pytest.mark.asyncio
    async def test_direct_route_error_falls_back_to_waypoints(self, zone_holder, area_table):

        class BrokenDirect(StraightLineProvider):
            async def route(self, waypoints, alternatives=False):
                if len(waypoints) == 2:
                    raise ValueError("malformed coordinate")
                return await super().route(waypoints, alternatives)

        planner = RoutePlanner(BrokenDirect(), zone_holder, area_table=area_table)
        result = await planner.plan(SOURCE, DESTINATION)
        assert result.by_class(RouteClass.FASTEST) is not None


class TestReportedScores:

    @pytest.mark.asyncio
    async def test_analysis_matches_candidate(self, planner):
        for route in (await planner.plan(SOURCE, DESTINATION)).routes:
            assert route.analysis.overall_score == route.candidate.safety_score
            assert route.analysis.risk_level is route.candidate.risk_level

    def test_adjusted_score_is_reported(self, planner, zone_holder):
        snapshot = zone_holder.current()
        index = planner.build_safety_index(snapshot)
        candidate = RouteCandidate(
            id="route-safest",
            route_class=RouteClass.SAFEST,
            path=tuple(straight_line(SOURCE, DESTINATION)),
            distance_meters=4500.0,
            duration_seconds=900.0,
            safety_score=85,
            adjusted=True,
        )

        route = planner._annotate(candidate, snapshot, index, fallback_used=False)

        assert route.analysis.overall_score == 85
        assert route.analysis.risk_level is RiskLevel.SAFE
        assert route.analysis.dangerous_areas == ("X",)
