"""
Deviation classification and trip monitor tests.
"""

from datetime import datetime, timedelta, timezone

import pytest

from safe_routing.algorithms.safety import SafetyIndex
from safe_routing.config import MonitorConfig
from safe_routing.data import DeviationSeverity, Point, RouteCandidate, RouteClass, SafetyZone
from safe_routing.data.distance_utils import distance_to_polyline, offset_point
from safe_routing.monitoring import (
    ON_ROUTE_MESSAGE,
    AreaInfo,
    DeviationMonitor,
    MonitorState,
    check_deviation,
)

from conftest import straight_line

START = Point(17.70, 83.30)
END = offset_point(START, 0, 5000)
PATH = straight_line(START, END, 50)
ALONG = offset_point(START, 0, 2000)


def off_route(meters, along=ALONG):
    return offset_point(along, 90, meters)


class FakeClock:

    def __init__(self):
        self.now = datetime(2026, 1, 1, 8, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += timedelta(seconds=seconds)


class TestCheckDeviation:

    def test_on_route(self):
        result = check_deviation(off_route(50), PATH)
        assert not result.is_deviated
        assert result.severity is DeviationSeverity.SAFE
        assert result.message == ON_ROUTE_MESSAGE
        assert result.distance_meters == 50

    def test_warning(self):
        result = check_deviation(off_route(150), PATH)
        assert result.is_deviated
        assert result.severity is DeviationSeverity.WARNING
        assert result.message == "You are 150m off the trusted route."

    def test_danger(self):
        result = check_deviation(off_route(250), PATH)
        assert result.severity is DeviationSeverity.DANGER
        assert result.message == "You are 250m off the trusted route. Driver may be taking an unverified route."

    def test_low_safety_area_messages(self):
        area = AreaInfo("Gajuwaka", 30)
        warning = check_deviation(off_route(150), PATH, area)
        danger = check_deviation(off_route(250), PATH, area)
        assert warning.message.endswith(" You are entering a low-safety area (Gajuwaka).")
        assert danger.message.endswith(" Driver is taking a low-safety road in Gajuwaka (Safety: 30%).")

    def test_safe_area_is_not_named(self):
        result = check_deviation(off_route(150), PATH, AreaInfo("Siripuram", 80))
        assert "Siripuram" not in result.message

    def test_boundaries_are_inclusive(self):
        position = off_route(120)
        distance = distance_to_polyline(position, PATH)

        on_edge = MonitorConfig(safe_distance_meters=distance, warning_distance_meters=distance + 50)
        assert check_deviation(position, PATH, config=on_edge).severity is DeviationSeverity.SAFE

        warning_edge = MonitorConfig(safe_distance_meters=distance - 50, warning_distance_meters=distance)
        assert check_deviation(position, PATH, config=warning_edge).severity is DeviationSeverity.WARNING

    def test_missing_inputs(self):
        assert check_deviation(None, PATH) is None
        assert check_deviation(off_route(10), []) is None
        assert check_deviation(off_route(10), None) is None


@pytest.fixture
def route():
    return RouteCandidate(
        id="route-safest",
        route_class=RouteClass.SAFEST,
        path=tuple(PATH),
        distance_meters=5000,
        duration_seconds=1000,
        safety_score=72,
    )


@pytest.fixture
def clock():
    return FakeClock()


class TestDeviationMonitor:

    def test_idle_monitor_ignores_positions(self, clock):
        monitor = DeviationMonitor(clock=clock)
        assert monitor.state is MonitorState.IDLE
        assert monitor.update(off_route(300)) is None
        assert monitor.stop() is None

    def test_grace_period_suppresses_alerts(self, route, clock):
        monitor = DeviationMonitor(clock=clock)
        monitor.start(route)
        clock.advance(5)
        update = monitor.update(off_route(300))
        assert update.result.severity is DeviationSeverity.DANGER
        assert update.alert is None

    def test_needs_displacement_from_start(self, route, clock):
        monitor = DeviationMonitor(clock=clock)
        monitor.start(route)
        clock.advance(60)
        update = monitor.update(off_route(300, along=START))
        assert update.result.is_deviated
        assert update.alert is None

    def test_alert_and_cooldown(self, route, clock):
        monitor = DeviationMonitor(clock=clock)
        monitor.start(route)

        clock.advance(20)
        first = monitor.update(off_route(300))
        assert first.alert is not None
        assert first.alert.alert_type == 'deviation'
        assert first.alert.severity is DeviationSeverity.DANGER

        clock.advance(10)
        assert monitor.update(off_route(300)).alert is None
        assert monitor.update(off_route(150)).alert is None

        clock.advance(30)
        assert monitor.update(off_route(300)).alert is not None
        assert len(monitor.alerts) == 2

    def test_escalation_bypasses_cooldown(self, route, clock):
        monitor = DeviationMonitor(clock=clock)
        monitor.start(route)
        clock.advance(20)
        assert monitor.update(off_route(150)).alert.severity is DeviationSeverity.WARNING
        clock.advance(5)
        assert monitor.update(off_route(300)).alert.severity is DeviationSeverity.DANGER

    def test_on_route_never_alerts(self, route, clock):
        monitor = DeviationMonitor(clock=clock)
        monitor.start(route)
        clock.advance(60)
        update = monitor.update(off_route(20))
        assert not update.result.is_deviated
        assert update.alert is None

    def test_high_risk_alert(self, route, clock):
        index = SafetyIndex([SafetyZone(area="Docks", safety_score=30, crime_count=4)],
                            {"Docks": off_route(400)})
        monitor = DeviationMonitor(safety_index=index, clock=clock)
        monitor.start(route)
        clock.advance(20)
        update = monitor.update(off_route(300))
        assert update.alert.alert_type == 'high-risk'
        assert "Docks" in update.alert.message

    def test_dismiss_alert(self, route, clock):
        monitor = DeviationMonitor(clock=clock)
        monitor.start(route)
        clock.advance(20)
        alert = monitor.update(off_route(300)).alert
        assert monitor.dismiss_alert(alert.id)
        assert alert.dismissed
        assert not monitor.dismiss_alert("missing")

    def test_trip_summary(self, route, clock):
        monitor = DeviationMonitor(clock=clock)
        monitor.start(route)
        clock.advance(20)
        monitor.update(off_route(300))
        clock.advance(100)

        summary = monitor.stop()
        assert summary.time_taken_seconds == 120
        assert summary.alerts_raised == 1
        assert summary.route_class is RouteClass.SAFEST
        assert summary.safety_score == 72
        assert summary.total_distance_meters == 5000
        assert monitor.state is MonitorState.IDLE
        assert monitor.update(off_route(300)) is None

    @pytest.mark.asyncio
    async def test_run_over_position_stream(self, route, clock):
        monitor = DeviationMonitor(clock=clock)
        monitor.start(route)

        async def positions():
            for position in (off_route(10), None, off_route(150), off_route(300)):
                clock.advance(15)
                yield position

        updates = [update async for update in monitor.run(positions())]
        assert [u.result.severity for u in updates] == [
            DeviationSeverity.SAFE, DeviationSeverity.WARNING, DeviationSeverity.DANGER,
        ]
        assert monitor.is_tracking
