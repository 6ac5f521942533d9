"""
Live trip monitoring against a chosen route.

The monitor is a small state machine (IDLE -> TRACKING -> IDLE) fed one
position at a time. It always reports the current deviation but only raises
alerts once the trip is under way: after a grace period, after the traveller
has moved away from the start, and not more often than the cooldown allows
for alerts of the same or lower severity.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import AsyncIterator, Callable, List, Optional

from ..algorithms.safety.safety_index import SafetyIndex
from ..config.routing_config import MonitorConfig
from ..data.distance_utils import haversine_distance
from ..data.models import (
    DeviationResult,
    Point,
    RouteCandidate,
    TripAlert,
    TripSummary,
)
from .deviation import AreaInfo, check_deviation

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MonitorState(Enum):
    IDLE = 'idle'
    TRACKING = 'tracking'


@dataclass(frozen=True)
class MonitorUpdate:
    """Deviation status for one position, with the alert it raised if any."""
    result: DeviationResult
    alert: Optional[TripAlert] = None


class DeviationMonitor:
    """
    Tracks one trip at a time and raises deviation alerts.
    """

    def __init__(self, safety_index: Optional[SafetyIndex] = None,
                 config: Optional[MonitorConfig] = None,
                 clock: Optional[Clock] = None):
        """
        Initialize the monitor.

        Args:
            safety_index: Used to name low-safety areas in messages
            config: Monitor thresholds
            clock: Time source, defaults to the UTC wall clock
        """
        self.safety_index = safety_index
        self.config = config or MonitorConfig()
        self.config.validate()
        self.clock = clock or utc_now

        self.state = MonitorState.IDLE
        self.route: Optional[RouteCandidate] = None
        self.alerts: List[TripAlert] = []
        self._start_time: Optional[datetime] = None
        self._start_position: Optional[Point] = None
        self._has_left_start = False
        self._last_alert: Optional[TripAlert] = None

    @property
    def is_tracking(self) -> bool:
        return self.state is MonitorState.TRACKING

    def start(self, route: RouteCandidate, start_position: Optional[Point] = None) -> None:
        """
        Begin monitoring a route.

        Args:
            route: The route the traveller chose
            start_position: Where the trip starts, defaults to the route start
        """
        if self.is_tracking:
            logger.warning("Restarting monitor while a trip is being tracked")

        self.route = route
        self.alerts = []
        self._start_time = self.clock()
        self._start_position = Point.from_any(start_position) if start_position is not None else route.path[0]
        self._has_left_start = False
        self._last_alert = None
        self.state = MonitorState.TRACKING
        logger.info(f"Monitoring {route.route_class.value} route {route.id} "
                    f"({route.distance_meters:.0f}m, safety {route.safety_score})")

    def _area_info(self, position: Point) -> Optional[AreaInfo]:
        if self.safety_index is None:
            return None
        nearest = self.safety_index.nearest_zone(position)
        if nearest is None:
            return None
        zone, _ = nearest
        return AreaInfo(zone.area, zone.safety_score)

    def update(self, position: Optional[Point]) -> Optional[MonitorUpdate]:
        """
        Process a new position.

        Args:
            position: Latest position fix

        Returns:
            MonitorUpdate, or None when idle or the position is missing
        """
        if not self.is_tracking or position is None or self.route is None:
            return None

        position = Point.from_any(position)
        area_info = self._area_info(position)
        result = check_deviation(position, self.route.path, area_info, self.config)
        if result is None:
            return None

        if not self._has_left_start:
            moved = haversine_distance(self._start_position, position)
            self._has_left_start = moved >= self.config.min_displacement_meters

        alert = None
        if result.is_deviated and self._should_alert(result):
            low_safety = area_info is not None and area_info.safety_score < self.config.high_risk_score
            alert = TripAlert(
                id=str(uuid.uuid4()),
                alert_type='high-risk' if low_safety else 'deviation',
                severity=result.severity,
                message=result.message,
                timestamp=self.clock(),
            )
            self.alerts.append(alert)
            self._last_alert = alert
            logger.warning(f"Deviation alert ({result.severity.value}): {result.message}")

        return MonitorUpdate(result, alert)

    def _should_alert(self, result: DeviationResult) -> bool:
        now = self.clock()
        elapsed = (now - self._start_time).total_seconds()
        if elapsed < self.config.grace_period_seconds:
            return False
        if not self._has_left_start:
            return False

        last = self._last_alert
        if last is not None:
            since_last = (now - last.timestamp).total_seconds()
            if since_last < self.config.alert_cooldown_seconds and result.severity.rank <= last.severity.rank:
                logger.debug(f"Suppressing {result.severity.value} alert during cooldown")
                return False
        return True

    def dismiss_alert(self, alert_id: str) -> bool:
        for alert in self.alerts:
            if alert.id == alert_id:
                alert.dismissed = True
                return True
        return False

    def stop(self) -> Optional[TripSummary]:
        """
        End the trip.

        Returns:
            TripSummary, or None if no trip was being tracked
        """
        if not self.is_tracking or self.route is None:
            return None

        end_time = self.clock()
        summary = TripSummary(
            total_distance_meters=self.route.distance_meters,
            time_taken_seconds=(end_time - self._start_time).total_seconds(),
            route_class=self.route.route_class,
            safety_score=self.route.safety_score,
            alerts_raised=len(self.alerts),
            start_time=self._start_time,
            end_time=end_time,
            alerts=list(self.alerts),
        )
        logger.info(f"Trip on route {self.route.id} ended with {summary.alerts_raised} alerts")

        self.state = MonitorState.IDLE
        self.route = None
        return summary

    async def run(self, positions: AsyncIterator[Optional[Point]]) -> AsyncIterator[MonitorUpdate]:
        """
        Consume a position stream and yield an update per usable position.

        The stream ends the iteration; the trip stays tracked until ``stop``.
        """
        async for position in positions:
            update = self.update(position)
            if update is not None:
                yield update
