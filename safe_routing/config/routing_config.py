"""
Configuration management for safety-aware routing parameters.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class RoutingConfig:
    """Configuration parameters for route planning and safety scoring."""

    # Safety Index
    zone_radius_meters: float = 2000.0  # max distance from a zone centre for it to apply
    neutral_score: int = 70  # score used when no zone applies
    analysis_samples: int = 50  # path points sampled for safety analysis
    dangerous_score: int = 50  # areas below this are reported as dangerous
    safe_area_score: int = 75  # areas at or above this are reported as safe

    # Path Search
    max_graph_nodes: int = 500  # node budget for the search graph
    max_extra_distance: float = 7000.0  # meters - safest may exceed fastest by at most this
    optimized_extra_distance: float = 2000.0  # meters - slack above the fastest/safest midpoint
    safe_waypoint_offsets: Tuple[float, ...] = (1000.0, 2000.0, 3000.0, 4000.0)
    unsafe_sample_score: int = 50  # samples below this get shifted waypoints

    # Waypoint strategies
    max_candidates: int = 3
    intermediate_min_fraction: float = 0.15  # along source -> destination
    intermediate_max_fraction: float = 0.85
    intermediate_max_extra_ratio: float = 0.8  # <= 80% extra distance
    intermediate_max_bearing_deviation: float = 80.0  # degrees
    safe_zone_min_score: int = 70  # configurable within 60-80
    perpendicular_offsets: Tuple[float, ...] = (500.0, 1500.0, 3000.0, 4000.0)
    provider_concurrency: int = 5
    provider_timeout_seconds: float = 10.0

    # Route validation
    endpoint_tolerance_meters: float = 200.0
    sharp_turn_degrees: float = 120.0
    max_sharp_turns: int = 1
    backtrack_meters: float = 500.0
    max_backtracks: int = 2
    regression_meters: float = 300.0
    max_regressions: int = 2
    diversity_samples: int = 15
    diversity_radius_meters: float = 300.0
    diversity_min_unique: int = 4

    # Ordering constraints
    min_safest_extra_distance: float = 500.0  # meters
    safest_score_bump: int = 10

    # Crime zones
    crime_zone_distance_meters: float = 800.0
    crime_zone_score_threshold: int = 70

    def validate(self) -> None:
        """Validate configuration parameters."""
        if self.zone_radius_meters <= 0:
            raise ValueError("zone_radius_meters must be positive")
        if not 0 <= self.neutral_score <= 100:
            raise ValueError("neutral_score must be between 0 and 100")
        if not 60 <= self.safe_zone_min_score <= 80:
            raise ValueError("safe_zone_min_score must be between 60 and 80")
        if not 0 < self.intermediate_min_fraction < self.intermediate_max_fraction < 1:
            raise ValueError("intermediate fractions must satisfy 0 < min < max < 1")
        if self.max_graph_nodes < 2:
            raise ValueError("max_graph_nodes must be at least 2")
        if self.min_safest_extra_distance > self.max_extra_distance:
            raise ValueError("min_safest_extra_distance must not exceed max_extra_distance")
        if self.provider_concurrency < 1:
            raise ValueError("provider_concurrency must be at least 1")
        if self.provider_timeout_seconds <= 0:
            raise ValueError("provider_timeout_seconds must be positive")
        if self.max_candidates < 1:
            raise ValueError("max_candidates must be at least 1")

    @classmethod
    def create_balanced_config(cls) -> 'RoutingConfig':
        """Create balanced configuration (default)."""
        return cls()

    @classmethod
    def create_conservative_config(cls) -> 'RoutingConfig':
        """Create configuration that prioritizes safety over speed."""
        return cls(
            safe_zone_min_score=80,
            unsafe_sample_score=60,
            crime_zone_score_threshold=75,
            max_extra_distance=9000.0
        )

    @classmethod
    def create_speed_focused_config(cls) -> 'RoutingConfig':
        """Create configuration that prioritizes speed over safety."""
        return cls(
            safe_zone_min_score=60,
            max_extra_distance=3000.0,
            optimized_extra_distance=1000.0,
            intermediate_max_extra_ratio=0.4
        )


@dataclass
class MonitorConfig:
    """Thresholds for live deviation monitoring."""

    safe_distance_meters: float = 100.0  # at or below: on route
    warning_distance_meters: float = 200.0  # at or below: warning, above: danger
    grace_period_seconds: float = 10.0  # no alerts right after start
    min_displacement_meters: float = 500.0  # must move this far from the start first
    alert_cooldown_seconds: float = 30.0  # suppress same-or-lower severity alerts
    high_risk_score: int = 50  # nearby zones below this are named in messages

    def validate(self) -> None:
        """Validate configuration parameters."""
        if self.safe_distance_meters <= 0:
            raise ValueError("safe_distance_meters must be positive")
        if self.warning_distance_meters < self.safe_distance_meters:
            raise ValueError("warning_distance_meters must be >= safe_distance_meters")
        if self.grace_period_seconds < 0 or self.alert_cooldown_seconds < 0:
            raise ValueError("grace and cooldown periods must be non-negative")
        if self.min_displacement_meters < 0:
            raise ValueError("min_displacement_meters must be non-negative")
