"""
Trip duration estimation.
"""

from abc import ABC, abstractmethod


class DurationEstimator(ABC):
    """Base class for converting route distance into travel time."""

    @abstractmethod
    def estimate(self, distance_meters: float) -> float:
        """
        Estimate travel time.

        Args:
            distance_meters: Route length in meters

        Returns:
            Duration in seconds
        """


class TrafficAwareDurationEstimator(DurationEstimator):
    """
    Urban traffic model with distance-dependent average speed.

    Short trips move through congestion, longer ones pick up faster roads.
    Each full 3 km adds a stop buffer for signals.
    """

    def __init__(self, short_speed_kmh: float = 20.0, medium_speed_kmh: float = 25.0,
                 long_speed_kmh: float = 31.5, signal_buffer_seconds: float = 90.0):
        self.short_speed_kmh = short_speed_kmh
        self.medium_speed_kmh = medium_speed_kmh
        self.long_speed_kmh = long_speed_kmh
        self.signal_buffer_seconds = signal_buffer_seconds

    def speed_for_distance(self, distance_km: float) -> float:
        if distance_km < 5:
            return self.short_speed_kmh
        if distance_km < 15:
            return self.medium_speed_kmh
        return self.long_speed_kmh

    def estimate(self, distance_meters: float) -> float:
        distance_km = max(0.0, distance_meters) / 1000.0
        travel_seconds = distance_km / self.speed_for_distance(distance_km) * 3600.0
        signal_seconds = (distance_km // 3) * self.signal_buffer_seconds
        return round(travel_seconds + signal_seconds)
