"""
Route ordering constraint and duration model tests.
"""

import pytest

from safe_routing.algorithms.diversity import TrafficAwareDurationEstimator, enforce_route_ordering
from safe_routing.data import Point, RouteCandidate, RouteClass

ESTIMATOR = TrafficAwareDurationEstimator()
PATH = (Point(17.70, 83.30), Point(17.72, 83.33))


def candidate(route_class, distance, score, duration=None):
    return RouteCandidate(
        id=f"route-{route_class.value}",
        route_class=route_class,
        path=PATH,
        distance_meters=distance,
        duration_seconds=ESTIMATOR.estimate(distance) if duration is None else duration,
        safety_score=score,
    )


class TestDurationEstimator:

    @pytest.mark.parametrize("distance, expected", [
        (0, 0),
        (3000, 630),
        (10000, 1710),
        (20000, 2826),
    ])
    def test_speed_bands(self, distance, expected):
        assert ESTIMATOR.estimate(distance) == expected


class TestSafestOrdering:

    def test_too_short_and_less_safe(self):
        fastest = candidate(RouteClass.FASTEST, 4000, 40)
        safest = candidate(RouteClass.SAFEST, 4200, 35)

        _, adjusted, _ = enforce_route_ordering(fastest, safest)
        assert adjusted.adjusted
        assert adjusted.distance_meters == 4500
        assert adjusted.safety_score == 50
        assert adjusted.duration_seconds > fastest.duration_seconds

    def test_too_long(self):
        fastest = candidate(RouteClass.FASTEST, 4000, 40)
        safest = candidate(RouteClass.SAFEST, 20000, 80)

        _, adjusted, _ = enforce_route_ordering(fastest, safest)
        assert adjusted.distance_meters == 11000
        assert adjusted.safety_score == 80

    def test_score_bump_capped(self):
        fastest = candidate(RouteClass.FASTEST, 4000, 95)
        safest = candidate(RouteClass.SAFEST, 6000, 90)

        _, adjusted, _ = enforce_route_ordering(fastest, safest)
        assert adjusted.safety_score == 100

    def test_already_ordered(self):
        fastest = candidate(RouteClass.FASTEST, 4000, 40)
        safest = candidate(RouteClass.SAFEST, 6000, 60)

        _, result, _ = enforce_route_ordering(fastest, safest)
        assert result is safest
        assert not result.adjusted

    def test_duration_stays_monotonic_across_speed_bands(self):
        fastest = candidate(RouteClass.FASTEST, 4900, 40)
        safest = candidate(RouteClass.SAFEST, 5000, 60)

        _, adjusted, _ = enforce_route_ordering(fastest, safest)
        assert adjusted.distance_meters == 5400
        assert adjusted.duration_seconds == fastest.duration_seconds + 90

    def test_no_safest(self):
        fastest = candidate(RouteClass.FASTEST, 4000, 40)
        optimized = candidate(RouteClass.OPTIMIZED, 3000, 10)
        assert enforce_route_ordering(fastest, None, optimized) == (fastest, None, optimized)


class TestOptimizedOrdering:

    def test_between_is_kept(self):
        fastest = candidate(RouteClass.FASTEST, 4000, 40)
        safest = candidate(RouteClass.SAFEST, 8000, 80)
        optimized = candidate(RouteClass.OPTIMIZED, 5000, 60)

        _, _, result = enforce_route_ordering(fastest, safest, optimized)
        assert result is optimized

    def test_outside_is_moved_to_midpoint(self):
        fastest = candidate(RouteClass.FASTEST, 4000, 40)
        safest = candidate(RouteClass.SAFEST, 8000, 80)
        optimized = candidate(RouteClass.OPTIMIZED, 9000, 70)

        _, _, result = enforce_route_ordering(fastest, safest, optimized)
        assert result.adjusted
        assert result.distance_meters == 6000
        assert result.safety_score == 60
        assert fastest.duration_seconds <= result.duration_seconds <= safest.duration_seconds

    @pytest.mark.parametrize("distance, score", [(4000, 60), (5000, 40), (8000, 60), (5000, 80)])
    def test_bounds_are_exclusive(self, distance, score):
        fastest = candidate(RouteClass.FASTEST, 4000, 40)
        safest = candidate(RouteClass.SAFEST, 8000, 80)
        optimized = candidate(RouteClass.OPTIMIZED, distance, score)

        _, _, result = enforce_route_ordering(fastest, safest, optimized)
        assert result.adjusted

    def test_one_point_score_gap_is_widened(self):
        fastest = candidate(RouteClass.FASTEST, 4000, 60)
        safest = candidate(RouteClass.SAFEST, 6000, 61)
        optimized = candidate(RouteClass.OPTIMIZED, 5000, 60)

        _, safest, result = enforce_route_ordering(fastest, safest, optimized)
        assert safest.adjusted
        assert safest.safety_score == 62
        assert fastest.safety_score < result.safety_score < safest.safety_score

    @pytest.mark.parametrize("fastest_score, safest_score", [(40, 42), (40, 43), (50, 97)])
    def test_midpoint_score_is_strictly_between(self, fastest_score, safest_score):
        fastest = candidate(RouteClass.FASTEST, 4000, fastest_score)
        safest = candidate(RouteClass.SAFEST, 8000, safest_score)
        optimized = candidate(RouteClass.OPTIMIZED, 9000, fastest_score)

        _, _, result = enforce_route_ordering(fastest, safest, optimized)
        assert fastest_score < result.safety_score < safest_score
