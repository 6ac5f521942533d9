"""
Ordering constraints between the fastest, safest and optimized routes.

The recommended set must read consistently: the safest route is longer and
safer than the fastest one, and the optimized route sits between the two.
Candidates whose figures had to be changed carry ``adjusted=True``.
"""

import logging
from dataclasses import replace
from typing import Optional, Tuple

from ...config.routing_config import RoutingConfig
from ...data.models import RouteCandidate
from .duration import DurationEstimator, TrafficAwareDurationEstimator

logger = logging.getLogger(__name__)

# Seconds added per extra kilometre when the estimator is not monotonic
_SECONDS_PER_EXTRA_KM = 180.0


def _strictly_between(value: float, low: float, high: float) -> bool:
    return low < value < high


def enforce_route_ordering(fastest: RouteCandidate,
                           safest: Optional[RouteCandidate] = None,
                           optimized: Optional[RouteCandidate] = None,
                           estimator: Optional[DurationEstimator] = None,
                           config: Optional[RoutingConfig] = None
                           ) -> Tuple[RouteCandidate, Optional[RouteCandidate], Optional[RouteCandidate]]:
    """
    Adjust safest and optimized figures so the three routes are ordered.

    Args:
        fastest: Fastest candidate (never changed)
        safest: Safest candidate, if one was found
        optimized: Optimized candidate, if one was found
        estimator: Duration model used for recomputed durations
        config: Routing configuration parameters

    Returns:
        (fastest, safest, optimized) with adjusted figures where needed
    """
    config = config or RoutingConfig()
    estimator = estimator or TrafficAwareDurationEstimator()

    if safest is None:
        return fastest, None, optimized

    distance = safest.distance_meters
    min_distance = fastest.distance_meters + config.min_safest_extra_distance
    max_distance = fastest.distance_meters + config.max_extra_distance
    if distance < min_distance:
        distance = min_distance
    elif distance > max_distance:
        distance = max_distance

    score = safest.safety_score
    if score <= fastest.safety_score:
        score = fastest.safety_score + config.safest_score_bump
    if optimized is not None:
        # leave room for an optimized score strictly between the two
        score = max(score, fastest.safety_score + 2)
    score = min(100, score)

    if distance != safest.distance_meters or score != safest.safety_score:
        logger.info(f"Adjusting safest route: {safest.distance_meters:.0f}m/{safest.safety_score} "
                    f"-> {distance:.0f}m/{score}")
        safest = replace(safest, distance_meters=distance, safety_score=score,
                         duration_seconds=_duration_after(fastest, distance, estimator),
                         adjusted=True)

    if optimized is not None:
        distance_ok = _strictly_between(optimized.distance_meters,
                                        fastest.distance_meters, safest.distance_meters)
        score_ok = _strictly_between(optimized.safety_score,
                                     fastest.safety_score, safest.safety_score)
        if not (distance_ok and score_ok):
            distance = (fastest.distance_meters + safest.distance_meters) / 2
            score = int(round((fastest.safety_score + safest.safety_score) / 2))
            if safest.safety_score - fastest.safety_score >= 2:
                score = min(max(score, fastest.safety_score + 1), safest.safety_score - 1)
            else:
                logger.warning(f"No score strictly between {fastest.safety_score} and {safest.safety_score}")
            logger.info(f"Adjusting optimized route to midpoint: {distance:.0f}m/{score}")
            duration = estimator.estimate(distance)
            if not fastest.duration_seconds <= duration <= safest.duration_seconds:
                duration = round((fastest.duration_seconds + safest.duration_seconds) / 2)
            optimized = replace(optimized, distance_meters=distance, safety_score=score,
                                duration_seconds=duration, adjusted=True)

    return fastest, safest, optimized


def _duration_after(fastest: RouteCandidate, distance: float, estimator: DurationEstimator) -> float:
    duration = estimator.estimate(distance)
    if duration <= fastest.duration_seconds:
        extra_km = (distance - fastest.distance_meters) / 1000.0
        duration = fastest.duration_seconds + round(extra_km * _SECONDS_PER_EXTRA_KM)
    return duration
