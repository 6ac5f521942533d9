"""
Route deviation classification.
"""

import math
from typing import NamedTuple, Optional, Sequence

from ..config.routing_config import MonitorConfig
from ..data.distance_utils import distance_to_polyline
from ..data.models import DeviationResult, DeviationSeverity, Point

ON_ROUTE_MESSAGE = 'You are on the recommended route'

_DEFAULT_CONFIG = MonitorConfig()


class AreaInfo(NamedTuple):
    """Safety context of the area around the current position."""
    area_name: str
    safety_score: int


def check_deviation(position: Optional[Point], path: Optional[Sequence[Point]],
                    area_info: Optional[AreaInfo] = None,
                    config: Optional[MonitorConfig] = None) -> Optional[DeviationResult]:
    """
    Classify how far a position is from the route.

    Within ``safe_distance_meters`` (inclusive) the traveller is on route,
    within ``warning_distance_meters`` (inclusive) a warning is raised and
    anything further is a danger. Messages name the surrounding area when it
    scores below ``high_risk_score``.

    Args:
        position: Current position
        path: Route geometry being followed
        area_info: Safety context for the current position
        config: Monitor thresholds

    Returns:
        DeviationResult, or None when the position or route is missing
    """
    if position is None or not path:
        return None
    config = config or _DEFAULT_CONFIG

    position = Point.from_any(position)
    distance = distance_to_polyline(position, [Point.from_any(p) for p in path])
    if not math.isfinite(distance):
        return None
    rounded = int(round(distance))

    if distance <= config.safe_distance_meters:
        return DeviationResult(False, rounded, DeviationSeverity.SAFE, ON_ROUTE_MESSAGE)

    low_safety = area_info is not None and area_info.safety_score < config.high_risk_score

    if distance <= config.warning_distance_meters:
        suffix = f" You are entering a low-safety area ({area_info.area_name})." if low_safety else ''
        return DeviationResult(True, rounded, DeviationSeverity.WARNING,
                               f"You are {rounded}m off the trusted route.{suffix}")

    if low_safety:
        suffix = (f" Driver is taking a low-safety road in {area_info.area_name} "
                  f"(Safety: {area_info.safety_score}%).")
    else:
        suffix = ' Driver may be taking an unverified route.'
    return DeviationResult(True, rounded, DeviationSeverity.DANGER,
                           f"You are {rounded}m off the trusted route.{suffix}")
