"""
Route planning orchestration.
"""

from .route_planner import RoutePlanner, PlanResult, PlannedRoute, validate_point

__all__ = [
    'RoutePlanner',
    'PlanResult',
    'PlannedRoute',
    'validate_point',
]
