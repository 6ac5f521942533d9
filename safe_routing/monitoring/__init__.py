"""
Live trip monitoring and deviation detection.
"""

from .deviation import check_deviation, AreaInfo, ON_ROUTE_MESSAGE
from .deviation_monitor import DeviationMonitor, MonitorState, MonitorUpdate

__all__ = [
    'check_deviation',
    'AreaInfo',
    'ON_ROUTE_MESSAGE',
    'DeviationMonitor',
    'MonitorState',
    'MonitorUpdate',
]
