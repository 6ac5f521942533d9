"""
Configuration management for safety-aware routing.
"""

from .routing_config import RoutingConfig, MonitorConfig

__all__ = [
    'RoutingConfig',
    'MonitorConfig',
]
