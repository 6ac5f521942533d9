"""
Safe Routing - safety-aware route planning and trip monitoring.

Recommends a fastest, a safest and an optimized route between two points,
scoring each against a per-area safety table, and watches a live position
stream for dangerous deviations from the chosen route.

## Quick Start

```python
import asyncio
from safe_routing import RoutePlanner, RoutingConfig, JsonZoneStore, ZoneSnapshotHolder
from safe_routing.providers import OSRMRoutingProvider

planner = RoutePlanner(
    OSRMRoutingProvider(),
    ZoneSnapshotHolder(JsonZoneStore()),
    RoutingConfig.create_balanced_config(),
)
result = asyncio.run(planner.plan((17.7047, 83.2113), (17.7200, 83.3150)))
for route in result.routes:
    print(route.get_summary())
```

## Architecture

- `data/`: Models, geometry, static area tables and zone loading
- `algorithms/`: Safety index, path search, diversity, crime zones, planner
- `monitoring/`: Deviation detection and the trip monitor
- `providers/`: Routing, geocoding and alert ports with HTTP adapters
- `config/`: Configuration management
"""

from .config import RoutingConfig, MonitorConfig
from .data import (
    Point,
    SafetyZone,
    RouteCandidate,
    RouteClass,
    JsonZoneStore,
    InMemoryZoneStore,
    ZoneSnapshotHolder,
)
from .algorithms import SafetyIndex, PathSearchEngine, RoutePlanner, find_crime_zones_along_route
from .monitoring import DeviationMonitor, check_deviation
from .exceptions import (
    SafeRoutingError,
    ProviderUnavailable,
    NoRouteFound,
    InvalidInput,
    DegenerateCandidate,
)

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    'RoutePlanner',
    'DeviationMonitor',
    'RoutingConfig',
    'MonitorConfig',

    # Core algorithms
    'SafetyIndex',
    'PathSearchEngine',
    'find_crime_zones_along_route',
    'check_deviation',

    # Data
    'Point',
    'SafetyZone',
    'RouteCandidate',
    'RouteClass',
    'JsonZoneStore',
    'InMemoryZoneStore',
    'ZoneSnapshotHolder',

    # Errors
    'SafeRoutingError',
    'ProviderUnavailable',
    'NoRouteFound',
    'InvalidInput',
    'DegenerateCandidate',

    # Metadata
    '__version__',
]
