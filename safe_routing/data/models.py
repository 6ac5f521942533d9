"""
Value types shared by the routing, safety and monitoring components.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional, Tuple


NEUTRAL_SAFETY_SCORE = 70


class Point(NamedTuple):
    """Immutable geographic point in degrees."""
    lat: float
    lng: float

    @classmethod
    def from_any(cls, value: Any) -> 'Point':
        """Build a point from a Point, a (lat, lng) pair or a dict with lat/lng keys."""
        if isinstance(value, Point):
            return value
        if isinstance(value, dict):
            lat = value.get('lat', value.get('latitude'))
            lng = value.get('lng', value.get('lon', value.get('longitude')))
            return cls(float(lat), float(lng))
        lat, lng = value
        return cls(float(lat), float(lng))

    def is_finite(self) -> bool:
        return math.isfinite(self.lat) and math.isfinite(self.lng)


class Severity(Enum):
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional['Severity']:
        """Parse a stored severity; the store's 'critical' level maps to HIGH."""
        if value is None or isinstance(value, Severity):
            return value
        normalized = str(value).strip().lower()
        if not normalized:
            return None
        if normalized == 'critical':
            return cls.HIGH
        return cls(normalized)


class CrimeType(Enum):
    KIDNAP = 'kidnap'
    ROBBERY = 'robbery'
    MURDER = 'murder'
    ASSAULT = 'assault'
    ACCIDENT = 'accident'
    THEFT = 'theft'
    HARASSMENT = 'harassment'


class RiskLevel(Enum):
    SAFE = 'safe'
    MODERATE = 'moderate'
    RISKY = 'risky'


class RouteClass(Enum):
    FASTEST = 'fastest'
    SAFEST = 'safest'
    OPTIMIZED = 'optimized'


class DeviationSeverity(Enum):
    SAFE = 'safe'
    WARNING = 'warning'
    DANGER = 'danger'

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    DeviationSeverity.SAFE: 0,
    DeviationSeverity.WARNING: 1,
    DeviationSeverity.DANGER: 2,
}


def clamp_score(score: float) -> int:
    """Round and clamp a safety score to the [0, 100] range."""
    return int(max(0, min(100, round(score))))


def risk_level_for_score(score: float) -> RiskLevel:
    """Risk level derived from a safety score: safe >= 70, risky < 50."""
    if score >= 70:
        return RiskLevel.SAFE
    if score < 50:
        return RiskLevel.RISKY
    return RiskLevel.MODERATE


@dataclass(frozen=True)
class SafetyZone:
    """A named locality with its crime statistics and safety score."""
    area: str
    safety_score: int
    crime_count: int = 0
    severity: Optional[Severity] = None
    street: Optional[str] = None

    def __post_init__(self):
        if not 0 <= self.safety_score <= 100:
            raise ValueError(f"safety_score must be within 0-100, got {self.safety_score}")
        if self.crime_count < 0:
            raise ValueError(f"crime_count must be non-negative, got {self.crime_count}")

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'SafetyZone':
        """Create a zone from a store row (snake_case or camelCase keys)."""
        return cls(
            area=str(record.get('area', record.get('areaName', ''))).strip(),
            street=record.get('street'),
            crime_count=int(record.get('crime_count', record.get('crimeCount', 0)) or 0),
            severity=Severity.parse(record.get('severity')),
            safety_score=int(record.get('safety_score', record.get('safetyScore', NEUTRAL_SAFETY_SCORE))),
        )


@dataclass(frozen=True)
class CrimeRecord:
    """Per-area count of one crime category."""
    area: str
    crime_type: CrimeType
    count: int


@dataclass(frozen=True)
class RouteCandidate:
    """One recommended route of a given class."""
    id: str
    route_class: RouteClass
    path: Tuple[Point, ...]
    distance_meters: float
    duration_seconds: float
    safety_score: int
    adjusted: bool = False

    def __post_init__(self):
        if not self.path:
            raise ValueError("RouteCandidate path must not be empty")
        if not 0 <= self.safety_score <= 100:
            raise ValueError(f"safety_score must be within 0-100, got {self.safety_score}")

    @property
    def risk_level(self) -> RiskLevel:
        return risk_level_for_score(self.safety_score)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics for the route."""
        return {
            'id': self.id,
            'type': self.route_class.value,
            'distance_km': round(self.distance_meters / 1000.0, 1),
            'duration_min': round(self.duration_seconds / 60.0),
            'safety_score': self.safety_score,
            'risk_level': self.risk_level.value,
            'point_count': len(self.path),
            'adjusted': self.adjusted,
        }


@dataclass(frozen=True)
class CrimeZoneHit:
    """A safety zone near a route, annotated with its crime category."""
    area: str
    street: Optional[str]
    crime_type: CrimeType
    crime_count: int
    severity: Optional[Severity]
    safety_score: int
    distance_meters: float


@dataclass(frozen=True)
class DeviationResult:
    is_deviated: bool
    distance_meters: int
    severity: DeviationSeverity
    message: str


@dataclass(frozen=True)
class SafetyAnalysis:
    """Safety statistics for a sampled path."""
    overall_score: int
    risk_level: RiskLevel
    dangerous_areas: Tuple[str, ...] = ()
    safe_areas: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ProviderRoute:
    """Geometry and totals returned by an external routing provider."""
    distance_meters: float
    duration_seconds: float
    path: Tuple[Point, ...]


@dataclass(frozen=True)
class GeocodeResult:
    display_name: str
    lat: float
    lng: float

    @property
    def point(self) -> Point:
        return Point(self.lat, self.lng)


@dataclass
class TripAlert:
    """Alert raised while a trip is being monitored."""
    id: str
    alert_type: str  # 'deviation' or 'high-risk'
    severity: DeviationSeverity
    message: str
    timestamp: datetime
    dismissed: bool = False


@dataclass
class TripSummary:
    total_distance_meters: float
    time_taken_seconds: float
    route_class: RouteClass
    safety_score: int
    alerts_raised: int
    start_time: datetime
    end_time: datetime
    alerts: List[TripAlert] = field(default_factory=list)
