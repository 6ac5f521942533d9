"""
Pydantic schemas for the safe routing API.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator, model_validator


class LocationRequest(BaseModel):
    """Request model for a single location."""
    latitude: float = Field(..., ge=-90, le=90, description="Latitude coordinate")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude coordinate")

    def as_tuple(self):
        return (self.latitude, self.longitude)


class PlanRequest(BaseModel):
    """Request model for route planning.

    Each end is given either as coordinates or as a free-text place name.
    """
    source: Optional[LocationRequest] = Field(default=None, description="Starting location")
    destination: Optional[LocationRequest] = Field(default=None, description="Destination location")
    source_query: Optional[str] = Field(default=None, description="Starting place name")
    destination_query: Optional[str] = Field(default=None, description="Destination place name")
    include_geojson: bool = Field(default=True, description="Attach route geometry as GeoJSON")

    @model_validator(mode='after')
    def check_endpoints(self):
        """Each end needs coordinates or a query."""
        if self.source is None and not self.source_query:
            raise ValueError('source or source_query is required')
        if self.destination is None and not self.destination_query:
            raise ValueError('destination or destination_query is required')
        return self


class CrimeZoneResponse(BaseModel):
    """A crime zone close to a route."""
    area: str
    street: Optional[str] = None
    crime_type: str
    crime_type_label: str
    crime_count: int
    severity: Optional[str] = None
    safety_score: int
    distance_m: float


class RouteResponse(BaseModel):
    """One recommended route."""
    id: str
    type: str = Field(..., description="'safest', 'optimized' or 'fastest'")
    distance_m: float = Field(..., description="Total route distance in meters")
    duration_s: float = Field(..., description="Estimated travel time in seconds")
    safety_score: int = Field(..., ge=0, le=100, description="Safety score (100 = safest)")
    risk_level: str = Field(..., description="'safe', 'moderate' or 'risky'")
    adjusted: bool = Field(default=False, description="Whether metrics were adjusted to keep route ordering")
    fallback_used: bool = Field(default=False, description="Whether the search fell back to the fastest path")
    dangerous_areas: List[str] = Field(default_factory=list)
    safe_areas: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    crime_zones: List[CrimeZoneResponse] = Field(default_factory=list)
    route_geojson: Optional[Dict[str, Any]] = Field(default=None, description="Route as GeoJSON FeatureCollection")


class PlanResponse(BaseModel):
    """Response model for route planning."""
    success: bool = Field(..., description="Whether planning succeeded")
    message: str = Field(..., description="Status message")
    routes: List[RouteResponse] = Field(default_factory=list, description="Routes ordered safest first")
    zone_count: int = Field(0, description="Number of safety zones used")
    candidates_considered: int = Field(0, description="Number of candidate routes evaluated")
    calculation_time_ms: Optional[float] = None


class PathRequest(BaseModel):
    """Request carrying a route geometry."""
    path: List[LocationRequest] = Field(..., min_length=1, description="Route points in travel order")


class CrimeZonesRequest(PathRequest):
    max_distance_m: Optional[float] = Field(default=None, gt=0, description="Search distance from the route")


class CrimeZonesResponse(BaseModel):
    success: bool = True
    total: int
    crime_zones: List[CrimeZoneResponse]
    by_type: Dict[str, int] = Field(..., description="Number of zones per crime type")


class DeviationRequest(PathRequest):
    position: LocationRequest = Field(..., description="Current position")


class DeviationResponse(BaseModel):
    is_deviated: bool
    distance_m: int
    severity: str
    message: str


class SOSRequest(BaseModel):
    """Emergency alert request."""
    location: LocationRequest
    phone_numbers: List[str] = Field(..., min_length=1, description="Emergency contacts")
    message: Optional[str] = Field(default=None, description="Custom message replacing the default text")

    @field_validator('phone_numbers')
    @classmethod
    def strip_numbers(cls, v):
        numbers = [number.strip() for number in v if number and number.strip()]
        if not numbers:
            raise ValueError('At least one phone number is required')
        return numbers


class SOSResponse(BaseModel):
    success: bool
    landmark: str
    message: str
    delivered: int


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    zones_loaded: bool = Field(..., description="Whether safety zones are loaded")
    zone_count: int = Field(..., description="Number of safety zones loaded")
    loaded_at: Optional[str] = Field(default=None, description="When the zone snapshot was loaded")


class ErrorResponse(BaseModel):
    """Error response model."""
    success: bool = Field(False, description="Always false for error responses")
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Detailed error message")
    details: Optional[Any] = Field(None, description="Additional error details")
