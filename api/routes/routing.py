"""
FastAPI routes for safe routing endpoints.
"""

from fastapi import APIRouter, HTTPException, status
import logging

from api.schemas.routing import (
    PlanRequest,
    PlanResponse,
    CrimeZonesRequest,
    CrimeZonesResponse,
    DeviationRequest,
    DeviationResponse,
    SOSRequest,
    SOSResponse,
    HealthResponse,
)
from api.services.routing_service import routing_service

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/routing", tags=["routing"])


@router.get("/health", response_model=HealthResponse, summary="Health Check")
async def health_check():
    """
    Check the health status of the routing service.

    Returns:
        HealthResponse: Zone snapshot status
    """
    try:
        return routing_service.get_health_status()
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Health check failed"
        )


@router.post("/plan", response_model=PlanResponse, summary="Plan Safe Routes")
async def plan_routes(request: PlanRequest):
    """
    Plan up to three routes between two locations: safest, optimized and fastest.

    Each route carries its safety score, risk level, the crime zones it passes
    and its geometry as GeoJSON.

    Example:
        ```json
        {
            "source": {"latitude": 17.7047, "longitude": 83.2113},
            "destination": {"latitude": 17.7200, "longitude": 83.3150}
        }
        ```
    """
    logger.info(f"Route planning request: {request.source or request.source_query} -> "
                f"{request.destination or request.destination_query}")
    return await routing_service.plan_routes(request)


@router.post("/crime-zones", response_model=CrimeZonesResponse, summary="Crime Zones Along a Path")
async def crime_zones(request: CrimeZonesRequest):
    """
    List low-safety zones near a path, closest and most dangerous first.
    """
    return routing_service.find_crime_zones(request)


@router.post("/deviation", response_model=DeviationResponse, summary="Check Route Deviation")
async def deviation(request: DeviationRequest):
    """
    Classify how far the current position is from the route being followed.
    """
    return routing_service.check_deviation(request)


@router.post("/sos", response_model=SOSResponse, summary="Send SOS Alert")
async def sos(request: SOSRequest):
    """
    Send an emergency message with the nearest landmark and a map link.
    """
    return await routing_service.send_sos(request)


@router.post("/zones/refresh", response_model=HealthResponse, summary="Reload Safety Zones")
async def refresh_zones():
    """
    Reload the safety zone table. A failed reload keeps the previous zones.
    """
    return routing_service.refresh_zones()


@router.get("/", summary="API Information")
async def get_api_info():
    """
    Get information about the Safe Routing API.

    Returns:
        dict: API information and available endpoints
    """
    return {
        "api": "Safe Routing API",
        "version": routing_service.get_health_status().version,
        "description": "Safety-aware route planning for Visakhapatnam",
        "endpoints": {
            "POST /api/routing/plan": "Plan safest, optimized and fastest routes",
            "POST /api/routing/crime-zones": "Crime zones along a path",
            "POST /api/routing/deviation": "Check deviation from a route",
            "POST /api/routing/sos": "Send an SOS alert to emergency contacts",
            "POST /api/routing/zones/refresh": "Reload the safety zone table",
            "GET /api/routing/health": "Check service health status",
            "GET /api/routing/": "This information endpoint"
        },
        "supported_areas": [
            "Visakhapatnam, Andhra Pradesh, India"
        ]
    }
