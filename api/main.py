"""
Safe Routing API - FastAPI Main Application

HTTP surface for safety-aware route planning in Visakhapatnam: route
planning, crime zones along a path, deviation checks and SOS alerts.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from safe_routing import __version__
from safe_routing.exceptions import InvalidInput, NoRouteFound, ProviderUnavailable
from api.routes.routing import router as routing_router
from api.services.routing_service import routing_service

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the zone snapshot on startup and report its state."""
    logger.info(f"Starting Safe Routing API {__version__}")

    health = routing_service.get_health_status()
    if health.zones_loaded:
        logger.info(f"Zone snapshot loaded: {health.zone_count} safety zones")
    else:
        logger.warning("No safety zones loaded - every route will score neutral")

    yield

    logger.info("Safe Routing API stopped")


app = FastAPI(
    title="Safe Routing API",
    description="""
    **Safety-aware route planning for Visakhapatnam**

    Every trip gets up to three distinct routes, safest first: the safest, a
    balanced optimized route and the fastest. Routes are scored against the
    per-area safety table and list the crime zones they pass.

    ## Endpoints

    - `POST /api/routing/plan` - safest, optimized and fastest routes with GeoJSON geometry
    - `POST /api/routing/crime-zones` - low-safety zones near a path, grouped by crime type
    - `POST /api/routing/deviation` - distance from the followed route and its severity
    - `POST /api/routing/sos` - emergency message with the nearest landmark and a map link
    - `POST /api/routing/zones/refresh` - reload the safety zone table
    - `GET /api/routing/health` - zone snapshot status
    """,
    version=__version__,
    license_info={
        "name": "MIT License",
        "url": "https://opensource.org/licenses/MIT",
    },
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(status_code: int, error: str, message: str, details=None) -> JSONResponse:
    """JSON error envelope shared by every handler."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "message": message, "details": details},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected request to {request.url.path}: {exc}")
    return error_response(422, "validation_error", "Request validation failed",
                          jsonable_encoder(exc.errors()))


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    logger.warning(f"Invalid input for {request.url.path}: {exc}")
    return error_response(400, "invalid_input", str(exc))


@app.exception_handler(NoRouteFound)
async def no_route_handler(request: Request, exc: NoRouteFound):
    logger.warning(f"No route for {request.url.path}: {exc}")
    return error_response(404, "no_route_found", str(exc))


@app.exception_handler(ProviderUnavailable)
async def provider_unavailable_handler(request: Request, exc: ProviderUnavailable):
    logger.error(f"Provider unavailable for {request.url.path}: {exc}")
    return error_response(503, "provider_unavailable", "Routing provider is unavailable", str(exc))


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error for {request.url.path}: {exc}")
    return error_response(500, "internal_server_error", "An unexpected error occurred")


app.include_router(routing_router)


@app.get("/", tags=["general"])
async def root():
    """Service name, version and where to look next."""
    return {
        "api": "Safe Routing API",
        "version": __version__,
        "status": "operational",
        "documentation": "/docs",
        "health_check": "/api/routing/health",
        "coverage_area": "Visakhapatnam, Andhra Pradesh, India"
    }


@app.get("/health", tags=["general"])
async def api_health():
    """Liveness probe including the routing service status."""
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        status = routing_service.get_health_status().status
    except Exception as e:
        logger.error(f"Service status unavailable: {e}")
        return JSONResponse(
            status_code=503,
            content={"api_status": "unhealthy", "error": str(e), "timestamp": timestamp},
        )
    return {"api_status": "healthy", "service_status": status, "timestamp": timestamp}
