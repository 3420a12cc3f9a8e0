"""Observability API endpoints: metrics, health, and readiness."""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from config import Settings, get_settings
from .health import check_redis_health, get_overall_health, HealthStatus

router = APIRouter(tags=["Observability"])


@router.get("/metrics", include_in_schema=False)
def metrics():
    """Expose Prometheus metrics in text exposition format."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


@router.get(
    "/health",
    summary="Health check endpoint",
    description="Returns health status of system components",
)
def health_check(settings: Settings = Depends(get_settings)):
    """Check health of all system components.

    Returns 200 unless a component is UNHEALTHY, in which case 503.
    """
    components = {
        "redis": check_redis_health(settings.REDIS_URL),
    }
    overall_status = get_overall_health(components)

    response_data = {
        "status": overall_status.value,
        "components": {
            name: {
                "status": comp.status.value,
                "message": comp.message,
                "latency_ms": comp.latency_ms,
            }
            for name, comp in components.items()
        }
    }

    status_code = 200 if overall_status != HealthStatus.UNHEALTHY else 503
    return JSONResponse(content=response_data, status_code=status_code)


@router.get("/ready", summary="Readiness check endpoint")
def readiness_check():
    """The validator has no startup dependencies, so a running process is ready."""
    return {
        "status": "ready",
        "message": "Application is ready to serve traffic"
    }
