# ============================================================================
# HEALTH CHECK ROUTER
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Infrastructure - FastAPI health check endpoints
# PURPOSE: Kubernetes probes and health monitoring endpoints
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Router

Endpoints:
    GET /livez   - Liveness probe. 200 while the process is running.
    GET /readyz  - Readiness probe. 200 once every required check passes;
                   document stores must have bootstrapped.
    GET /health  - Detailed status of all registered checks.
    GET /health/{check_name} - Single check status

Response Codes:
    200 - Healthy
    206 - Degraded (partial content)
    503 - Unhealthy (service unavailable)
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from health.core import HealthStatus
from health.registry import get_registry
from health.executor import HealthCheckExecutor
from __version__ import __version__, BUILD_DATE

logger = logging.getLogger(__name__)

health_router = APIRouter(tags=["Health"])


def _status_to_http_code(status: HealthStatus) -> int:
    """Map health status to HTTP status code."""
    return {
        HealthStatus.HEALTHY: 200,
        HealthStatus.DEGRADED: 206,
        HealthStatus.UNHEALTHY: 503,
    }[status]


@health_router.get("/livez")
async def liveness_probe():
    """Liveness probe. No external checks."""
    return {"status": "alive", "version": __version__, "build_date": BUILD_DATE}


@health_router.get("/readyz")
async def readiness_probe():
    """
    Readiness probe.

    Runs only the checks marked required_for_ready. Returns 503 with the
    failing checks while any of them is unhealthy.
    """
    registry = get_registry()

    if len(registry) == 0:
        return {"status": "ready", "message": "No checks registered"}

    executor = HealthCheckExecutor(registry=registry, overall_timeout=10.0)
    result = await executor.execute_required()

    if result.status == HealthStatus.UNHEALTHY:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "checks": {
                    name: check.to_dict()
                    for name, check in result.checks.items()
                    if check.status == HealthStatus.UNHEALTHY
                },
                "total_duration_ms": round(result.total_duration_ms, 2),
            },
        )

    return {
        "status": "ready",
        "checks_passed": len(result.checks),
        "total_duration_ms": round(result.total_duration_ms, 2),
    }


@health_router.get("/health")
async def full_health_check():
    """Run every registered check and report per-check and per-category status."""
    registry = get_registry()

    if len(registry) == 0:
        return {
            "status": "healthy",
            "message": "No checks registered",
            "checks": {},
        }

    executor = HealthCheckExecutor(registry=registry, overall_timeout=60.0)
    result = await executor.execute_all()

    response_body = result.to_dict()
    response_body["version"] = __version__
    response_body["build_date"] = BUILD_DATE

    summary = {}
    for name, check_result in result.checks.items():
        check = registry.get(name)
        if check:
            counts = summary.setdefault(
                check.category.value,
                {"healthy": 0, "degraded": 0, "unhealthy": 0},
            )
            counts[check_result.status.value] += 1
    response_body["summary"] = summary

    return JSONResponse(
        status_code=_status_to_http_code(result.status),
        content=response_body,
    )


@health_router.get("/health/{check_name}")
async def single_health_check(check_name: str):
    """Run a single health check by name."""
    executor = HealthCheckExecutor()
    result = await executor.execute_single(check_name)

    if result is None:
        return JSONResponse(
            status_code=404,
            content={"error": f"Health check not found: {check_name}"},
        )

    return JSONResponse(
        status_code=_status_to_http_code(result.status),
        content=result.to_dict(),
    )


__all__ = [
    "health_router",
]
