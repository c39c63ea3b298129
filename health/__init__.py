# ============================================================================
# HEALTH CHECK MODULE
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Infrastructure - Health check plugin system
# PURPOSE: Kubernetes probes and health monitoring
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Module

Plugin-based health checks:
- /livez: Process alive
- /readyz: Ready to accept work (document stores bootstrapped)
- /health: Comprehensive status (all plugins)

Usage:
    from health import health_router, get_registry

    import health.checks  # register built-in checks
    app.include_router(health_router)
"""

from health.core import (
    HealthStatus,
    HealthCheckResult,
    HealthCheckPlugin,
    HealthCheckCategory,
)
from health.registry import (
    HealthCheckRegistry,
    register_check,
    get_registry,
)
from health.executor import HealthCheckExecutor
from health.router import health_router

__all__ = [
    # Core types
    "HealthStatus",
    "HealthCheckResult",
    "HealthCheckPlugin",
    "HealthCheckCategory",
    # Registry
    "HealthCheckRegistry",
    "register_check",
    "get_registry",
    # Executor
    "HealthCheckExecutor",
    # Router
    "health_router",
]
