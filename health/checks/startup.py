# ============================================================================
# STARTUP HEALTH CHECKS
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Infrastructure - Startup health checks
# PURPOSE: Basic process and configuration checks
# CREATED: 19 OCT 2026
# ============================================================================
"""
Startup Health Checks

Basic checks that run first (priority 10):
- ProcessCheck: Always healthy if process is running
- ConfigCheck: Cosmos DB environment variables present
"""

import platform
import sys
import logging

import psutil

from core.config import get_config
from health.core import HealthCheckPlugin, HealthCheckResult
from health.registry import register_check

logger = logging.getLogger(__name__)


@register_check(category="startup")
class ProcessCheck(HealthCheckPlugin):
    """Always healthy if the check runs."""

    name = "process"
    timeout_seconds = 1.0

    async def check(self) -> HealthCheckResult:
        process = psutil.Process()
        memory = psutil.virtual_memory()
        return HealthCheckResult.healthy(
            message="Process running",
            python_version=sys.version,
            platform=platform.platform(),
            pid=process.pid,
            rss_mb=round(process.memory_info().rss / (1024 * 1024), 1),
            system_memory_percent=memory.percent,
        )


@register_check(category="startup", required_for_ready=False)
class ConfigCheck(HealthCheckPlugin):
    """
    Configuration health check.

    Reports which Cosmos DB variables the running configuration lacks. Does
    not check whether the values work; the store and graph checks do that.
    Missing values are degraded, not unhealthy: they only fail the
    operations that use them.
    """

    name = "config"
    timeout_seconds = 1.0

    async def check(self) -> HealthCheckResult:
        config = get_config()
        missing = config.graph.missing + config.documents.missing

        if missing:
            return HealthCheckResult.degraded(
                message=f"Missing config: {', '.join(missing)}",
                missing=missing,
            )

        return HealthCheckResult.healthy(message="All Cosmos DB config present")


__all__ = [
    "ProcessCheck",
    "ConfigCheck",
]
