# ============================================================================
# HEALTH CHECK EXECUTOR
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Infrastructure - Parallel health check execution
# PURPOSE: Execute health checks with timeouts and aggregation
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Executor

Execution Strategy:
1. Group checks by priority
2. Execute each priority tier sequentially
3. Within a tier, execute checks in parallel, each under its own timeout
4. Aggregate with 'worst wins'

A check that raises or times out is reported as unhealthy; the executor
itself never raises.
"""

import asyncio
import logging
import time
from itertools import groupby
from typing import Dict, List, Optional

from health.core import (
    HealthStatus,
    HealthCheckResult,
    HealthCheckPlugin,
    AggregatedHealthResult,
)
from health.registry import HealthCheckRegistry, get_registry

logger = logging.getLogger(__name__)


class HealthCheckExecutor:
    """Executes health checks tier by tier with per-check timeouts."""

    def __init__(
        self,
        registry: Optional[HealthCheckRegistry] = None,
        overall_timeout: float = 60.0,
    ):
        """
        Initialize executor.

        Args:
            registry: Health check registry (uses global if None)
            overall_timeout: Max total execution time; later tiers are skipped
        """
        self.registry = registry or get_registry()
        self.overall_timeout = overall_timeout

    async def execute_all(self) -> AggregatedHealthResult:
        """Execute all registered health checks."""
        start_time = time.monotonic()
        results: Dict[str, HealthCheckResult] = {}

        checks = self.registry.get_checks_by_priority()
        for _, tier in groupby(checks, key=lambda c: c.priority):
            tier_checks = list(tier)

            if time.monotonic() - start_time >= self.overall_timeout:
                logger.warning(
                    f"Health check overall timeout ({self.overall_timeout}s) exceeded"
                )
                for check in tier_checks:
                    results[check.name] = HealthCheckResult.unhealthy(
                        "Skipped: overall timeout exceeded"
                    )
                continue

            results.update(await self._execute_tier(tier_checks))

        return self._aggregate(results, start_time)

    async def execute_required(self) -> AggregatedHealthResult:
        """Execute only checks required for /readyz, all in parallel."""
        start_time = time.monotonic()
        results = await self._execute_tier(self.registry.get_required_checks())
        return self._aggregate(results, start_time)

    async def execute_single(self, name: str) -> Optional[HealthCheckResult]:
        """Execute a single check by name."""
        check = self.registry.get(name)
        if check is None:
            return None
        return await self._execute_check(check)

    async def _execute_tier(
        self,
        checks: List[HealthCheckPlugin],
    ) -> Dict[str, HealthCheckResult]:
        if not checks:
            return {}

        outcomes = await asyncio.gather(
            *(self._execute_check(check) for check in checks)
        )
        return {check.name: result for check, result in zip(checks, outcomes)}

    async def _execute_check(self, check: HealthCheckPlugin) -> HealthCheckResult:
        """Execute a single check with timeout."""
        start_time = time.monotonic()

        try:
            result = await asyncio.wait_for(check.check(), timeout=check.timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(
                f"Health check {check.name} timed out after {check.timeout_seconds}s"
            )
            result = HealthCheckResult.unhealthy(f"Timeout after {check.timeout_seconds}s")
        except Exception as e:
            logger.error(f"Health check {check.name} failed: {e}")
            result = HealthCheckResult.from_exception(e)

        result.duration_ms = (time.monotonic() - start_time) * 1000
        logger.debug(
            f"Health check {check.name}: {result.status.value} ({result.duration_ms:.1f}ms)"
        )
        return result

    @staticmethod
    def _aggregate(
        results: Dict[str, HealthCheckResult],
        start_time: float,
    ) -> AggregatedHealthResult:
        return AggregatedHealthResult(
            status=HealthStatus.aggregate([r.status for r in results.values()]),
            checks=results,
            total_duration_ms=(time.monotonic() - start_time) * 1000,
        )


__all__ = [
    "HealthCheckExecutor",
]
