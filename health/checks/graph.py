# ============================================================================
# GRAPH HEALTH CHECKS
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Infrastructure - Gremlin API reachability
# PURPOSE: Round-trip a trivial traversal through the graph service
# CREATED: 19 OCT 2026
# ============================================================================
"""
Graph Health Checks (priority 30):
- GremlinCheck: submit a one-vertex count through the graph service

Not required for readiness: graph queries fail individually when the
Gremlin API is down, document stores keep working.
"""

import logging

from core.config import ConfigurationError
from health.core import HealthCheckPlugin, HealthCheckResult
from health.registry import register_check

logger = logging.getLogger(__name__)

PROBE_QUERY = "g.V().limit(1).count()"

# Global reference to the graph service (set by main app)
_graph_service = None


def set_graph_service(graph_service):
    """Set graph service reference for health checks."""
    global _graph_service
    _graph_service = graph_service


@register_check(category="graph", required_for_ready=False)
class GremlinCheck(HealthCheckPlugin):
    """Gremlin API health check."""

    name = "gremlin"
    timeout_seconds = 10.0

    async def check(self) -> HealthCheckResult:
        if _graph_service is None:
            return HealthCheckResult.unhealthy(
                message="Graph service not initialized",
            )

        try:
            result = await _graph_service.submit(PROBE_QUERY, timeout=self.timeout_seconds)
        except ConfigurationError as e:
            return HealthCheckResult.degraded(message=str(e))
        except Exception as e:
            return HealthCheckResult.unhealthy(
                message=f"Gremlin query failed: {e}",
                exception_type=type(e).__name__,
            )

        return HealthCheckResult.healthy(
            message="Gremlin API reachable",
            probe_result=result,
        )


__all__ = ["GremlinCheck", "set_graph_service"]
