# ============================================================================
# DOCUMENT STORE HEALTH CHECKS
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Infrastructure - Document store readiness
# PURPOSE: Gate readiness on a completed document store bootstrap
# CREATED: 19 OCT 2026
# ============================================================================
"""
Document Store Health Checks (priority 20):
- DocumentStoresCheck: every configured store bootstrapped
"""

import logging

from health.core import HealthCheckPlugin, HealthCheckResult
from health.registry import register_check
from services.document_store_service import get_store_registry

logger = logging.getLogger(__name__)


@register_check(category="document_store")
class DocumentStoresCheck(HealthCheckPlugin):
    """Unhealthy until the startup bootstrap has completed."""

    name = "document_stores"
    timeout_seconds = 2.0
    required_for_ready = True

    async def check(self) -> HealthCheckResult:
        registry = get_store_registry()

        if not registry.is_ready:
            return HealthCheckResult.unhealthy(
                message="Document stores not bootstrapped",
                registered=registry.names(),
            )

        return HealthCheckResult.healthy(
            message=f"{len(registry)} document store(s) ready",
            stores=registry.names(),
        )


__all__ = ["DocumentStoresCheck"]
