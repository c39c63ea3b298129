# ============================================================================
# HEALTH CHECK PLUGINS
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Infrastructure - Health check implementations
# PURPOSE: Specific health checks for gateway components
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Plugins

Startup Checks (priority 10):
- process: Basic process health
- config: Cosmos DB environment variables present

Document Store Checks (priority 20):
- document_stores: Startup bootstrap completed (gates /readyz)

Graph Checks (priority 30):
- gremlin: Gremlin API answers a trivial traversal

Import this module to register all checks:
    import health.checks
"""

from health.checks.startup import ProcessCheck, ConfigCheck
from health.checks.stores import DocumentStoresCheck
from health.checks.graph import GremlinCheck, set_graph_service

__all__ = [
    "ProcessCheck",
    "ConfigCheck",
    "DocumentStoresCheck",
    "GremlinCheck",
    "set_graph_service",
]
