# ============================================================================
# INFRASTRUCTURE MODULE
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Infrastructure - Cosmos DB drivers
# PURPOSE: Gremlin connections and document store bootstrap
# CREATED: 19 OCT 2026
# ============================================================================
"""
Infrastructure module for Cosmos Gateway.

Provides:
- GremlinConnectionFactory: fresh Gremlin API connection per query
- initialize_document_store: create-if-absent bootstrap for SQL API stores

Usage:
    from infrastructure import GremlinConnectionFactory, initialize_document_store

    factory = GremlinConnectionFactory(config.graph)
    handle = await initialize_document_store(endpoint, key, "db", "container")
"""

from infrastructure.gremlin import (
    GREMLIN_PORT,
    GremlinServerSettings,
    GremlinConnection,
    GremlinConnectionFactory,
    build_gremlin_url,
)
from infrastructure.cosmos import (
    PARTITION_KEY_PATH,
    build_cosmos_client,
    initialize_document_store,
)

__all__ = [
    # Gremlin
    'GREMLIN_PORT',
    'GremlinServerSettings',
    'GremlinConnection',
    'GremlinConnectionFactory',
    'build_gremlin_url',
    # Cosmos document stores
    'PARTITION_KEY_PATH',
    'build_cosmos_client',
    'initialize_document_store',
]
