# ============================================================================
# SERVICES MODULE
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Core - Service layer
# PURPOSE: Graph query pass-through and document store lifecycle
# CREATED: 19 OCT 2026
# ============================================================================
"""
Services Module

Usage:
    from services import GraphQueryService, bootstrap_document_stores

    registry = await bootstrap_document_stores(config.documents)
    service = GraphQueryService(connection_factory)
    result = await service.submit("g.V().count()")
"""

from .graph_query_service import GraphQueryService
from .document_store_service import (
    DocumentStoreRegistry,
    bootstrap_document_stores,
    get_store_registry,
    close_document_stores,
)

__all__ = [
    "GraphQueryService",
    "DocumentStoreRegistry",
    "bootstrap_document_stores",
    "get_store_registry",
    "close_document_stores",
]
