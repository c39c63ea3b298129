# ============================================================================
# API MODULE
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Core - FastAPI routes
# PURPOSE: HTTP API for graph queries and document stores
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Module

FastAPI routes for the Cosmos gateway.
"""

from .routes import router, set_services
from .schemas import (
    QueryRequest,
    QueryResult,
    StoreResponse,
    StoreListResponse,
)

__all__ = [
    "router",
    "set_services",
    "QueryRequest",
    "QueryResult",
    "StoreResponse",
    "StoreListResponse",
]
