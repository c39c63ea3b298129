# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Core module initialization
# PURPOSE: Export driver contracts and models
# CREATED: 19 OCT 2026
# ============================================================================

from core.contracts import GraphConnection, GraphConnectionFactory
from core.models import QueryRequest, QueryResult, ResultKind, StoreHandle

__all__ = [
    # Contracts
    "GraphConnection",
    "GraphConnectionFactory",
    # Models
    "QueryRequest",
    "QueryResult",
    "ResultKind",
    "StoreHandle",
]
