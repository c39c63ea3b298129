# ============================================================================
# MODELS MODULE
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Model exports
# PURPOSE: Central export point for gateway models
# CREATED: 19 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point
"""

from core.models.query import QueryRequest, QueryResult, ResultKind
from core.models.store import StoreHandle

__all__ = [
    # Query
    "QueryRequest",
    "QueryResult",
    "ResultKind",
    # Store
    "StoreHandle",
]
