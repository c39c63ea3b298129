# ============================================================================
# API SCHEMAS
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Core - Request/Response schemas
# PURPOSE: Pydantic models for API validation
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Schemas

Request and response models for the API. Graph query request/result
models live in core.models and are re-exported here.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from core.models import QueryRequest, QueryResult


# ============================================================================
# RESPONSE SCHEMAS
# ============================================================================

class StoreResponse(BaseModel):
    """A bootstrapped document store."""
    name: str
    database_name: str
    container_name: str


class StoreListResponse(BaseModel):
    """Registered document stores."""
    stores: List[str]
    ready: bool


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str
    error_type: Optional[str] = Field(None, description="Driver exception type, when relayed")


__all__ = [
    "QueryRequest",
    "QueryResult",
    "StoreResponse",
    "StoreListResponse",
    "ErrorResponse",
]
