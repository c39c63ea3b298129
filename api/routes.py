# ============================================================================
# API ROUTES
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Core - FastAPI route definitions
# PURPOSE: HTTP endpoints for graph queries and document stores
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Routes

ENDPOINT SUMMARY:
-----------------
| Endpoint              | Behavior                                 |
|-----------------------|------------------------------------------|
| POST /graph/query     | Submit a query, return the driver result |
| GET  /stores          | List bootstrapped document stores        |
| GET  /stores/{name}   | Database/container of one store          |

Error mapping for /graph/query:
    ConfigurationError   -> 500 (graph store not configured)
    asyncio.TimeoutError -> 504
    any driver error     -> 502, with the driver's exception type and message
"""

import asyncio
import logging
import uuid
from typing import Optional

from fastapi import APIRouter, HTTPException, Depends, Header
from fastapi.responses import JSONResponse

from core.config import ConfigurationError
from core.logging import log_context
from .schemas import (
    QueryRequest,
    QueryResult,
    StoreResponse,
    StoreListResponse,
    ErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================
# These will be set by the main app at startup

_graph_service = None
_store_registry = None


def set_services(graph_service, store_registry):
    """Set service instances for dependency injection."""
    global _graph_service, _store_registry
    _graph_service = graph_service
    _store_registry = store_registry


def get_graph_service():
    if _graph_service is None:
        raise HTTPException(500, "Graph service not initialized")
    return _graph_service


def get_store_registry():
    if _store_registry is None:
        raise HTTPException(500, "Document stores not initialized")
    return _store_registry


# ============================================================================
# GRAPH QUERIES
# ============================================================================

@router.post(
    "/graph/query",
    response_model=QueryResult,
    responses={502: {"model": ErrorResponse}, 504: {"model": ErrorResponse}},
)
async def submit_graph_query(
    request: QueryRequest,
    x_request_id: Optional[str] = Header(None),
    graph_service=Depends(get_graph_service),
):
    """
    Submit a graph query.

    The query text goes to the driver verbatim; the driver's result is
    returned tagged with its shape.
    """
    request_id = x_request_id or uuid.uuid4().hex[:12]

    with log_context(request_id=request_id, operation="graph.query"):
        try:
            result = await graph_service.submit(
                request.query,
                timeout=request.timeout_seconds,
            )
        except ConfigurationError as e:
            raise HTTPException(500, str(e))
        except asyncio.TimeoutError:
            raise HTTPException(504, f"Graph query timed out after {request.timeout_seconds}s")
        except Exception as e:
            return JSONResponse(
                status_code=502,
                content=ErrorResponse(
                    detail=f"Graph query failed: {e}",
                    error_type=type(e).__name__,
                ).model_dump(),
            )

    return QueryResult.from_driver(result)


# ============================================================================
# DOCUMENT STORES
# ============================================================================

@router.get("/stores", response_model=StoreListResponse)
async def list_stores(registry=Depends(get_store_registry)):
    """List bootstrapped document stores."""
    return StoreListResponse(stores=registry.names(), ready=registry.is_ready)


@router.get("/stores/{name}", response_model=StoreResponse)
async def get_store(name: str, registry=Depends(get_store_registry)):
    """Get the database and container behind a store."""
    try:
        handle = registry.get(name)
    except KeyError:
        raise HTTPException(404, f"Document store not found: {name}")

    return StoreResponse(name=name, **handle.to_dict())
