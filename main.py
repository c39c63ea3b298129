# ============================================================================
# COSMOS GATEWAY - MAIN APPLICATION
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Core - FastAPI application entry point
# PURPOSE: Startup sequencing, route wiring, health checks
# CREATED: 19 OCT 2026
# ============================================================================
"""
Cosmos Gateway Main Application

FastAPI application that:
1. Bootstraps the configured Cosmos DB document stores before serving
2. Exposes a pass-through graph query endpoint over the Gremlin API
3. Serves liveness/readiness/health probes

Startup is fatal if any document store fails to bootstrap.

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8000
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from __version__ import __version__, BUILD_DATE, EPOCH
from core.config import get_config
from infrastructure import GremlinConnectionFactory
from services import (
    GraphQueryService,
    bootstrap_document_stores,
    close_document_stores,
)
from api.routes import router, set_services

# Health check system
from health import health_router, get_registry
from health.checks.graph import set_graph_service

# Configure logging using our structured logging system
from core.logging import configure_logging, get_logger, log_checkpoint

configure_logging(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    json_output=os.environ.get("LOG_FORMAT", "").lower() == "json",
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Bootstraps document stores and wires services on startup, closes the
    document clients on shutdown.
    """
    logger.info(f"Starting Cosmos Gateway v{__version__} (Epoch {EPOCH}, Build {BUILD_DATE})")
    config = get_config()

    try:
        # Document stores: one long-lived client per store, ready before traffic
        store_registry = await bootstrap_document_stores(config.documents)
        log_checkpoint("document_stores_ready", {"stores": store_registry.names()})

        # Graph: a fresh Gremlin connection per query
        graph_service = GraphQueryService(GremlinConnectionFactory(config.graph))
        logger.info("Graph query service initialized")

        set_services(graph_service=graph_service, store_registry=store_registry)

        # Initialize health checks
        set_graph_service(graph_service)
        import health.checks  # Register all health check plugins
        get_registry().mark_initialized()
        logger.info(f"Health checks initialized ({len(get_registry())} checks registered)")
    except Exception as e:
        logger.error(f"Startup failed: {type(e).__name__}: {e}")
        await close_document_stores()
        raise

    yield

    logger.info("Shutting down Cosmos Gateway...")
    await close_document_stores()
    logger.info("Cosmos Gateway stopped")


app = FastAPI(
    title="Cosmos Gateway",
    description="Graph query and document store gateway for Azure Cosmos DB",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Health check routes (no prefix - /livez, /readyz, /health)
app.include_router(health_router)

app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "Cosmos Gateway",
        "version": __version__,
        "epoch": EPOCH,
        "build_date": BUILD_DATE,
        "status": "running",
        "docs": "/docs",
    }


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=os.environ.get("RELOAD", "false").lower() == "true",
    )
