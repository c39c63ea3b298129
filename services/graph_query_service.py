# ============================================================================
# GRAPH QUERY SERVICE
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Core - Graph query pass-through
# PURPOSE: Submit opaque queries to the graph database
# CREATED: 19 OCT 2026
# ============================================================================
"""
Graph Query Service

Forwards a query string to the graph driver and returns the driver's
result untouched. The service does no validation, rewriting, retry or
result shaping.

Connection lifecycle per submit():
    Idle -> Connecting -> Submitting -> Completed | Failed

A fresh connection is obtained from the injected factory for every call
and closed on every exit path (success, driver error, timeout, task
cancellation). Connections are never shared between calls.

Driver errors are logged and re-raised as the same exception object.

Usage:
    from infrastructure import GremlinConnectionFactory
    from services import GraphQueryService

    service = GraphQueryService(GremlinConnectionFactory(config.graph))
    result = await service.submit("g.V().count()")
"""

import asyncio
import logging
import time
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from core.contracts import GraphConnection, GraphConnectionFactory

logger = logging.getLogger(__name__)


class GraphQueryService:
    """Single-operation gateway to a graph database."""

    def __init__(self, connection_factory: GraphConnectionFactory):
        """
        Initialize graph query service.

        Args:
            connection_factory: Async callable returning a fresh GraphConnection
        """
        self._connection_factory = connection_factory
        self._open_connections = 0
        self._submitted = 0
        self._failed = 0

    @asynccontextmanager
    async def _scoped_connection(self) -> AsyncIterator[GraphConnection]:
        """Acquire a connection owned by one submission, always released."""
        connection = await self._connection_factory()
        self._open_connections += 1
        try:
            yield connection
        except BaseException:
            self._open_connections -= 1
            # The submission error is the one the caller sees
            try:
                await connection.close()
            except Exception as close_error:
                logger.warning(
                    f"Graph connection close failed after query error: "
                    f"{type(close_error).__name__}: {close_error}"
                )
            raise
        else:
            self._open_connections -= 1
            await connection.close()

    async def _submit_scoped(self, query: str) -> Any:
        async with self._scoped_connection() as connection:
            return await connection.submit_async(query)

    async def submit(self, query: str, timeout: Optional[float] = None) -> Any:
        """
        Submit a query and return the driver's deserialized result.

        Args:
            query: Query text, passed verbatim to the driver
            timeout: Optional deadline in seconds covering connect + submit.
                     None (default) waits for the driver indefinitely.

        Returns:
            Whatever the driver returned, unchanged

        Raises:
            Any driver exception, unchanged. asyncio.TimeoutError if timeout expires.
        """
        self._submitted += 1
        start_time = time.monotonic()

        try:
            if timeout is None:
                result = await self._submit_scoped(query)
            else:
                result = await asyncio.wait_for(self._submit_scoped(query), timeout=timeout)
        except Exception as e:
            self._failed += 1
            logger.error(f"Graph query failed: {type(e).__name__}: {e}")
            raise

        duration_ms = (time.monotonic() - start_time) * 1000
        logger.debug(f"Graph query completed in {duration_ms:.1f}ms")
        return result

    @property
    def open_connections(self) -> int:
        """Connections currently held by in-flight submissions."""
        return self._open_connections

    @property
    def stats(self) -> Dict[str, int]:
        return {
            "submitted": self._submitted,
            "failed": self._failed,
            "open_connections": self._open_connections,
        }


__all__ = ["GraphQueryService"]
