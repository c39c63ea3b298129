# ============================================================================
# DRIVER CONTRACTS
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Foundation - Driver boundaries
# PURPOSE: Capability interfaces for the graph and document drivers
# CREATED: 19 OCT 2026
# ============================================================================
"""
Driver contracts for the gateway.

The services depend on these capabilities rather than on concrete SDK
classes, so any driver (or a test fake) that exposes the same operations
can be plugged in:

- GraphConnection: one submit operation plus close
- GraphConnectionFactory: produces a fresh GraphConnection on demand
- DocumentDatabase / DocumentClient: the create-if-absent operations
"""

from typing import Any, Awaitable, Callable, Protocol, runtime_checkable


@runtime_checkable
class GraphConnection(Protocol):
    """A single-use connection to a graph database."""

    async def submit_async(self, query: str) -> Any:
        """Submit a query and return the driver's deserialized result."""
        ...

    async def close(self) -> None:
        """Release the connection."""
        ...


# Produces a fresh, open connection for each call
GraphConnectionFactory = Callable[[], Awaitable[GraphConnection]]


class DocumentDatabase(Protocol):
    """Database-level operations used by the bootstrapper."""

    async def create_container_if_not_exists(self, id: str, partition_key: Any, **kwargs) -> Any:
        ...


class DocumentClient(Protocol):
    """Account-level operations used by the bootstrapper."""

    async def create_database_if_not_exists(self, id: str, **kwargs) -> DocumentDatabase:
        ...

    def get_database_client(self, database: str) -> Any:
        ...

    async def close(self) -> None:
        ...


__all__ = [
    "GraphConnection",
    "GraphConnectionFactory",
    "DocumentDatabase",
    "DocumentClient",
]
