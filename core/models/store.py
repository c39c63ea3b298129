# ============================================================================
# STORE HANDLE
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Core - Document store handle
# PURPOSE: Immutable handle to a bootstrapped database/container pair
# CREATED: 19 OCT 2026
# ============================================================================
"""
Store Handle

A StoreHandle is produced once per bootstrapped store at startup and lives
for the rest of the process. The client it references is shared read-only by
every caller; the handle itself is never mutated.
"""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class StoreHandle:
    """Database + container names bound to an initialized document client."""

    database_name: str
    container_name: str
    client: Any = field(repr=False, compare=False)

    def get_container_client(self) -> Any:
        """Container proxy for document operations."""
        return (
            self.client
            .get_database_client(self.database_name)
            .get_container_client(self.container_name)
        )

    async def close(self) -> None:
        """Close the underlying document client."""
        await self.client.close()

    def to_dict(self) -> Dict[str, str]:
        return {
            "database_name": self.database_name,
            "container_name": self.container_name,
        }


__all__ = ["StoreHandle"]
