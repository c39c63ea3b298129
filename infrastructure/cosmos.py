# ============================================================================
# COSMOS DB DOCUMENT STORE INFRASTRUCTURE
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Infrastructure - Cosmos DB SQL API bootstrap
# PURPOSE: Ensure database and container exist, return a store handle
# CREATED: 19 OCT 2026
# ============================================================================
"""
Cosmos DB Document Store Infrastructure

Bootstraps a document store in a fixed order:
1. Build an async CosmosClient bound to (endpoint, credential)
2. create_database_if_not_exists(database_name)
3. create_container_if_not_exists(container_name, partition key "/api_id")
4. Wrap client + names in a StoreHandle

Both provisioning calls are idempotent on the service side, so running the
bootstrap again against existing resources is a no-op. Nothing here catches
errors: a failed bootstrap aborts startup.

Usage:
    handle = await initialize_document_store(
        endpoint="https://myaccount.documents.azure.com:443/",
        key=primary_key,
        database_name="gateway",
        container_name="characters",
    )
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from azure.cosmos import PartitionKey
from azure.cosmos.aio import CosmosClient

from core.contracts import DocumentClient
from core.models import StoreHandle

logger = logging.getLogger(__name__)


# Partition key shared by every bootstrapped container
PARTITION_KEY_PATH = "/api_id"


def build_cosmos_client(endpoint: str, credential: Any) -> CosmosClient:
    """
    Build an async Cosmos client.

    Args:
        endpoint: Account endpoint URL
        credential: Account key or an azure-identity async credential
    """
    return CosmosClient(endpoint, credential=credential)


async def initialize_document_store(
    endpoint: str,
    key: Any,
    database_name: str,
    container_name: str,
    *,
    client_factory: Callable[[str, Any], DocumentClient] = build_cosmos_client,
    timeout: Optional[float] = None,
) -> StoreHandle:
    """
    Ensure the database and container exist and return a handle to them.

    Args:
        endpoint: Account endpoint URL
        key: Account key (or azure-identity credential)
        database_name: Database to create if absent
        container_name: Container to create if absent
        client_factory: Builds the document client (injectable for tests)
        timeout: Optional deadline in seconds for the provisioning calls

    Returns:
        StoreHandle bound to the client and names

    Raises:
        Any driver exception, unchanged. asyncio.TimeoutError if timeout expires.
        The client is closed before a provisioning failure propagates.
    """
    client = client_factory(endpoint, key)

    async def provision() -> None:
        database = await client.create_database_if_not_exists(id=database_name)
        logger.debug(f"Database ready: {database_name}")
        await database.create_container_if_not_exists(
            id=container_name,
            partition_key=PartitionKey(path=PARTITION_KEY_PATH),
        )
        logger.debug(f"Container ready: {database_name}/{container_name}")

    try:
        if timeout is None:
            await provision()
        else:
            await asyncio.wait_for(provision(), timeout=timeout)
    except BaseException:
        await client.close()
        raise

    logger.info(f"Document store initialized: {database_name}/{container_name}")
    return StoreHandle(
        database_name=database_name,
        container_name=container_name,
        client=client,
    )


__all__ = [
    "PARTITION_KEY_PATH",
    "build_cosmos_client",
    "initialize_document_store",
]
