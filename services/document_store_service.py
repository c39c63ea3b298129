# ============================================================================
# DOCUMENT STORE SERVICE
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Core - Document store registry and startup bootstrap
# PURPOSE: Hold one long-lived StoreHandle per registered store
# CREATED: 19 OCT 2026
# ============================================================================
"""
Document Store Service

Startup phase for document-backed stores. Each configured store name is
bootstrapped once (database + container created if absent) and its handle
registered for the lifetime of the process.

The registry is marked ready only after every store bootstrapped. A failed
bootstrap propagates to the caller and leaves the registry not ready, so
the /readyz probe keeps traffic away.

Usage:
    registry = await bootstrap_document_stores(config.documents)
    handle = registry.get("characters")
    container = handle.get_container_client()
"""

import logging
from typing import Awaitable, Callable, Dict, Iterable, List, Optional

from core.config import DocumentStoreConfig
from core.logging import log_context, log_checkpoint
from core.models import StoreHandle
from infrastructure.cosmos import initialize_document_store

logger = logging.getLogger(__name__)


Bootstrapper = Callable[..., Awaitable[StoreHandle]]


class DocumentStoreRegistry:
    """
    Registry of bootstrapped document stores.

    Handles are registered at startup and read concurrently afterwards.
    """

    def __init__(self):
        self._handles: Dict[str, StoreHandle] = {}
        self._ready = False

    def register(self, name: str, handle: StoreHandle) -> None:
        """
        Register a store handle.

        Raises:
            ValueError: If a store with the same name is already registered
        """
        if name in self._handles:
            raise ValueError(f"Document store already registered: {name}")
        self._handles[name] = handle
        logger.debug(f"Registered document store: {name}")

    def get(self, name: str) -> StoreHandle:
        """
        Get a store handle by name.

        Raises:
            KeyError: If no store with that name is registered
        """
        try:
            return self._handles[name]
        except KeyError:
            raise KeyError(f"Document store not registered: {name}") from None

    def names(self) -> List[str]:
        return list(self._handles)

    def mark_ready(self) -> None:
        self._ready = True

    @property
    def is_ready(self) -> bool:
        """True once every configured store bootstrapped."""
        return self._ready

    async def close_all(self) -> None:
        """Close every registered client and empty the registry."""
        for name, handle in list(self._handles.items()):
            await handle.close()
            logger.debug(f"Closed document store: {name}")
        self._handles.clear()
        self._ready = False

    def __len__(self) -> int:
        return len(self._handles)

    def __contains__(self, name: str) -> bool:
        return name in self._handles


async def bootstrap_document_stores(
    config: DocumentStoreConfig,
    store_names: Optional[Iterable[str]] = None,
    registry: Optional[DocumentStoreRegistry] = None,
    bootstrapper: Bootstrapper = initialize_document_store,
    timeout: Optional[float] = None,
) -> DocumentStoreRegistry:
    """
    Bootstrap every store, one after another, and register the handles.

    Each store name doubles as its container name; all stores share the
    configured database.

    Args:
        config: Document store configuration
        store_names: Stores to bootstrap (defaults to config.stores)
        registry: Registry to fill (defaults to the global registry)
        bootstrapper: Store initializer (injectable for tests)
        timeout: Optional per-store provisioning deadline in seconds

    Returns:
        The filled registry, marked ready

    Raises:
        ConfigurationError: If account, key or database name is missing
        Any driver exception, unchanged. Stores opened before the failure
        are closed first.
    """
    if registry is None:
        registry = get_store_registry()
    names = list(config.stores if store_names is None else store_names)

    if names:
        endpoint = config.require("account")
        database_name = config.require("database_name")
        credential = config.get_credential()

    try:
        for name in names:
            with log_context(store=name, database=database_name, container=name):
                handle = await bootstrapper(
                    endpoint,
                    credential,
                    database_name,
                    name,
                    timeout=timeout,
                )
                registry.register(name, handle)
                log_checkpoint("store_bootstrapped", logger=logger)
    except BaseException:
        logger.error(f"Document store bootstrap failed; closing {len(registry)} opened store(s)")
        await registry.close_all()
        raise

    registry.mark_ready()
    logger.info(f"Document stores ready ({len(names)} bootstrapped)")
    return registry


# ============================================================================
# GLOBAL REGISTRY
# ============================================================================

_registry: Optional[DocumentStoreRegistry] = None


def get_store_registry() -> DocumentStoreRegistry:
    """Get the global document store registry."""
    global _registry
    if _registry is None:
        _registry = DocumentStoreRegistry()
    return _registry


async def close_document_stores() -> None:
    """Close the global registry's clients."""
    global _registry
    if _registry is not None:
        await _registry.close_all()
        _registry = None
        logger.info("Document stores closed")


__all__ = [
    "DocumentStoreRegistry",
    "bootstrap_document_stores",
    "get_store_registry",
    "close_document_stores",
]
