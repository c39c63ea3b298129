# ============================================================================
# GREMLIN INFRASTRUCTURE
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Infrastructure - Cosmos DB Gremlin API driver
# PURPOSE: Build single-use Gremlin connections for the graph gateway
# CREATED: 19 OCT 2026
# ============================================================================
"""
Gremlin Infrastructure

Adapts gremlinpython to the GraphConnection contract:
- GremlinServerSettings: fixed construction parameters for Cosmos DB
- GremlinConnection: one driver client, one submit operation, close
- GremlinConnectionFactory: builds a fresh GremlinConnection per call

Cosmos DB Gremlin accounts only accept GraphSON v2 over TLS on port 443,
and authenticate with the resource path "/dbs/{db}/colls/{graph}" as the
username and the account key as the password.

gremlinpython drives its own event loop inside the client, so every
blocking driver call is run in a worker thread.

Usage:
    factory = GremlinConnectionFactory(get_config().graph)
    connection = await factory()
    try:
        result = await connection.submit_async("g.V().count()")
    finally:
        await connection.close()
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from gremlin_python.driver import client as gremlin_client
from gremlin_python.driver import serializer

from core.config import GraphStoreConfig

logger = logging.getLogger(__name__)


GREMLIN_PORT = 443
TRAVERSAL_SOURCE = "g"


def build_gremlin_url(endpoint: str, port: int = GREMLIN_PORT, enable_ssl: bool = True) -> str:
    """
    Build the websocket URL for a Gremlin endpoint.

    Accepts a bare host ("acct.gremlin.cosmos.azure.com") or a URL that
    already carries a scheme, port or trailing slash.
    """
    host = endpoint.strip()
    for prefix in ("wss://", "ws://", "https://", "http://"):
        if host.startswith(prefix):
            host = host[len(prefix):]
            break
    host = host.rstrip("/")
    if ":" in host:
        host = host.split(":", 1)[0]

    scheme = "wss" if enable_ssl else "ws"
    return f"{scheme}://{host}:{port}/"


@dataclass(frozen=True)
class GremlinServerSettings:
    """Construction parameters for a Cosmos DB Gremlin client."""
    url: str
    username: str
    password: str = field(repr=False)
    traversal_source: str = TRAVERSAL_SOURCE

    @classmethod
    def from_config(cls, config: GraphStoreConfig) -> "GremlinServerSettings":
        """
        Derive settings from configuration.

        Raises:
            ConfigurationError: If any graph store value is missing
        """
        endpoint = config.require("endpoint")
        primary_key = config.require("primary_key")
        database = config.require("database_name")
        container = config.require("container_name")

        return cls(
            url=build_gremlin_url(endpoint),
            username=f"/dbs/{database}/colls/{container}",
            password=primary_key,
        )


class GremlinConnection:
    """
    A single gremlinpython client used for one submission.

    Not shared: the gateway creates one per query and closes it afterwards.
    """

    def __init__(self, driver_client: Any):
        self._client = driver_client
        self._closed = False

    async def submit_async(self, query: str) -> Any:
        """Submit a query and return the fully materialized result list."""
        return await asyncio.to_thread(self._submit, query)

    def _submit(self, query: str) -> Any:
        result_set = self._client.submit(query)
        return result_set.all().result()

    async def close(self) -> None:
        """Close the driver client. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        await asyncio.to_thread(self._client.close)

    @property
    def closed(self) -> bool:
        return self._closed


class GremlinConnectionFactory:
    """
    Produces a fresh GremlinConnection on every call.

    Settings are resolved on each call, so a missing configuration value
    raises ConfigurationError at the first query rather than at startup.
    """

    def __init__(
        self,
        config: GraphStoreConfig,
        client_factory: Optional[Callable[..., Any]] = None,
    ):
        self.config = config
        self._client_factory = client_factory

    def server_settings(self) -> GremlinServerSettings:
        return GremlinServerSettings.from_config(self.config)

    def _build_client(self, settings: GremlinServerSettings) -> Any:
        client_factory = self._client_factory or gremlin_client.Client
        return client_factory(
            settings.url,
            settings.traversal_source,
            username=settings.username,
            password=settings.password,
            message_serializer=serializer.GraphSONSerializersV2d0(),
        )

    async def __call__(self) -> GremlinConnection:
        settings = self.server_settings()
        # The handshake thread cannot be interrupted; a caller that gives up
        # hands the finished client to _close_abandoned_client instead.
        build = asyncio.ensure_future(asyncio.to_thread(self._build_client, settings))
        try:
            driver_client = await asyncio.shield(build)
        except asyncio.CancelledError:
            build.add_done_callback(_close_abandoned_client)
            raise
        logger.debug(f"Opened Gremlin connection to {settings.url} as {settings.username}")
        return GremlinConnection(driver_client)


def _close_abandoned_client(build: "asyncio.Future[Any]") -> None:
    if build.cancelled() or build.exception() is not None:
        return
    logger.debug("Closing Gremlin client built after its caller was cancelled")
    asyncio.get_running_loop().run_in_executor(None, build.result().close)


__all__ = [
    "GREMLIN_PORT",
    "TRAVERSAL_SOURCE",
    "build_gremlin_url",
    "GremlinServerSettings",
    "GremlinConnection",
    "GremlinConnectionFactory",
]
