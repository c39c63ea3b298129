# ============================================================================
# GREMLIN INFRASTRUCTURE TESTS
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Tests - Gremlin driver adapter
# PURPOSE: Verify connection parameters and driver call mapping
# CREATED: 19 OCT 2026
# ============================================================================
"""
Gremlin Infrastructure Tests

Uses unittest.mock in place of gremlinpython's Client; no real
websocket traffic.

Run with:
    pytest tests/test_gremlin.py -v
"""

import asyncio
import time
import pytest
from unittest.mock import MagicMock, patch

from gremlin_python.driver import serializer

from core.config import ConfigurationError, GraphStoreConfig
from infrastructure.gremlin import (
    GREMLIN_PORT,
    GremlinConnection,
    GremlinConnectionFactory,
    GremlinServerSettings,
    build_gremlin_url,
)
from services.graph_query_service import GraphQueryService


def _config(**overrides):
    values = dict(
        endpoint="acct.gremlin.cosmos.azure.com",
        primary_key="secret-key",
        database_name="graphdb",
        container_name="people",
    )
    values.update(overrides)
    return GraphStoreConfig(**values)


def _mock_driver_client(result=None, error=None):
    driver_client = MagicMock()
    if error is not None:
        driver_client.submit.side_effect = error
    else:
        driver_client.submit.return_value.all.return_value.result.return_value = result
    return driver_client


# ============================================================================
# URL AND SETTINGS
# ============================================================================

class TestServerSettings:
    """Tests for fixed construction parameters."""

    @pytest.mark.parametrize("endpoint", [
        "acct.gremlin.cosmos.azure.com",
        "wss://acct.gremlin.cosmos.azure.com:443/",
        "https://acct.gremlin.cosmos.azure.com/",
        " acct.gremlin.cosmos.azure.com:443 ",
    ])
    def test_url_normalized_to_tls_on_443(self, endpoint):
        assert build_gremlin_url(endpoint) == "wss://acct.gremlin.cosmos.azure.com:443/"

    def test_url_without_ssl(self):
        assert build_gremlin_url("localhost", port=8182, enable_ssl=False) == "ws://localhost:8182/"

    def test_port_is_443(self):
        assert GREMLIN_PORT == 443

    def test_username_is_resource_path(self):
        settings = GremlinServerSettings.from_config(_config())

        assert settings.url == "wss://acct.gremlin.cosmos.azure.com:443/"
        assert settings.username == "/dbs/graphdb/colls/people"
        assert settings.password == "secret-key"
        assert settings.traversal_source == "g"

    def test_password_not_in_repr(self):
        settings = GremlinServerSettings.from_config(_config())

        assert "secret-key" not in repr(settings)

    @pytest.mark.parametrize("field,env_var", [
        ("endpoint", "COSMOS_GREMLIN_ENDPOINT"),
        ("primary_key", "COSMOS_GREMLIN_PRIMARY_KEY"),
        ("database_name", "COSMOS_GREMLIN_DATABASE_NAME"),
        ("container_name", "COSMOS_GREMLIN_CONTAINER_NAME"),
    ])
    def test_missing_value_raises_configuration_error(self, field, env_var):
        with pytest.raises(ConfigurationError, match=env_var):
            GremlinServerSettings.from_config(_config(**{field: None}))


# ============================================================================
# CONNECTION FACTORY
# ============================================================================

class TestGremlinConnectionFactory:
    """Tests for GremlinConnectionFactory."""

    def test_builds_client_with_cosmos_parameters(self):
        client_factory = MagicMock()
        factory = GremlinConnectionFactory(_config(), client_factory=client_factory)

        connection = asyncio.run(factory())

        assert isinstance(connection, GremlinConnection)
        args, kwargs = client_factory.call_args
        assert args == ("wss://acct.gremlin.cosmos.azure.com:443/", "g")
        assert kwargs["username"] == "/dbs/graphdb/colls/people"
        assert kwargs["password"] == "secret-key"
        assert isinstance(kwargs["message_serializer"], serializer.GraphSONSerializersV2d0)

    @patch("infrastructure.gremlin.gremlin_client.Client")
    def test_default_client_is_gremlinpython(self, mock_client_cls):
        factory = GremlinConnectionFactory(_config())

        asyncio.run(factory())

        mock_client_cls.assert_called_once()

    def test_fresh_client_per_call(self):
        client_factory = MagicMock(side_effect=lambda *a, **k: MagicMock())
        factory = GremlinConnectionFactory(_config(), client_factory=client_factory)

        async def run():
            return await factory(), await factory()

        first, second = asyncio.run(run())

        assert client_factory.call_count == 2
        assert first is not second

    def test_missing_config_fails_at_first_use(self):
        client_factory = MagicMock()
        factory = GremlinConnectionFactory(_config(endpoint=None), client_factory=client_factory)

        with pytest.raises(ConfigurationError):
            asyncio.run(factory())

        client_factory.assert_not_called()


# ============================================================================
# CONNECTION
# ============================================================================

class TestGremlinConnection:
    """Tests for GremlinConnection driver call mapping."""

    def test_submit_returns_materialized_results(self):
        driver_client = _mock_driver_client(result=[5])
        connection = GremlinConnection(driver_client)

        result = asyncio.run(connection.submit_async("g.V().count()"))

        assert result == [5]
        driver_client.submit.assert_called_once_with("g.V().count()")

    def test_submit_error_propagates(self):
        error = RuntimeError("ScriptEvaluationError")
        connection = GremlinConnection(_mock_driver_client(error=error))

        with pytest.raises(RuntimeError) as exc_info:
            asyncio.run(connection.submit_async("g.V("))

        assert exc_info.value is error

    def test_close_is_idempotent(self):
        driver_client = _mock_driver_client()
        connection = GremlinConnection(driver_client)

        async def run():
            await connection.close()
            await connection.close()

        asyncio.run(run())

        driver_client.close.assert_called_once()
        assert connection.closed


# ============================================================================
# SERVICE + FACTORY
# ============================================================================

class TestGraphQueryServiceWithGremlin:
    """GraphQueryService driving the gremlinpython adapter end to end."""

    def test_client_closed_after_each_query(self):
        clients = []

        def client_factory(*args, **kwargs):
            driver_client = _mock_driver_client(result=[{"count": 5}])
            clients.append(driver_client)
            return driver_client

        service = GraphQueryService(GremlinConnectionFactory(_config(), client_factory=client_factory))

        async def run():
            return [await service.submit("g.V().count()") for _ in range(3)]

        results = asyncio.run(run())

        assert results == [[{"count": 5}]] * 3
        assert len(clients) == 3
        for driver_client in clients:
            driver_client.close.assert_called_once()

    def test_client_closed_after_driver_error(self):
        error = RuntimeError("Unauthorized")
        driver_client = _mock_driver_client(error=error)
        service = GraphQueryService(
            GremlinConnectionFactory(_config(), client_factory=lambda *a, **k: driver_client)
        )

        with pytest.raises(RuntimeError) as exc_info:
            asyncio.run(service.submit("g.V()"))

        assert exc_info.value is error
        driver_client.close.assert_called_once()

    def test_client_built_after_timeout_is_closed(self):
        built = []

        def slow_client_factory(*args, **kwargs):
            time.sleep(0.3)
            driver_client = _mock_driver_client(result=[])
            built.append(driver_client)
            return driver_client

        service = GraphQueryService(
            GremlinConnectionFactory(_config(), client_factory=slow_client_factory)
        )

        async def run():
            with pytest.raises(asyncio.TimeoutError):
                await service.submit("g.V()", timeout=0.05)
            await asyncio.sleep(0.6)

        asyncio.run(run())

        assert len(built) == 1
        built[0].close.assert_called_once()
        built[0].submit.assert_not_called()

    def test_client_built_after_cancellation_is_closed(self):
        built = []

        def slow_client_factory(*args, **kwargs):
            time.sleep(0.3)
            driver_client = _mock_driver_client(result=[])
            built.append(driver_client)
            return driver_client

        factory = GremlinConnectionFactory(_config(), client_factory=slow_client_factory)

        async def run():
            task = asyncio.create_task(factory())
            await asyncio.sleep(0.05)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task
            await asyncio.sleep(0.6)

        asyncio.run(run())

        assert len(built) == 1
        built[0].close.assert_called_once()
