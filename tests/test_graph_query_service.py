# ============================================================================
# GRAPH QUERY SERVICE TESTS
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Tests - Graph query pass-through
# PURPOSE: Verify result pass-through, error transparency, connection hygiene
# CREATED: 19 OCT 2026
# ============================================================================
"""
Graph Query Service Tests

Uses a fake graph driver that counts connection opens and closes.

Run with:
    pytest tests/test_graph_query_service.py -v
"""

import asyncio
import pytest
from typing import Any, Callable, List, Optional

from core.contracts import GraphConnection
from services.graph_query_service import GraphQueryService


# ============================================================================
# FAKE DRIVER
# ============================================================================

class MalformedQueryError(Exception):
    """Stand-in for a driver's query syntax error."""


class FakeConnection:
    """Graph connection that answers from a handler function."""

    def __init__(self, driver: "FakeGraphDriver"):
        self.driver = driver
        self.close_calls = 0

    async def submit_async(self, query: str) -> Any:
        self.driver.queries.append(query)
        if self.driver.delay is not None:
            await asyncio.sleep(self.driver.delay)
        else:
            await asyncio.sleep(0)
        return self.driver.handler(query)

    async def close(self) -> None:
        self.close_calls += 1
        self.driver.closed += 1
        self.driver.live -= 1
        if self.driver.close_error is not None:
            raise self.driver.close_error


class FakeGraphDriver:
    """Connection factory recording open/close counts."""

    def __init__(self, handler: Callable[[str], Any], delay: Optional[float] = None):
        self.handler = handler
        self.delay = delay
        self.opened = 0
        self.closed = 0
        self.live = 0
        self.max_live = 0
        self.close_error: Optional[Exception] = None
        self.queries: List[str] = []
        self.connections: List[FakeConnection] = []

    async def __call__(self) -> FakeConnection:
        await asyncio.sleep(0)
        self.opened += 1
        self.live += 1
        self.max_live = max(self.max_live, self.live)
        connection = FakeConnection(self)
        self.connections.append(connection)
        return connection


def _raise(error: Exception):
    def handler(query):
        raise error
    return handler


# ============================================================================
# PASS-THROUGH
# ============================================================================

class TestPassThrough:
    """The service returns exactly what the driver returns."""

    def test_count_query_returns_driver_result(self):
        driver = FakeGraphDriver(lambda q: {"count": 5})
        service = GraphQueryService(driver)

        result = asyncio.run(service.submit("g.V().count()"))

        assert result == {"count": 5}
        assert driver.queries == ["g.V().count()"]

    def test_result_object_is_not_copied(self):
        payload = [{"id": "v1", "label": "person", "properties": {"name": [{"value": "Ada"}]}}]
        driver = FakeGraphDriver(lambda q: payload)
        service = GraphQueryService(driver)

        result = asyncio.run(service.submit("g.V('v1')"))

        assert result is payload

    @pytest.mark.parametrize("value", [None, 0, "text", [], [1, 2, 3], {"a": {"b": [1]}}])
    def test_any_shape_passes_through(self, value):
        driver = FakeGraphDriver(lambda q: value)
        service = GraphQueryService(driver)

        assert asyncio.run(service.submit("g.V()")) == value

    def test_query_text_is_not_modified(self):
        query = "  g.V().has('name', 'x')  .out()\n"
        driver = FakeGraphDriver(lambda q: [])
        service = GraphQueryService(driver)

        asyncio.run(service.submit(query))

        assert driver.queries == [query]


# ============================================================================
# ERROR TRANSPARENCY
# ============================================================================

class TestErrorTransparency:
    """Driver failures reach the caller unchanged."""

    def test_malformed_query_error_propagates_unwrapped(self):
        error = MalformedQueryError("Unable to parse query: g.V(")
        driver = FakeGraphDriver(_raise(error))
        service = GraphQueryService(driver)

        with pytest.raises(MalformedQueryError) as exc_info:
            asyncio.run(service.submit("g.V("))

        assert exc_info.value is error
        assert str(exc_info.value) == "Unable to parse query: g.V("

    @pytest.mark.parametrize("error", [
        ConnectionError("connection reset"),
        PermissionError("401 Unauthorized"),
        RuntimeError("server error"),
        ValueError("bad binding"),
    ])
    def test_error_kind_and_message_preserved(self, error):
        driver = FakeGraphDriver(_raise(error))
        service = GraphQueryService(driver)

        with pytest.raises(type(error), match=str(error)) as exc_info:
            asyncio.run(service.submit("g.V()"))

        assert exc_info.value is error
        assert exc_info.value.__cause__ is None

    def test_factory_failure_propagates(self):
        error = ConnectionRefusedError("host unreachable")

        async def factory():
            raise error

        service = GraphQueryService(factory)

        with pytest.raises(ConnectionRefusedError) as exc_info:
            asyncio.run(service.submit("g.V()"))

        assert exc_info.value is error
        assert service.open_connections == 0

    def test_failures_are_counted(self):
        driver = FakeGraphDriver(_raise(RuntimeError("boom")))
        service = GraphQueryService(driver)

        with pytest.raises(RuntimeError):
            asyncio.run(service.submit("g.V()"))

        assert service.stats == {"submitted": 1, "failed": 1, "open_connections": 0}

    def test_close_failure_does_not_replace_query_error(self):
        error = MalformedQueryError("Unable to parse query: g.V(")
        driver = FakeGraphDriver(_raise(error))
        driver.close_error = ConnectionResetError("socket already closed")
        service = GraphQueryService(driver)

        with pytest.raises(MalformedQueryError) as exc_info:
            asyncio.run(service.submit("g.V("))

        assert exc_info.value is error
        assert driver.closed == 1
        assert service.open_connections == 0

    def test_close_failure_after_success_propagates(self):
        driver = FakeGraphDriver(lambda q: [1])
        driver.close_error = ConnectionResetError("socket already closed")
        service = GraphQueryService(driver)

        with pytest.raises(ConnectionResetError):
            asyncio.run(service.submit("g.V()"))

        assert service.open_connections == 0


# ============================================================================
# CONNECTION HYGIENE
# ============================================================================

class TestConnectionHygiene:
    """Every acquired connection is released exactly once."""

    def test_connection_closed_after_success(self):
        driver = FakeGraphDriver(lambda q: [1])
        service = GraphQueryService(driver)

        asyncio.run(service.submit("g.V().count()"))

        assert driver.opened == 1
        assert driver.closed == 1
        assert driver.connections[0].close_calls == 1

    def test_connection_closed_after_failure(self):
        driver = FakeGraphDriver(_raise(MalformedQueryError("bad")))
        service = GraphQueryService(driver)

        with pytest.raises(MalformedQueryError):
            asyncio.run(service.submit("g.V("))

        assert driver.opened == 1
        assert driver.closed == 1

    def test_no_leak_over_1000_sequential_calls(self):
        def handler(query):
            if query.endswith("7)"):
                raise MalformedQueryError(query)
            return [query]

        driver = FakeGraphDriver(handler)
        service = GraphQueryService(driver)

        async def run():
            failures = 0
            for i in range(1000):
                try:
                    await service.submit(f"g.V().limit({i})")
                except MalformedQueryError:
                    failures += 1
            return failures

        failures = asyncio.run(run())

        assert failures == 100
        assert driver.opened == 1000
        assert driver.closed == 1000
        assert all(c.close_calls == 1 for c in driver.connections)
        assert driver.max_live == 1

    def test_no_leak_over_100_concurrent_calls(self):
        def handler(query):
            if int(query.split("(")[1].rstrip(")")) % 3 == 0:
                raise RuntimeError(query)
            return query

        driver = FakeGraphDriver(handler, delay=0.01)
        service = GraphQueryService(driver)

        async def run():
            return await asyncio.gather(
                *(service.submit(f"g.V({i})") for i in range(100)),
                return_exceptions=True,
            )

        results = asyncio.run(run())

        errors = [r for r in results if isinstance(r, RuntimeError)]
        assert len(errors) == 34
        assert driver.opened == 100
        assert driver.closed == 100
        assert all(c.close_calls == 1 for c in driver.connections)
        # Each call held its own connection
        assert driver.max_live > 1
        assert len(set(map(id, driver.connections))) == 100
        assert service.open_connections == 0

    def test_connection_closed_on_timeout(self):
        driver = FakeGraphDriver(lambda q: [1], delay=1.0)
        service = GraphQueryService(driver)

        with pytest.raises(asyncio.TimeoutError):
            asyncio.run(service.submit("g.V()", timeout=0.01))

        assert driver.opened == 1
        assert driver.closed == 1

    def test_connection_closed_on_cancellation(self):
        driver = FakeGraphDriver(lambda q: [1], delay=1.0)
        service = GraphQueryService(driver)

        async def run():
            task = asyncio.create_task(service.submit("g.V()"))
            while driver.opened == 0:
                await asyncio.sleep(0)
            await asyncio.sleep(0.01)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        asyncio.run(run())

        assert driver.opened == 1
        assert driver.closed == 1
        assert service.open_connections == 0

    def test_timeout_not_triggered_for_fast_query(self):
        driver = FakeGraphDriver(lambda q: {"count": 1})
        service = GraphQueryService(driver)

        assert asyncio.run(service.submit("g.V().count()", timeout=5.0)) == {"count": 1}
        assert driver.closed == 1


def test_fake_connection_satisfies_contract():
    assert isinstance(FakeConnection(FakeGraphDriver(lambda q: None)), GraphConnection)
