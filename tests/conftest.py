"""Shared fixtures: stub pools, a fake telemetry backend and a fresh registry."""

import pytest

from poolmetrics.adapters.telemetry import FakeTelemetry
from poolmetrics.core.registry import ConnectionPoolMetricsRegistry


class FakePool:
    """Minimal stand-in for a pooled data source.

    Defines value equality on its name, the way pool libraries key pools on
    a configuration token, so identity semantics are actually exercised.
    """

    def __init__(
        self,
        name: str | None = "orders-db",
        busy: int = 5,
        idle: int = 15,
        awaiting: int = 0,
    ) -> None:
        self.data_source_name = name
        self.busy = busy
        self.idle = idle
        self.awaiting = awaiting

    def get_num_busy_connections(self) -> int:
        return self.busy

    def get_num_idle_connections(self) -> int:
        return self.idle

    def get_num_threads_awaiting_checkout(self) -> int:
        return self.awaiting

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FakePool) and other.data_source_name == self.data_source_name

    def __hash__(self) -> int:
        return hash(self.data_source_name)


class BrokenPool(FakePool):
    """Pool whose counters raise on every read."""

    def get_num_busy_connections(self) -> int:
        raise ConnectionError("pool gone")

    def get_num_idle_connections(self) -> int:
        raise ConnectionError("pool gone")

    def get_num_threads_awaiting_checkout(self) -> int:
        raise ConnectionError("pool gone")


@pytest.fixture
def make_pool():
    return FakePool


@pytest.fixture
def make_broken_pool():
    return BrokenPool


@pytest.fixture
def fake_telemetry() -> FakeTelemetry:
    return FakeTelemetry()


@pytest.fixture
def registry() -> ConnectionPoolMetricsRegistry:
    return ConnectionPoolMetricsRegistry(instrumentation_name="tests.pool")
