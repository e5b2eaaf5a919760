"""Fake Telemetry for testing.

Records every counter created and closed so tests can assert on handle
lifecycles, and samples live callbacks on demand without depending on
prometheus-client.
"""

import threading
from dataclasses import dataclass, field

from poolmetrics.core.protocols.telemetry import Telemetry
from poolmetrics.core.types import ConnectionMetricKind, PoolMetricReader


@dataclass(eq=False)
class FakeObservableHandle:
    """Single counter created through the fake."""

    instrumentation_name: str
    pool_name: str
    kind: ConnectionMetricKind
    callback: PoolMetricReader
    closed: bool = False
    close_calls: int = 0
    fail_on_close: Exception | None = field(default=None, repr=False)

    def close(self) -> None:
        self.close_calls += 1
        if self.fail_on_close is not None:
            raise self.fail_on_close
        self.closed = True


class FakeTelemetry(Telemetry):
    """In-memory spy implementing the Telemetry protocol.

    Usage:
        fake = FakeTelemetry()
        registry.register_metrics(fake, pool)
        assert len(fake.live_handles) == 3
        assert fake.sample()[(ConnectionMetricKind.USED, "orders-db")] == 5
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.handles: list[FakeObservableHandle] = []
        self.fail_on_create: dict[ConnectionMetricKind, Exception] = {}

    def create_up_down_counter(
        self,
        instrumentation_name: str,
        pool_name: str,
        kind: ConnectionMetricKind,
        callback: PoolMetricReader,
    ) -> FakeObservableHandle:
        if kind in self.fail_on_create:
            raise self.fail_on_create[kind]
        handle = FakeObservableHandle(instrumentation_name, pool_name, kind, callback)
        with self._lock:
            self.handles.append(handle)
        return handle

    # -- test helpers --

    @property
    def live_handles(self) -> list[FakeObservableHandle]:
        with self._lock:
            return [h for h in self.handles if not h.closed]

    @property
    def closed_handles(self) -> list[FakeObservableHandle]:
        with self._lock:
            return [h for h in self.handles if h.closed]

    def sample(self) -> dict[tuple[ConnectionMetricKind, str], int]:
        """Invoke every live callback, keyed by ``(kind, pool_name)``.

        Exceptions raised by a callback propagate, as they would out of a
        real backend's collection cycle.
        """
        return {(h.kind, h.pool_name): h.callback() for h in self.live_handles}

    def clear(self) -> None:
        """Reset all recorded state."""
        with self._lock:
            self.handles.clear()
        self.fail_on_create.clear()
