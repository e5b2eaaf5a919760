"""Telemetry protocol for pull-based pool counters.

Abstracts the metrics backend so the registry depends on a protocol rather
than a concrete library.  Production uses Prometheus; tests inject a fake
that records handles and samples callbacks on demand.
"""

from typing import Protocol, runtime_checkable

from poolmetrics.core.types import ConnectionMetricKind, PoolMetricReader


@runtime_checkable
class ObservableHandle(Protocol):
    """A live observable counter attached to the backend."""

    def close(self) -> None:
        """Detach the counter; its callback is never invoked afterwards.

        Calling ``close()`` more than once is a no-op.
        """
        ...


@runtime_checkable
class Telemetry(Protocol):
    """Protocol for creating observable up/down counters."""

    def create_up_down_counter(
        self,
        instrumentation_name: str,
        pool_name: str,
        kind: ConnectionMetricKind,
        callback: PoolMetricReader,
    ) -> ObservableHandle:
        """Attach a counter whose value is pulled from ``callback`` at sampling time.

        Args:
            instrumentation_name: Scope name of the instrumentation creating the counter.
            pool_name: Logical pool name; the metric group shared by a pool's counters.
            kind: Which connection counter this is.
            callback: Zero-argument reader invoked by the backend on every sample.

        Returns:
            Handle used to detach the counter.
        """
        ...
