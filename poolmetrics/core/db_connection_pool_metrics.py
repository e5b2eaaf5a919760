"""Observable connection pool counters for one pool.

``DbConnectionPoolMetrics`` groups the counters of a single pool under its
instrumentation scope and logical name.  ``create_meters`` builds the full
``MetricHandleSet`` for a pool and ``detach`` releases one.
"""

from collections.abc import Iterator, Sequence
from typing import overload

from poolmetrics.core.exceptions import PoolMetricReadError
from poolmetrics.core.logging import logger
from poolmetrics.core.protocols.pooled_data_source import PooledDataSource
from poolmetrics.core.protocols.telemetry import ObservableHandle, Telemetry
from poolmetrics.core.types import ConnectionMetricKind, PoolMetricReader


def wrap_throwing_reader(reader: PoolMetricReader) -> PoolMetricReader:
    """Turn a pool accessor into a sampling callback.

    A failed read raises ``PoolMetricReadError`` so the sample fails instead
    of being reported as zero.
    """

    def callback() -> int:
        try:
            return reader()
        except Exception as exc:
            raise PoolMetricReadError("Failed to read connection pool metric") from exc

    return callback


class DbConnectionPoolMetrics:
    """Counter group for one pool: shared scope name and pool name."""

    def __init__(self, telemetry: Telemetry, instrumentation_name: str, pool_name: str) -> None:
        self._telemetry = telemetry
        self.instrumentation_name = instrumentation_name
        self.pool_name = pool_name

    @classmethod
    def create(
        cls,
        telemetry: Telemetry,
        instrumentation_name: str,
        pool_name: str | None,
    ) -> "DbConnectionPoolMetrics":
        """Build a counter group; an unset pool name is exported as ``""``."""
        return cls(telemetry, instrumentation_name, pool_name or "")

    def used_connections(self, reader: PoolMetricReader) -> ObservableHandle:
        return self._counter(ConnectionMetricKind.USED, reader)

    def idle_connections(self, reader: PoolMetricReader) -> ObservableHandle:
        return self._counter(ConnectionMetricKind.IDLE, reader)

    def pending_requests_for_connection(self, reader: PoolMetricReader) -> ObservableHandle:
        return self._counter(ConnectionMetricKind.PENDING_REQUESTS, reader)

    def _counter(self, kind: ConnectionMetricKind, reader: PoolMetricReader) -> ObservableHandle:
        return self._telemetry.create_up_down_counter(
            self.instrumentation_name,
            self.pool_name,
            kind,
            wrap_throwing_reader(reader),
        )


class MetricHandleSet(Sequence[ObservableHandle]):
    """Handles created for a single registration: used, idle, pending."""

    __slots__ = ("_handles",)

    def __init__(self, handles: Sequence[ObservableHandle]) -> None:
        self._handles = tuple(handles)

    @overload
    def __getitem__(self, index: int) -> ObservableHandle: ...

    @overload
    def __getitem__(self, index: slice) -> "MetricHandleSet": ...

    def __getitem__(self, index: int | slice) -> "ObservableHandle | MetricHandleSet":
        if isinstance(index, slice):
            return MetricHandleSet(self._handles[index])
        return self._handles[index]

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[ObservableHandle]:
        return iter(self._handles)

    def __repr__(self) -> str:
        return f"MetricHandleSet({list(self._handles)!r})"


def detach(handle_set: Sequence[ObservableHandle] | None) -> None:
    """Close every handle in ``handle_set``; ``None`` is a no-op.

    A handle that fails to close is logged and skipped so the remaining
    handles are still released.  Never raises.
    """
    if handle_set is None:
        return
    for handle in handle_set:
        try:
            handle.close()
        except Exception:
            logger.warning(f"Failed to close observable handle {handle!r}", exc_info=True)


def create_meters(
    telemetry: Telemetry,
    instrumentation_name: str,
    pool: PooledDataSource,
) -> MetricHandleSet:
    """Create the used/idle/pending counters for ``pool``.

    If a counter cannot be created, the ones already created are closed
    before the error propagates.
    """
    metrics = DbConnectionPoolMetrics.create(
        telemetry, instrumentation_name, pool.data_source_name
    )
    factories = (
        (metrics.used_connections, pool.get_num_busy_connections),
        (metrics.idle_connections, pool.get_num_idle_connections),
        (metrics.pending_requests_for_connection, pool.get_num_threads_awaiting_checkout),
    )

    created: list[ObservableHandle] = []
    try:
        for factory, reader in factories:
            created.append(factory(reader))
    except Exception:
        detach(created)
        raise
    return MetricHandleSet(created)
