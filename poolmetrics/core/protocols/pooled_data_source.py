"""PooledDataSource protocol for the connection pools being observed.

The instrumentation only ever reads from a pool: its logical name once at
registration, and three live counters whenever the telemetry backend
samples.  Any pool library can be plugged in with a thin wrapper that
satisfies this protocol structurally.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PooledDataSource(Protocol):
    """Read surface of a connection pool."""

    @property
    def data_source_name(self) -> str | None:
        """Logical pool name; may be empty or unset."""
        ...

    def get_num_busy_connections(self) -> int:
        """Connections currently checked out.

        Raises:
            Exception: when the pool cannot answer the query.
        """
        ...

    def get_num_idle_connections(self) -> int:
        """Connections currently idle in the pool."""
        ...

    def get_num_threads_awaiting_checkout(self) -> int:
        """Callers currently blocked waiting for a connection."""
        ...
