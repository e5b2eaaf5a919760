"""Identity-keyed registry of live pool counters.

Maps each registered pool (by object identity) to the ``MetricHandleSet``
created for it.  Registering a pool again replaces its counters;
unregistering detaches them.  All mutation happens under one lock, so for
any pool at most one handle set is ever attached to the backend.
"""

import threading

from poolmetrics.core.config import settings
from poolmetrics.core.db_connection_pool_metrics import MetricHandleSet, create_meters, detach
from poolmetrics.core.identity_key import IdentityKey
from poolmetrics.core.logging import logger
from poolmetrics.core.protocols.pooled_data_source import PooledDataSource
from poolmetrics.core.protocols.telemetry import Telemetry


class ConnectionPoolMetricsRegistry:
    """Thread-safe map from pool identity to its attached counters.

    Usage:
        registry = ConnectionPoolMetricsRegistry()
        registry.register_metrics(telemetry, pool)
        ...
        registry.unregister_metrics(pool)
    """

    def __init__(self, instrumentation_name: str | None = None) -> None:
        self.instrumentation_name = instrumentation_name or settings.INSTRUMENTATION_NAME
        self._lock = threading.Lock()
        self._metrics: dict[IdentityKey, MetricHandleSet] = {}

    def register_metrics(self, telemetry: Telemetry, pool: PooledDataSource) -> None:
        """Attach used/idle/pending counters for ``pool``, replacing any previous ones.

        The previous handle set for the same pool is detached before the new
        one is created.  If creation fails the error propagates and the pool
        is left unregistered.
        """
        key = IdentityKey(pool)
        pool_logger = logger.with_context(pool_name=pool.data_source_name, pool_id=id(pool))
        with self._lock:
            existing = self._metrics.pop(key, None)
            if existing is not None:
                pool_logger.debug("Replacing existing connection pool metrics")
                detach(existing)
            self._metrics[key] = create_meters(telemetry, self.instrumentation_name, pool)
        pool_logger.info("Registered connection pool metrics")

    def unregister_metrics(self, pool: PooledDataSource) -> None:
        """Detach the counters for ``pool``; no-op if it is not registered."""
        with self._lock:
            existing = self._metrics.pop(IdentityKey(pool), None)
            detach(existing)
        if existing is not None:
            logger.with_context(pool_name=pool.data_source_name, pool_id=id(pool)).info(
                "Unregistered connection pool metrics"
            )

    def is_registered(self, pool: PooledDataSource) -> bool:
        with self._lock:
            return IdentityKey(pool) in self._metrics

    def __len__(self) -> int:
        with self._lock:
            return len(self._metrics)


default_registry = ConnectionPoolMetricsRegistry()


def register_metrics(telemetry: Telemetry, pool: PooledDataSource) -> None:
    """Register ``pool`` on the process-wide registry."""
    default_registry.register_metrics(telemetry, pool)


def unregister_metrics(pool: PooledDataSource) -> None:
    """Unregister ``pool`` from the process-wide registry."""
    default_registry.unregister_metrics(pool)
