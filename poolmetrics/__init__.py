"""Pull-based connection pool metrics.

    from poolmetrics import register_metrics, unregister_metrics
    from poolmetrics.adapters.telemetry import PrometheusTelemetry

    telemetry = PrometheusTelemetry(registry)
    register_metrics(telemetry, pool)
"""

from poolmetrics.core.exceptions import PoolMetricReadError, PoolMetricsError
from poolmetrics.core.registry import (
    ConnectionPoolMetricsRegistry,
    default_registry,
    register_metrics,
    unregister_metrics,
)
from poolmetrics.core.types import ConnectionMetricKind

__all__ = [
    "ConnectionMetricKind",
    "ConnectionPoolMetricsRegistry",
    "PoolMetricReadError",
    "PoolMetricsError",
    "default_registry",
    "register_metrics",
    "unregister_metrics",
]
