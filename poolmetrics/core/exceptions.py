"""Exceptions raised by connection pool instrumentation."""


class PoolMetricsError(Exception):
    """Base class for poolmetrics errors."""


class PoolMetricReadError(PoolMetricsError):
    """A pool accessor failed while the telemetry backend was sampling it.

    The original failure is chained as ``__cause__``.
    """
