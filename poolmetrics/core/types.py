"""Types shared by the registry, the metric factory and telemetry adapters."""

from enum import Enum
from typing import Callable

PoolMetricReader = Callable[[], int]
"""Zero-argument accessor that reads one live value off a pool."""


class ConnectionMetricKind(Enum):
    """The observable counters created for every registered pool.

    Each member carries the exported metric name, its description and the
    ``state`` attribute value (``None`` when the metric has no state).
    """

    USED = (
        "db.client.connections.usage",
        "The number of connections that are currently in state described by the state attribute.",
        "used",
    )
    IDLE = (
        "db.client.connections.usage",
        "The number of connections that are currently in state described by the state attribute.",
        "idle",
    )
    PENDING_REQUESTS = (
        "db.client.connections.pending_requests",
        "The number of pending requests for an open connection, cumulative for the entire pool.",
        None,
    )

    def __init__(self, metric_name: str, description: str, state: str | None) -> None:
        self.metric_name = metric_name
        self.description = description
        self.state = state
