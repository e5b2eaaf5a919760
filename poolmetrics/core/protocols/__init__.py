"""Protocols for the collaborators the instrumentation depends on."""

from poolmetrics.core.protocols.pooled_data_source import PooledDataSource
from poolmetrics.core.protocols.telemetry import ObservableHandle, Telemetry

__all__ = [
    "ObservableHandle",
    "PooledDataSource",
    "Telemetry",
]
