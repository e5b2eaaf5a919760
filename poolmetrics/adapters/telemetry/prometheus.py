"""Prometheus implementation of the Telemetry protocol.

A single custom collector on a CollectorRegistry owns every live pool
counter.  Values are pulled from the pool callbacks at scrape time and
exported as gauges, one metric family per metric name, labelled with the
instrumentation scope, the pool name and (for usage) the connection state.
"""

import threading
from collections.abc import Iterator

from prometheus_client import CollectorRegistry
from prometheus_client.core import GaugeMetricFamily, Metric

from poolmetrics.core.protocols.telemetry import Telemetry
from poolmetrics.core.types import ConnectionMetricKind, PoolMetricReader


def _prometheus_name(metric_name: str) -> str:
    return metric_name.replace(".", "_")


def _label_names(kind: ConnectionMetricKind) -> list[str]:
    labels = ["otel_scope_name", "pool_name"]
    if kind.state is not None:
        labels.append("state")
    return labels


class PrometheusObservableHandle:
    """One live counter owned by a ``PrometheusTelemetry``."""

    def __init__(
        self,
        owner: "PrometheusTelemetry",
        instrumentation_name: str,
        pool_name: str,
        kind: ConnectionMetricKind,
        callback: PoolMetricReader,
    ) -> None:
        self._owner = owner
        self.instrumentation_name = instrumentation_name
        self.pool_name = pool_name
        self.kind = kind
        self.callback = callback

    @property
    def label_values(self) -> list[str]:
        values = [self.instrumentation_name, self.pool_name]
        if self.kind.state is not None:
            values.append(self.kind.state)
        return values

    def close(self) -> None:
        self._owner._discard(self)

    def __repr__(self) -> str:
        return (
            f"PrometheusObservableHandle(pool_name={self.pool_name!r}, kind={self.kind.name})"
        )


class PrometheusTelemetry(Telemetry):
    """Prometheus-backed observable pool counters."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or CollectorRegistry()
        # Held while callbacks run so close() never races a scrape.
        self._lock = threading.RLock()
        self._handles: list[PrometheusObservableHandle] = []
        self._registry.register(self)

    # -- Telemetry protocol method --

    def create_up_down_counter(
        self,
        instrumentation_name: str,
        pool_name: str,
        kind: ConnectionMetricKind,
        callback: PoolMetricReader,
    ) -> PrometheusObservableHandle:
        handle = PrometheusObservableHandle(self, instrumentation_name, pool_name, kind, callback)
        with self._lock:
            self._handles.append(handle)
        return handle

    # -- prometheus_client collector interface --

    def describe(self) -> Iterator[Metric]:
        for family in self._empty_families().values():
            yield family

    def collect(self) -> Iterator[Metric]:
        families = self._empty_families()
        # Distinct pools may share a name; one series per label set, summed.
        totals: dict[tuple[str, tuple[str, ...]], int] = {}
        with self._lock:
            for handle in self._handles:
                key = (_prometheus_name(handle.kind.metric_name), tuple(handle.label_values))
                totals[key] = totals.get(key, 0) + handle.callback()
        for (name, label_values), value in totals.items():
            families[name].add_metric(list(label_values), value)
        yield from families.values()

    # -- internals --

    @property
    def live_handle_count(self) -> int:
        with self._lock:
            return len(self._handles)

    def _discard(self, handle: PrometheusObservableHandle) -> None:
        with self._lock:
            if handle in self._handles:
                self._handles.remove(handle)

    @staticmethod
    def _empty_families() -> dict[str, GaugeMetricFamily]:
        families: dict[str, GaugeMetricFamily] = {}
        for kind in ConnectionMetricKind:
            name = _prometheus_name(kind.metric_name)
            if name not in families:
                families[name] = GaugeMetricFamily(
                    name, kind.description, labels=_label_names(kind)
                )
        return families
