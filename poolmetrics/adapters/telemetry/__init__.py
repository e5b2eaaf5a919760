"""Telemetry adapters."""

from poolmetrics.adapters.telemetry.fake import FakeObservableHandle, FakeTelemetry
from poolmetrics.adapters.telemetry.prometheus import PrometheusTelemetry

__all__ = ["PrometheusTelemetry", "FakeTelemetry", "FakeObservableHandle"]
