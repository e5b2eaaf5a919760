"""Unit tests for the connection metric kinds."""

import pytest

from poolmetrics.core.types import ConnectionMetricKind


class TestConnectionMetricKind:
    @pytest.mark.parametrize(
        ("kind", "metric_name", "state"),
        [
            (ConnectionMetricKind.USED, "db.client.connections.usage", "used"),
            (ConnectionMetricKind.IDLE, "db.client.connections.usage", "idle"),
            (
                ConnectionMetricKind.PENDING_REQUESTS,
                "db.client.connections.pending_requests",
                None,
            ),
        ],
    )
    def test_exported_metadata(self, kind, metric_name, state):
        assert kind.metric_name == metric_name
        assert kind.state == state
        assert kind.description

    def test_carries_only_exported_metadata(self):
        assert not hasattr(ConnectionMetricKind.USED, "unit")
