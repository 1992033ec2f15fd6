"""Tests for mcp_aiops.engine.exporter: the anomaly gauge cell."""

from __future__ import annotations

import threading

import pytest
from prometheus_client import CollectorRegistry

from mcp_aiops.engine.exporter import GAUGE_NAME, AnomalyGauge
from mcp_aiops.models import AnomalyLevel


class TestAnomalyGauge:
    def test_starts_unset(self):
        gauge = AnomalyGauge(default_collectors=False)
        assert gauge.value is None
        assert gauge.registry.get_sample_value(GAUGE_NAME) == 0.0

    def test_set_updates_registry(self):
        gauge = AnomalyGauge(default_collectors=False)
        gauge.set(AnomalyLevel.POTENTIAL)
        assert gauge.value == AnomalyLevel.POTENTIAL
        assert gauge.registry.get_sample_value(GAUGE_NAME) == 2.0

    def test_last_write_wins(self):
        gauge = AnomalyGauge(default_collectors=False)
        gauge.set(1)
        gauge.set(0)
        assert gauge.value == AnomalyLevel.NO
        assert gauge.registry.get_sample_value(GAUGE_NAME) == 0.0

    def test_rejects_unknown_code(self):
        gauge = AnomalyGauge(default_collectors=False)
        with pytest.raises(ValueError):
            gauge.set(7)
        assert gauge.value is None

    def test_render_exposition(self):
        gauge = AnomalyGauge()
        gauge.set(1)
        text = gauge.render().decode()
        assert f"# TYPE {GAUGE_NAME} gauge" in text
        assert f"{GAUGE_NAME} 1.0" in text
        assert "python_info" in text
        assert gauge.content_type.startswith("text/plain")

    def test_independent_registries(self):
        a = AnomalyGauge(default_collectors=False)
        b = AnomalyGauge(default_collectors=False)
        a.set(2)
        assert b.value is None

    def test_explicit_registry(self):
        registry = CollectorRegistry()
        gauge = AnomalyGauge(registry=registry, default_collectors=False)
        gauge.set(1)
        assert registry.get_sample_value(GAUGE_NAME) == 1.0

    def test_concurrent_threads(self):
        gauge = AnomalyGauge(default_collectors=False)
        codes = [i % 3 for i in range(300)]
        threads = [threading.Thread(target=gauge.set, args=(c,)) for c in codes]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert gauge.value in {AnomalyLevel(c) for c in codes}
        assert gauge.registry.get_sample_value(GAUGE_NAME) == float(gauge.value)
