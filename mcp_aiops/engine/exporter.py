from __future__ import annotations

import threading

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    GCCollector,
    Gauge,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

from mcp_aiops.models import AnomalyLevel

GAUGE_NAME = "mcp_aiops_anomaly"
GAUGE_HELP = "Anomaly detected: 1=yes, 2=potential, 0=no"


class AnomalyGauge:
    """Owns the anomaly gauge and the registry it is scraped from.

    ``set`` is the only mutation. Concurrent checks race on it and the last
    write wins.
    """

    content_type = CONTENT_TYPE_LATEST

    def __init__(
        self,
        registry: CollectorRegistry | None = None,
        default_collectors: bool = True,
    ) -> None:
        self.registry = registry if registry is not None else CollectorRegistry()
        if default_collectors:
            ProcessCollector(registry=self.registry)
            PlatformCollector(registry=self.registry)
            GCCollector(registry=self.registry)
        self._gauge = Gauge(GAUGE_NAME, GAUGE_HELP, registry=self.registry)
        self._lock = threading.Lock()
        self._last: AnomalyLevel | None = None

    def set(self, level: int) -> None:
        level = AnomalyLevel(level)
        with self._lock:
            self._gauge.set(int(level))
            self._last = level

    @property
    def value(self) -> AnomalyLevel | None:
        with self._lock:
            return self._last

    def render(self) -> bytes:
        return generate_latest(self.registry)
