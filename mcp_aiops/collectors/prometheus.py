from __future__ import annotations

import asyncio
import logging
import math
from dataclasses import dataclass
from typing import Any

import httpx

from mcp_aiops.config import Settings
from mcp_aiops.errors import UpstreamServiceError

logger = logging.getLogger(__name__)

QUERY_PATH = "/api/v1/query"


@dataclass(frozen=True)
class MetricQuery:
    """A named PromQL instant query feeding one snapshot field."""

    field: str
    expr: str


def default_queries(settings: Settings) -> tuple[MetricQuery, ...]:
    return (
        MetricQuery("cpu_usage_rate_5m", settings.cpu_query),
        MetricQuery("load_average_1m", settings.load_query),
        MetricQuery("memory_available_bytes", settings.memory_query),
    )


def extract_value(payload: dict[str, Any]) -> float | None:
    """Return the first series' sample as a float, or None when there is none.

    An empty result set means the metric is not currently exported, which
    is a valid state. NaN and infinite samples are treated the same way.
    """
    result = payload["data"]["result"]
    if not result:
        return None
    value = float(result[0]["value"][1])
    if not math.isfinite(value):
        return None
    return value


class PrometheusCollector:
    """Runs a fixed set of instant queries against a Prometheus server.

    All queries are issued concurrently. Any transport failure, error
    status or malformed body aborts the whole collection.
    """

    name = "prometheus"

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        queries: tuple[MetricQuery, ...],
        timeout: float = 5.0,
    ) -> None:
        self._client = client
        self.base_url = base_url.rstrip("/")
        self.queries = queries
        self.timeout = timeout

    @property
    def query_url(self) -> str:
        return f"{self.base_url}{QUERY_PATH}"

    async def collect(self) -> dict[str, float | None]:
        values = await asyncio.gather(*(self._query(q) for q in self.queries))
        samples = {q.field: v for q, v in zip(self.queries, values)}
        logger.debug("Collected samples: %s", samples)
        return samples

    async def _query(self, query: MetricQuery) -> float | None:
        try:
            resp = await self._client.get(
                self.query_url,
                params={"query": query.expr},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return extract_value(resp.json())
        except httpx.HTTPError as exc:
            logger.warning("Prometheus query for %s failed: %s", query.field, exc)
            raise UpstreamServiceError(self.name, self.query_url) from exc
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            logger.warning("Malformed Prometheus response for %s: %r", query.field, exc)
            raise UpstreamServiceError(
                self.name,
                self.query_url,
                "Malformed response from the metrics backend.",
            ) from exc
