from .prometheus import MetricQuery, PrometheusCollector, default_queries, extract_value

__all__ = [
    "MetricQuery",
    "PrometheusCollector",
    "default_queries",
    "extract_value",
]
