"""Prometheus-to-LLM anomaly check service."""

__version__ = "0.1.0"
