from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- app ---
    app_name: str = "MCP-AIOps"
    debug: bool = False
    log_level: str = "INFO"

    # --- metrics backend ---
    prometheus_url: str = "http://prometheus:9090"
    metrics_timeout: float = 5.0  # seconds per instant query
    cpu_query: str = "rate(node_cpu_seconds_total{mode='user'}[5m])"
    load_query: str = "node_load1"
    memory_query: str = "node_memory_MemAvailable_bytes"

    # --- inference endpoint ---
    gemini_api_key: str | None = None
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-2.0-flash"
    inference_timeout: float = 10.0

    # --- server ---
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = []

    model_config = {"env_file": ".env", "env_prefix": "", "extra": "ignore"}


settings = Settings()
