from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from mcp_aiops.errors import ValidationError
from mcp_aiops.models import SystemState

BYTES_PER_MB = 1024 * 1024


def bytes_to_mb(value: float | None) -> float | None:
    if value is None:
        return None
    return value / BYTES_PER_MB


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def validate_state(raw: Mapping[str, Any]) -> SystemState:
    """Validate a raw snapshot mapping, raising ValidationError on failure."""
    try:
        return SystemState.model_validate(dict(raw))
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc


def assemble_state(
    samples: Mapping[str, float | None],
    timestamp_ms: int | None = None,
) -> SystemState:
    """Build a timestamped snapshot from collected samples.

    ``samples`` carries ``memory_available_bytes``; it is converted to
    megabytes before validation.
    """
    raw = {
        "cpu_usage_rate_5m": samples.get("cpu_usage_rate_5m"),
        "load_average_1m": samples.get("load_average_1m"),
        "memory_available_mb": bytes_to_mb(samples.get("memory_available_bytes")),
        "timestamp": now_ms() if timestamp_ms is None else timestamp_ms,
    }
    return validate_state(raw)
