from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt

CONTEXT_PROTOCOL = "model-context-protocol/v1"


class SystemState(BaseModel):
    """One sampled instant of host health.

    Each metric is independently nullable; ``timestamp`` (epoch millis) is
    required. Values are not coerced: a string where a number belongs is
    rejected rather than parsed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cpu_usage_rate_5m: StrictFloat | StrictInt | None
    load_average_1m: StrictFloat | StrictInt | None
    memory_available_mb: StrictFloat | StrictInt | None
    timestamp: StrictInt


class SchemaDescriptor(BaseModel):
    """Descriptive label for the shape carried in a context envelope."""

    model_config = ConfigDict(frozen=True)

    type: str = "pydantic/json"
    definition: str = "SystemStateSchema"


class ContextEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    protocol: str = CONTEXT_PROTOCOL
    description: str
    schema_: SchemaDescriptor = Field(alias="schema")
    data: SystemState

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
