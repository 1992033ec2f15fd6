from __future__ import annotations

from mcp_aiops.models import ContextEnvelope, SchemaDescriptor, SystemState

DEFAULT_DESCRIPTION = (
    "Estado de métricas operacionales de un servidor para análisis AIOps"
)
SYSTEM_STATE_SCHEMA = SchemaDescriptor(type="pydantic/json", definition="SystemStateSchema")


def build_context(
    data: SystemState,
    description: str = DEFAULT_DESCRIPTION,
    schema: SchemaDescriptor = SYSTEM_STATE_SCHEMA,
) -> ContextEnvelope:
    return ContextEnvelope(description=description, schema=schema, data=data)
