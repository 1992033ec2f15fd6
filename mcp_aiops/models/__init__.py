from .state import CONTEXT_PROTOCOL, ContextEnvelope, SchemaDescriptor, SystemState
from .verdict import (
    ANOMALY_LABELS,
    DEFAULT_EXPLANATION,
    AnomalyLevel,
    AnomalyMatch,
    Verdict,
)

__all__ = [
    "CONTEXT_PROTOCOL",
    "ContextEnvelope",
    "SchemaDescriptor",
    "SystemState",
    "ANOMALY_LABELS",
    "DEFAULT_EXPLANATION",
    "AnomalyLevel",
    "AnomalyMatch",
    "Verdict",
]
