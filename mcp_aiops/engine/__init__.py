from .assembler import assemble_state, bytes_to_mb, validate_state
from .context import build_context
from .exporter import AnomalyGauge
from .pipeline import CheckPipeline, CheckResult
from .prompt import format_prompt
from .verdict import extract_verdict

__all__ = [
    "assemble_state",
    "bytes_to_mb",
    "validate_state",
    "build_context",
    "AnomalyGauge",
    "CheckPipeline",
    "CheckResult",
    "format_prompt",
    "extract_verdict",
]
