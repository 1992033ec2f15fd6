from __future__ import annotations

from mcp_aiops.models import SystemState

NOT_AVAILABLE = "N/A"
WORD_LIMIT = 50

ANOMALY_KEYWORD = "Anomalía Detectada"
JUSTIFICATION_KEYWORD = "Justificación"
RECOMMENDATION_KEYWORD = "Recomendación"

_TEMPLATE = """\
Eres un ingeniero experto en SRE (Site Reliability Engineering).
Analiza el siguiente estado de un servidor para detectar posibles anomalías operacionales.
Estado del sistema en los últimos 5 minutos:
- Tasa de uso de CPU (modo 'user'): {cpu}
- Promedio de carga (1 minuto): {load}
- Memoria disponible: {memory} MB
Basado en estos datos, responde con:
1. **{anomaly}:** (Sí/No/Potencial).
2. **{justification}:** (Una explicación concisa de por qué, considerando la relación entre las métricas, en un máximo de {limit} palabras).
3. **{recommendation}:** (Un siguiente paso sugerido).
Limita la justificación a un máximo de {limit} palabras.
"""


def _fmt(value: float | None, precision: int) -> str:
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.{precision}f}"


def format_prompt(state: SystemState) -> str:
    """Render the snapshot as an SRE instruction with labelled answer sections."""
    return _TEMPLATE.format(
        cpu=_fmt(state.cpu_usage_rate_5m, 4),
        load=_fmt(state.load_average_1m, 2),
        memory=_fmt(state.memory_available_mb, 2),
        anomaly=ANOMALY_KEYWORD,
        justification=JUSTIFICATION_KEYWORD,
        recommendation=RECOMMENDATION_KEYWORD,
        limit=WORD_LIMIT,
    )
