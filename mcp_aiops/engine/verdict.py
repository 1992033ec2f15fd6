"""Distil free-form model text into a bounded Verdict.

The model is asked (see ``engine.prompt``) to answer with labelled lines::

    Anomalía Detectada: Sí | No | Potencial
    Justificación: <one line of text>

Both searches tolerate absence and markdown emphasis around the label.
Nothing here keeps state or does I/O.
"""

from __future__ import annotations

import re

from mcp_aiops.engine.prompt import WORD_LIMIT
from mcp_aiops.models import DEFAULT_EXPLANATION, AnomalyMatch, Verdict

TRUNCATION_MARKER = "..."

_ANOMALY_RE = re.compile(
    r"Anomal[ií]a\s+Detectada\**\s*:\**\s*(s[ií]|no|potencial)\b",
    re.IGNORECASE,
)
_JUSTIFICATION_RE = re.compile(
    r"Justificaci[oó]n\**[ \t]*:\**[ \t]*([^\n]+)",
    re.IGNORECASE,
)

_TOKENS: dict[str, AnomalyMatch] = {
    "sí": AnomalyMatch.AFFIRMATIVE,
    "si": AnomalyMatch.AFFIRMATIVE,
    "no": AnomalyMatch.NEGATIVE,
    "potencial": AnomalyMatch.POTENTIAL,
}


def match_anomaly(text: str) -> AnomalyMatch:
    m = _ANOMALY_RE.search(text)
    if m is None:
        return AnomalyMatch.NO_MATCH
    return _TOKENS.get(m.group(1).lower(), AnomalyMatch.NO_MATCH)


def truncate_words(text: str, limit: int = WORD_LIMIT) -> str:
    words = text.split()
    if len(words) <= limit:
        return text
    return " ".join(words[:limit]) + TRUNCATION_MARKER


def extract_explanation(text: str) -> str:
    m = _JUSTIFICATION_RE.search(text)
    explanation = m.group(1).strip() if m else ""
    if not explanation:
        return DEFAULT_EXPLANATION
    return truncate_words(explanation)


def extract_verdict(text: str) -> Verdict:
    return Verdict.from_match(match_anomaly(text), extract_explanation(text))
