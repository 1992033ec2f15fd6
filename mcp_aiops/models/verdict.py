from __future__ import annotations

from enum import IntEnum, StrEnum

from pydantic import BaseModel, ConfigDict

DEFAULT_EXPLANATION = "No explanation available."


class AnomalyLevel(IntEnum):
    """Numeric code exported on the anomaly gauge."""

    NO = 0
    YES = 1
    POTENTIAL = 2


class AnomalyMatch(StrEnum):
    """Outcome of searching model text for the anomaly line."""

    NO_MATCH = "no_match"
    AFFIRMATIVE = "affirmative"
    NEGATIVE = "negative"
    POTENTIAL = "potential"


ANOMALY_LABELS: dict[AnomalyLevel, str] = {
    AnomalyLevel.NO: "No",
    AnomalyLevel.YES: "Sí",
    AnomalyLevel.POTENTIAL: "Potencial",
}

MATCH_LEVEL: dict[AnomalyMatch, AnomalyLevel] = {
    AnomalyMatch.NO_MATCH: AnomalyLevel.NO,
    AnomalyMatch.NEGATIVE: AnomalyLevel.NO,
    AnomalyMatch.AFFIRMATIVE: AnomalyLevel.YES,
    AnomalyMatch.POTENTIAL: AnomalyLevel.POTENTIAL,
}


class Verdict(BaseModel):
    """Bounded, machine-consumable reading of a model answer."""

    model_config = ConfigDict(frozen=True)

    numeric_code: AnomalyLevel = AnomalyLevel.NO
    label: str = ANOMALY_LABELS[AnomalyLevel.NO]
    explanation: str = DEFAULT_EXPLANATION

    @classmethod
    def from_match(cls, match: AnomalyMatch, explanation: str) -> "Verdict":
        level = MATCH_LEVEL[match]
        return cls(
            numeric_code=level,
            label=ANOMALY_LABELS[level],
            explanation=explanation,
        )
