from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from mcp_aiops.engine.assembler import assemble_state
from mcp_aiops.engine.context import DEFAULT_DESCRIPTION, build_context
from mcp_aiops.engine.exporter import AnomalyGauge
from mcp_aiops.engine.prompt import format_prompt
from mcp_aiops.engine.verdict import extract_verdict
from mcp_aiops.errors import AIOpsError, UnexpectedError
from mcp_aiops.models import ContextEnvelope, Verdict

logger = logging.getLogger(__name__)


class SampleSource(Protocol):
    async def collect(self) -> dict[str, float | None]: ...


class InferenceBackend(Protocol):
    async def generate(self, prompt: str) -> str: ...


@dataclass(frozen=True)
class CheckResult:
    context: ContextEnvelope
    verdict: Verdict
    analysis: str

    def to_response(self) -> dict[str, Any]:
        return {
            "context": self.context.to_json(),
            "anomaly": self.verdict.label,
            "explanation": self.verdict.explanation,
            "analysis": self.analysis,
        }


class CheckPipeline:
    """Collect -> assemble -> prompt -> infer -> extract -> export.

    The gauge is only touched once a verdict exists, so any failure leaves
    it at its previous value.
    """

    def __init__(
        self,
        collector: SampleSource,
        inference: InferenceBackend,
        gauge: AnomalyGauge,
        description: str = DEFAULT_DESCRIPTION,
    ) -> None:
        self.collector = collector
        self.inference = inference
        self.gauge = gauge
        self.description = description

    async def run(self) -> CheckResult:
        try:
            samples = await self.collector.collect()
            state = assemble_state(samples)
            context = build_context(state, description=self.description)
            analysis = await self.inference.generate(format_prompt(state))
        except AIOpsError:
            raise
        except Exception as exc:
            logger.exception("Unexpected failure during check")
            raise UnexpectedError() from exc

        verdict = extract_verdict(analysis)
        self.gauge.set(verdict.numeric_code)
        logger.info(
            "Check complete: anomaly=%s code=%d",
            verdict.label,
            verdict.numeric_code,
        )
        return CheckResult(context=context, verdict=verdict, analysis=analysis)
