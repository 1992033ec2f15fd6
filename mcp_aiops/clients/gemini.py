from __future__ import annotations

import logging
from typing import Any

import httpx

from mcp_aiops.errors import UpstreamServiceError

logger = logging.getLogger(__name__)

ANALYSIS_UNAVAILABLE = "analysis not available"


def first_candidate_text(body: dict[str, Any]) -> str:
    """Text of the first part of the first candidate, or a placeholder."""
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ANALYSIS_UNAVAILABLE
    if not isinstance(text, str) or not text:
        return ANALYSIS_UNAVAILABLE
    return text


class GeminiClient:
    """Minimal generateContent client authenticated with an API key."""

    service = "gemini"

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str | None,
        model: str = "gemini-2.0-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 10.0,
    ) -> None:
        self._client = client
        self._api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        # The key travels as a query parameter and never appears here.
        return f"{self.base_url}/models/{self.model}:generateContent"

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    async def generate(self, prompt: str) -> str:
        if not self.configured:
            raise UpstreamServiceError(
                self.service,
                self.endpoint,
                "Inference endpoint API key is not configured.",
            )
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            resp = await self._client.post(
                self.endpoint,
                json=payload,
                params={"key": self._api_key},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            body = resp.json()
        except httpx.HTTPError as exc:
            # str(exc) may embed the request URL, key included
            logger.warning("Inference request failed: %s", type(exc).__name__)
            raise UpstreamServiceError(self.service, self.endpoint) from exc
        except ValueError as exc:
            logger.warning("Inference endpoint returned a non-JSON body")
            raise UpstreamServiceError(
                self.service,
                self.endpoint,
                "Malformed response from the inference endpoint.",
            ) from exc
        return first_candidate_text(body)
