"""
Gemini client.

Thin wrapper over the ``generateContent`` REST endpoint. Callers pass the
prompt together with fixed sampling and safety settings; the client returns
the trimmed text of the first candidate or raises a GenerationError saying
why no text came back.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from jobassist.config import Settings

logger = logging.getLogger(__name__)

GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models"

HARM_HARASSMENT = "HARM_CATEGORY_HARASSMENT"
HARM_HATE_SPEECH = "HARM_CATEGORY_HATE_SPEECH"
HARM_SEXUALLY_EXPLICIT = "HARM_CATEGORY_SEXUALLY_EXPLICIT"
HARM_DANGEROUS_CONTENT = "HARM_CATEGORY_DANGEROUS_CONTENT"
BLOCK_MEDIUM_AND_ABOVE = "BLOCK_MEDIUM_AND_ABOVE"


class GenerationError(Exception):
    """Generation failed; the message is safe to show to the user."""


class GeminiNotConfiguredError(GenerationError):
    def __init__(self):
        super().__init__("Server configuration error: Gemini API key missing.")


class ContentBlockedError(GenerationError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Content generation blocked: {reason}")


class EmptyGenerationError(GenerationError):
    def __init__(self, finish_reason: str | None = None):
        self.finish_reason = finish_reason
        if finish_reason:
            super().__init__(f"Content generation issue: {finish_reason}")
        else:
            super().__init__("Failed: No content in Gemini response.")


class MalformedOutputError(GenerationError):
    """The model answered, but not in the structure that was asked for."""


@dataclass(frozen=True)
class GenerationSettings:
    """Sampling parameters and safety thresholds for one kind of request."""

    temperature: float
    max_output_tokens: int
    top_k: int | None = None
    top_p: float | None = None
    safety_categories: tuple[str, ...] = (HARM_HARASSMENT, HARM_HATE_SPEECH)
    safety_threshold: str = BLOCK_MEDIUM_AND_ABOVE

    def generation_config(self) -> dict[str, Any]:
        config: dict[str, Any] = {
            "temperature": self.temperature,
            "maxOutputTokens": self.max_output_tokens,
        }
        if self.top_k is not None:
            config["topK"] = self.top_k
        if self.top_p is not None:
            config["topP"] = self.top_p
        return config

    def safety_settings(self) -> list[dict[str, str]]:
        return [{"category": c, "threshold": self.safety_threshold} for c in self.safety_categories]


class GeminiClient:
    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash-latest",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._http_client = http_client

    @classmethod
    def from_settings(cls, settings: Settings, http_client: httpx.AsyncClient | None = None) -> "GeminiClient":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            timeout=settings.search_timeout,
            http_client=http_client,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def build_payload(self, prompt: str, generation: GenerationSettings) -> dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": generation.generation_config(),
            "safetySettings": generation.safety_settings(),
        }

    async def generate(self, prompt: str, generation: GenerationSettings) -> str:
        """
        Generate text for a single-turn user prompt.

        Raises:
            GeminiNotConfiguredError: no API key
            ContentBlockedError: the prompt was blocked by safety filters
            EmptyGenerationError: the first candidate carries no text
            GenerationError: transport or HTTP failure
        """
        if not self.is_configured:
            raise GeminiNotConfiguredError()

        data = await self._post(self.build_payload(prompt, generation))
        return extract_text(data)

    async def _post(self, payload: dict[str, Any]) -> dict[str, Any]:
        url = f"{GEMINI_API_URL}/{self.model}:generateContent"
        headers = {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}

        try:
            if self._http_client is not None:
                response = await self._http_client.post(url, headers=headers, json=payload, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(url, headers=headers, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Gemini HTTP error: {e.response.status_code} {e.response.text[:200]}")
            raise GenerationError(f"Gemini request failed with status {e.response.status_code}.") from e
        except httpx.HTTPError as e:
            logger.error(f"Gemini request failed: {e}")
            raise GenerationError(f"Gemini request failed: {e}") from e
        except ValueError as e:
            raise GenerationError("Gemini returned a non-JSON response.") from e

        if not isinstance(data, dict):
            raise GenerationError("Gemini returned an unexpected response.")
        return data


def extract_text(data: dict[str, Any]) -> str:
    """Trimmed text of the first candidate in a ``generateContent`` response."""
    candidates = data.get("candidates") or []
    if not candidates:
        block_reason = (data.get("promptFeedback") or {}).get("blockReason")
        if block_reason:
            logger.error(f"Gemini blocked the prompt: {block_reason}")
            raise ContentBlockedError(block_reason)
        logger.error("Gemini returned no candidates")
        raise EmptyGenerationError()

    candidate = candidates[0]
    parts = (candidate.get("content") or {}).get("parts") or []
    text = "".join(p.get("text") or "" for p in parts if isinstance(p, dict)).strip()
    if not text:
        finish_reason = candidate.get("finishReason")
        logger.error(f"Gemini returned no content. Finish reason: {finish_reason}")
        raise EmptyGenerationError(finish_reason)
    return text
