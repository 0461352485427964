from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from openai import APIError, AsyncOpenAI

from docsum.core.config import Settings
from docsum.core.constants import GEMINI_BASE_URL, GEMINI_MODEL
from docsum.core.errors import GenerationError


@dataclass(frozen=True)
class SummaryResponse:
    summary_text: str


class SummaryClient:
    """Sends prompts to Gemini through its OpenAI-compatible endpoint."""

    def __init__(self, client: AsyncOpenAI, model: str = GEMINI_MODEL) -> None:
        self._client = client
        self.model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> SummaryClient:
        # One attempt per request: the SDK's own retries are switched off.
        client = AsyncOpenAI(
            api_key=settings.gemini_api_key,
            base_url=GEMINI_BASE_URL,
            max_retries=0,
        )
        return cls(client)

    async def summarize(self, prompt: str) -> SummaryResponse:
        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
            )
        except APIError as exc:
            raise GenerationError(f"Failed to call {self.model}: {exc}") from exc

        content: Any = response.choices[0].message.content if response.choices else None
        if not isinstance(content, str) or not content.strip():
            raise GenerationError("Empty summary response.")

        return SummaryResponse(summary_text=content.strip())

    async def close(self) -> None:
        await self._client.close()
