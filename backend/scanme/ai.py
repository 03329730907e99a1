from __future__ import annotations

import logging
from typing import Optional, Protocol

from google import genai

from scanme.core import DEFAULT_MODEL
from scanme.errors import ProviderError

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str:
        ...


class GeminiClient:
    """Thin async wrapper around google-genai for single prompt -> text completions."""

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL):
        self.api_key = api_key
        self.model = model
        self._client: Optional[genai.Client] = None

    def _get_client(self) -> genai.Client:
        # built on first use so the app can boot (health checks) without a key
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str) -> str:
        logger.info(f"Sending prompt to Gemini ({self.model}, {len(prompt)} chars)")
        try:
            response = await self._get_client().aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception as e:
            logger.error(f"Error with Gemini API: {e}")
            raise ProviderError(str(e)) from e

        return response.text or ""
