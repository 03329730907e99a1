from __future__ import annotations

import asyncio
import copy
import logging
from typing import Any, Dict

from scanme.ai import TextGenerator
from scanme.core import FALLBACK_RESULT, Settings
from scanme.models import UploadedFile
from scanme.services.parse import extract_text
from scanme.services.prompt import build_prompt
from scanme.services.sanitize import decode_analysis, sanitize_response

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 200


class AnalysisService:
    """
    Runs one upload through extract -> prompt -> model -> sanitize -> decode.

    Extraction errors (ClientInputError) and provider failures (ProviderError)
    propagate to the caller. A reply that does not decode to a JSON object is
    replaced with FALLBACK_RESULT; the model is never called twice.
    """

    def __init__(self, llm: TextGenerator, settings: Settings):
        self.llm = llm
        self.settings = settings

    async def analyze(self, upload: UploadedFile) -> Dict[str, Any]:
        logger.info(f"Processing: {upload.original_name} ({upload.size_bytes} bytes)")

        # pymupdf is blocking, keep it off the event loop
        resume_text = await asyncio.to_thread(
            extract_text, upload.data, upload.media_type, self.settings.temp_dir
        )

        prompt = build_prompt(resume_text)
        raw = await self.llm.generate(prompt)
        logger.info(f"Raw response: {raw[:PREVIEW_CHARS]}")

        cleaned = sanitize_response(raw)
        logger.info(f"Cleaned JSON: {cleaned[:PREVIEW_CHARS]}")

        analysis = decode_analysis(cleaned)
        if analysis is None:
            logger.warning(f"Returning fallback result, text that failed: {cleaned}")
            return copy.deepcopy(FALLBACK_RESULT)

        logger.info(f"Analysis complete - Score: {analysis.get('overallScore')}")
        return analysis
