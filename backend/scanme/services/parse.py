from __future__ import annotations

import logging
import os
import time
import uuid
from pathlib import Path
from typing import List

import fitz  # pymupdf

from scanme.core import MIN_TEXT_CHARS
from scanme.errors import ExtractionTooShort, UnsupportedMediaType
from scanme.models import MediaType

logger = logging.getLogger(__name__)


def _temp_pdf_path(temp_dir: str) -> Path:
    folder = Path(temp_dir)
    folder.mkdir(parents=True, exist_ok=True)
    # time-derived, with a random suffix so concurrent uploads never share a file
    return folder / f"{time.time_ns()}-{uuid.uuid4().hex[:8]}.pdf"


def _page_fragments(page) -> List[str]:
    # words come back as (x0, y0, x1, y1, text, block_no, line_no, word_no)
    return [w[4] for w in page.get_text("words")]


def extract_text_from_pdf(data: bytes, temp_dir: str = "temp") -> str:
    temp_path = _temp_pdf_path(temp_dir)
    temp_path.write_bytes(data)
    try:
        with fitz.open(str(temp_path)) as doc:
            pages = [" ".join(_page_fragments(page)) for page in doc]
        return "\n".join(pages)
    finally:
        if temp_path.exists():
            os.remove(temp_path)


def extract_text_from_plain(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def extract_text(data: bytes, media_type: MediaType, temp_dir: str = "temp") -> str:
    if media_type == MediaType.PDF:
        text = extract_text_from_pdf(data, temp_dir)
    elif media_type == MediaType.PLAIN_TEXT:
        text = extract_text_from_plain(data)
    else:
        raise UnsupportedMediaType()

    if not text or len(text.strip()) < MIN_TEXT_CHARS:
        raise ExtractionTooShort()

    logger.info(f"Text extracted ({len(text)} chars)")
    return text
