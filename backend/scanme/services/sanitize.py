from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# ``` with an optional language tag (```json, ```JSON5) and the line break after it
_FENCE_RE = re.compile(r"```[A-Za-z0-9_+\-]*[ \t]*\r?\n?")


def sanitize_response(raw: str) -> str:
    """
    Best-effort cleanup of a model reply into something that should parse as JSON.

    Fence markers are dropped (their content is kept), then the text is cut to the
    span between the first "{" and the last "}". Braces are not balanced and braces
    inside strings or surrounding prose are not understood, so the result can still
    be invalid JSON.
    """
    text = _FENCE_RE.sub("", raw or "")

    first = text.find("{")
    last = text.rfind("}")
    if first != -1 and last != -1 and first < last:
        text = text[first:last + 1]

    return text.strip()


def decode_analysis(text: str) -> Optional[Dict[str, Any]]:
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning(f"JSON parse error: {e}")
        return None

    if not isinstance(value, dict):
        logger.warning(f"Expected a JSON object, got {type(value).__name__}")
        return None
    return value
