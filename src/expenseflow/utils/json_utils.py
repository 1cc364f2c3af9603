"""JSON extraction from agent text replies."""

import json
import re
from typing import Any


def extract_json_object(text: str) -> dict[str, Any] | None:
    """
    Return the first JSON object found in an agent reply.

    Agents sometimes answer with the payload as a string: bare JSON, JSON in a
    markdown code fence, or JSON surrounded by prose. All three are accepted.

    Args:
        text: Raw reply text.

    Returns:
        Parsed dict, or None when the text holds no JSON object.
    """
    if not text or not text.strip():
        return None
    text = text.strip()
    candidates = []
    if text.startswith("{"):
        candidates.append(text)
    if "```" in text:
        m = re.search(r"```(?:json)?\s*(\{.*?\})\s*```", text, re.DOTALL)
        if m:
            candidates.append(m.group(1))
    m = re.search(r"(\{[\s\S]*\})", text)
    if m:
        candidates.append(m.group(1))
    for candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed
    return None
