"""Pull a JSON object out of an LLM reply."""

from __future__ import annotations

import json
import re

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)


def extract_json(text: str) -> dict | list:
    """Extract JSON from an LLM response.

    Tries the whole text, then the first fenced code block, then the span
    from the first ``{`` to the last ``}``.

    Raises:
        ValueError: if none of the candidates parse.
    """
    text = (text or "").strip()
    candidates = [text]

    fenced = _FENCE_RE.search(text)
    if fenced:
        candidates.append(fenced.group(1))

    start, end = text.find("{"), text.rfind("}")
    if start != -1 and end > start:
        candidates.append(text[start : end + 1])

    for candidate in candidates:
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            continue

    raise ValueError(f"Could not extract JSON from text: {text[:200]}...")


def strip_code_fences(text: str) -> str:
    """Remove a single wrapping ``` fence (with optional language tag)."""
    lines = text.strip().split("\n")
    if lines and lines[0].strip().startswith("```"):
        lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
    return "\n".join(lines).strip()
