"""Provider-call and output-normalization helpers shared by the flows."""

from __future__ import annotations

import logging
from typing import Any

import anthropic

from resume_insights.clients.llm_client import LLMClient
from resume_insights.errors import GenerationError, UnsupportedFormatError

logger = logging.getLogger(__name__)

_MEDIA_ERROR_MARKERS = (
    "unsupported_media_type",
    "media_type",
    "media type",
    "could not process pdf",
    "unsupported file",
)


def is_media_error(exc: Exception) -> bool:
    """True when a provider rejection is about the document encoding."""
    text = str(exc).lower()
    return any(marker in text for marker in _MEDIA_ERROR_MARKERS)


async def invoke_json(
    llm: LLMClient,
    *,
    prompt: str | list[dict],
    system: str,
    model: str,
    failure_message: str,
    max_tokens: int = 4096,
) -> dict:
    """Call the provider for a JSON object, mapping failures onto GenerationError."""
    try:
        data = await llm.generate_json(
            prompt=prompt,
            system=system,
            model=model,
            max_tokens=max_tokens,
        )
    except anthropic.BadRequestError as exc:
        if is_media_error(exc):
            raise UnsupportedFormatError() from exc
        raise GenerationError(failure_message) from exc
    except (anthropic.APIError, ValueError) as exc:
        raise GenerationError(failure_message) from exc

    if not isinstance(data, dict) or not data:
        logger.warning("Provider returned no usable object: %r", data)
        raise GenerationError(failure_message)
    return data


def string_list(value: Any) -> list[str]:
    """Normalize an optional provider array into a list of non-empty strings."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        logger.warning("Expected a list from provider, got %s", type(value).__name__)
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def unit_score(value: Any) -> float:
    """Coerce a provider score into [0, 1].

    Values from 2 to 100 are read as percentages; a small overshoot of the
    unit scale (1.2) is clamped rather than rescaled.
    """
    try:
        score = float(value)
    except (TypeError, ValueError):
        return 0.0
    if score != score:  # NaN
        return 0.0
    if 2.0 <= score <= 100.0:
        score /= 100.0
    return min(max(score, 0.0), 1.0)


async def invoke_text(
    llm: LLMClient,
    *,
    prompt: str | list[dict],
    system: str,
    model: str,
    failure_message: str,
    temperature: float = 0.0,
    max_tokens: int = 4096,
) -> str:
    """Call the provider for free text; empty replies raise GenerationError."""
    try:
        response = await llm.generate(
            prompt=prompt,
            system=system,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
        )
    except anthropic.BadRequestError as exc:
        if is_media_error(exc):
            raise UnsupportedFormatError() from exc
        raise GenerationError(failure_message) from exc
    except anthropic.APIError as exc:
        raise GenerationError(failure_message) from exc

    if not response.text.strip():
        raise GenerationError(failure_message)
    return response.text
