"""Extracts transcript and summary from free-form model output."""

import json
import re
from typing import Any, Callable

from audio_notes.domain.models import NO_SUMMARY, NO_TRANSCRIPT, ParsedResult
from audio_notes.exceptions import (
    EmptyAIResponseError,
    InvalidAIResponseError,
    MissingFieldsError,
)
from audio_notes.logging import setup_logging

logger = setup_logging(__name__)

_CODE_FENCE = re.compile(r"\s*```(?:json)?\s*")
_BRACED_SPAN = re.compile(r"\{[\s\S]*\}")

ParseStrategy = Callable[[str], dict[str, Any] | None]


def strip_code_fences(text: str) -> str:
    """Removes markdown code-fence markers and surrounding whitespace."""
    return _CODE_FENCE.sub("\n", text).strip()


def _load_object(candidate: str) -> dict[str, Any] | None:
    try:
        value = json.loads(candidate)
    except json.JSONDecodeError:
        return None
    return value if isinstance(value, dict) else None


def parse_direct(text: str) -> dict[str, Any] | None:
    """Parses the whole cleaned text as a JSON object."""
    return _load_object(text)


def parse_braced_span(text: str) -> dict[str, Any] | None:
    """Parses the span from the first '{' to the last '}' as a JSON object."""
    match = _BRACED_SPAN.search(text)
    if match is None:
        return None
    return _load_object(match.group(0))


PARSE_STRATEGIES: tuple[ParseStrategy, ...] = (parse_direct, parse_braced_span)


def extract_json_object(text: str) -> dict[str, Any]:
    """
    Extracts a JSON object from model output using each strategy in order.

    Args:
        text: Raw text returned by the model.

    Returns:
        The first JSON object any strategy produced.

    Raises:
        EmptyAIResponseError: If the text is empty or whitespace.
        InvalidAIResponseError: If no JSON object can be recovered.
    """
    if not text or not text.strip():
        raise EmptyAIResponseError()

    cleaned = strip_code_fences(text)

    for strategy in PARSE_STRATEGIES:
        parsed = strategy(cleaned)
        if parsed is not None:
            logger.info(
                "AI response parsed", extra={"strategy": strategy.__name__}
            )
            return parsed

    if _BRACED_SPAN.search(cleaned) is None:
        logger.error(
            "No JSON object found in AI response",
            extra={"response_length": len(text)},
        )
        raise InvalidAIResponseError("Invalid response format from AI service")

    logger.error(
        "AI response JSON could not be parsed",
        extra={"response_length": len(text)},
    )
    raise InvalidAIResponseError("Failed to parse AI response as JSON")


def _normalize_field(value: Any) -> str:
    """Coerces a parsed field to text; empty values become ''."""
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return "\n".join(
            item if isinstance(item, str) else json.dumps(item) for item in value
        )
    return json.dumps(value)


def parse_ai_response(text: str) -> ParsedResult:
    """
    Converts raw model output into a ParsedResult.

    A single missing field falls back to a placeholder; if both are missing
    the response is rejected.

    Raises:
        EmptyAIResponseError: If the text is empty.
        InvalidAIResponseError: If no JSON object can be recovered.
        MissingFieldsError: If neither transcript nor summary is present.
    """
    payload = extract_json_object(text)

    transcript = _normalize_field(payload.get("transcript"))
    summary = _normalize_field(payload.get("summary"))

    if not transcript and not summary:
        logger.error(
            "AI response missing required fields",
            extra={"keys": sorted(payload.keys())},
        )
        raise MissingFieldsError()

    return ParsedResult(
        transcript=transcript or NO_TRANSCRIPT,
        summary=summary or NO_SUMMARY,
    )
