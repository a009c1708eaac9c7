"""Extract JSON payloads from chat-completion responses."""

import json
import re
from typing import Any

_FENCE_PATTERN = re.compile(r"^```[a-zA-Z]*\s*\n?(.*?)\n?```$", re.DOTALL)


class GenerationError(Exception):
    """Raised when a model response cannot be turned into slides."""


def strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code fence such as ```json ... ```."""
    stripped = text.strip()
    match = _FENCE_PATTERN.match(stripped)
    if match:
        return match.group(1).strip()
    return stripped


def parse_json_payload(text: str | None) -> Any:
    if not text or not text.strip():
        raise GenerationError("Model returned an empty response")
    try:
        return json.loads(strip_code_fence(text))
    except json.JSONDecodeError as exc:
        raise GenerationError(f"Model response is not valid JSON: {exc.msg}") from exc


def parse_json_array(text: str | None) -> list[dict[str, Any]]:
    """Parse a JSON array of objects; a ``{"slides": [...]}`` wrapper is accepted."""
    payload = parse_json_payload(text)
    if isinstance(payload, dict):
        for key in ("slides", "items", "angles", "outline"):
            if isinstance(payload.get(key), list):
                payload = payload[key]
                break
    if not isinstance(payload, list):
        raise GenerationError("Expected a JSON array in the model response")
    items = [item for item in payload if isinstance(item, dict)]
    if not items:
        raise GenerationError("Model response contained no objects")
    return items


def parse_json_object(text: str | None) -> dict[str, Any]:
    """Parse a single JSON object; a one-element array is unwrapped."""
    payload = parse_json_payload(text)
    if isinstance(payload, list) and len(payload) == 1:
        payload = payload[0]
    if not isinstance(payload, dict):
        raise GenerationError("Expected a JSON object in the model response")
    return payload
