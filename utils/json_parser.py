"""JSON parsing for model responses."""

import json
import re
from typing import Any, Dict, Optional

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)
_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


def strip_code_fences(text: str) -> str:
    """Return the body of the first markdown code fence, or the text unchanged."""
    match = _FENCE_RE.search(text)
    if match:
        return match.group(1).strip()
    return text.strip()


def clean_json_string(json_str: str) -> str:
    """Remove trailing commas before closing braces and brackets."""
    return re.sub(r",\s*([}\]])", r"\1", json_str)


def extract_json_object(text: str) -> Optional[str]:
    """Outermost ``{...}`` span of the text, cleaned."""
    match = _OBJECT_RE.search(text)
    if match:
        return clean_json_string(match.group(0))
    return None


def parse_json_safe(text: str, fallback_to_extraction: bool = True) -> Dict[str, Any]:
    """
    Parse a JSON object out of model output.

    Args:
        text: Raw model output, possibly fenced or surrounded by prose
        fallback_to_extraction: Retry on the outermost ``{...}`` span when direct parsing fails

    Returns:
        Parsed JSON object

    Raises:
        ValueError: If no JSON object can be parsed
    """
    if not text or not text.strip():
        raise ValueError("Empty text provided for JSON parsing")

    cleaned_text = strip_code_fences(text)
    candidates = [cleaned_text]
    if fallback_to_extraction:
        extracted = extract_json_object(cleaned_text)
        if extracted:
            candidates.append(extracted)

    for candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed

    raise ValueError(f"Could not parse JSON object from text: {cleaned_text[:500]}")
