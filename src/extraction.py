"""
Locating and parsing the JSON payload inside a model's free-text reply.
"""

import json

from pydantic import ValidationError

from src.errors import AnalysisDecodeError
from src.models import AnalysisResult


def extract_json(text: str) -> str:
    """
    Best-effort cut of the JSON object out of surrounding text.

    Takes everything from the first "{" to the last "}", then drops a leading
    ```json or ``` fence. Assumes the only braces are the payload's own; stray
    braces in commentary yield a malformed payload that fails at parse time.

    Returns:
        The payload, or "" when the text holds no braces at all
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return ""

    payload = text[start:end + 1].strip()
    if payload.startswith("```json"):
        payload = payload[len("```json"):]
    elif payload.startswith("```"):
        payload = payload[len("```"):]
    return payload.strip()


def parse_analysis(payload: str, raw_response: str = "") -> AnalysisResult:
    """
    Parse an extracted payload into an AnalysisResult.

    Raises:
        AnalysisDecodeError: Invalid JSON, or JSON that doesn't fit the schema
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise AnalysisDecodeError(f"failed to parse analysis: {e}", raw_response) from e

    if not isinstance(data, dict):
        raise AnalysisDecodeError("failed to parse analysis: expected a JSON object", raw_response)

    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise AnalysisDecodeError(f"failed to parse analysis: {errors}", raw_response) from e
