"""
Tolerant attribution response parser.

Recovers a validated attribution structure from free-text model output:
strips markdown fences, isolates the outer JSON object, repairs truncated
generations, then projects the parsed tree into the attribution models.

Dependencies: pydantic, backend.models.attribution, backend.core.exceptions
System role: Response recovery stage of the attribution pipeline
"""

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from backend.core.exceptions import (
    EmptyGenerationError,
    InvalidAttributionShapeError,
    ParseFailureError,
)
from backend.models.attribution import AttributionSection, AttributionType

logger = logging.getLogger(__name__)

_FENCE_OPEN = re.compile(r"```json\s*")
_FENCE_ANY = re.compile(r"```\s*")
_CLOSER_FOR = {"{": "}", "[": "]"}


def strip_code_fences(text: str) -> str:
    """Remove ```json and ``` markers wherever they appear."""
    return _FENCE_ANY.sub("", _FENCE_OPEN.sub("", text))


def _scan(text: str) -> tuple[int | None, list[str], bool]:
    """
    Walk text tracking JSON nesting, skipping string contents.

    Args:
        text: Text starting at an opening brace

    Returns:
        tuple: (index where the outermost container closes or None,
                stack of still-open brackets, whether the scan ended inside a string)
    """
    stack: list[str] = []
    in_string = False
    escaped = False

    for index, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char in _CLOSER_FOR:
            stack.append(char)
        elif char in ("}", "]"):
            if not stack or _CLOSER_FOR[stack[-1]] != char:
                raise ParseFailureError(
                    "Mismatched bracket in attribution JSON",
                    details={"position": index},
                )
            stack.pop()
            if not stack:
                return index, [], False

    return None, stack, in_string


def repair_truncated_json(text: str) -> str:
    """
    Close a truncated JSON object at its last complete brace.

    Everything after the last structural '}' is dropped and the brackets
    still open at that point are closed in order. For a generation cut off
    inside a statements array this appends ']}]}'. A '}' that sits inside a
    string value is skipped in favour of the previous one.

    Args:
        text: JSON text starting at the outer '{' whose outer object never closes

    Returns:
        str: Repaired JSON text

    Raises:
        ParseFailureError: No complete brace outside a string to cut at
    """
    last_brace = text.rfind("}")
    while last_brace > 0:
        prefix = text[: last_brace + 1]
        closed_at, stack, in_string = _scan(prefix)
        if closed_at is not None:
            return prefix[: closed_at + 1]
        if not in_string:
            return prefix + "".join(_CLOSER_FOR[opener] for opener in reversed(stack))
        last_brace = text.rfind("}", 0, last_brace)

    raise ParseFailureError("Truncated attribution JSON has no complete object to keep")


def extract_json_object(text: str) -> str:
    """
    Isolate the outer JSON object in model output.

    Leading and trailing prose is discarded. A truncated object is passed
    through repair_truncated_json.

    Args:
        text: Fence-free model output

    Returns:
        str: Candidate JSON text

    Raises:
        ParseFailureError: No object found or repair impossible
    """
    start = text.find("{")
    if start == -1:
        raise ParseFailureError("No JSON object found in attribution response")

    body = text[start:]
    closed_at, _, _ = _scan(body)
    if closed_at is not None:
        return body[: closed_at + 1]

    logger.warning("Attribution JSON appears truncated, attempting repair")
    return repair_truncated_json(body)


def _apply_defaults(raw_sections: list[Any]) -> list[Any]:
    """Fill omitted statement fields before projection."""
    for section in raw_sections:
        if not isinstance(section, dict):
            continue
        if section.get("statements") is None:
            section["statements"] = []
        if not isinstance(section["statements"], list):
            continue
        for statement in section["statements"]:
            if not isinstance(statement, dict):
                continue
            if not statement.get("attribution_type"):
                statement["attribution_type"] = AttributionType.CLINICAL_REASONING.value
            if statement.get("sources") is None:
                statement["sources"] = []
    return raw_sections


def parse_attribution_response(raw: str) -> list[AttributionSection]:
    """
    Parse raw model output into attribution sections.

    Args:
        raw: Model output text

    Returns:
        list[AttributionSection]: Validated sections with defaults applied

    Raises:
        EmptyGenerationError: Output is blank
        ParseFailureError: JSON could not be extracted, repaired, or parsed
        InvalidAttributionShapeError: JSON does not match the attribution shape
    """
    text = raw.strip() if raw else ""
    if not text:
        raise EmptyGenerationError("Empty attribution response from AI")

    try:
        candidate = extract_json_object(strip_code_fences(text).strip())

        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError as e:
            raise ParseFailureError(
                f"Attribution response is not valid JSON: {e.msg}",
                details={"line": e.lineno, "column": e.colno},
            ) from e
        except RecursionError as e:
            raise ParseFailureError("Attribution response JSON is nested too deeply") from e

        if not isinstance(parsed, dict) or not isinstance(parsed.get("sections"), list):
            raise InvalidAttributionShapeError(
                "Invalid attribution structure: missing sections array"
            )

        try:
            return [
                AttributionSection.model_validate(section)
                for section in _apply_defaults(parsed["sections"])
            ]
        except ValidationError as e:
            raise InvalidAttributionShapeError(
                "Invalid attribution structure: sections do not match schema",
                details={"errors": e.error_count()},
            ) from e

    except ParseFailureError as e:
        logger.warning(f"Failed to parse attribution response: {e}")
        logger.debug(f"Raw attribution response: {raw}")
        raise
