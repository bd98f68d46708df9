"""
Turn free model text into a structured itinerary payload.

Sanitization and parsing are separate steps: models like to wrap JSON in
markdown fences, and stripping them is tested on its own.
"""
import json
import logging
import re

from trip_planner.core.result import Failure, FailureKind, Ok, Result

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", text or "").strip()


def parse_itinerary_payload(text: str) -> Result[dict]:
    cleaned = strip_code_fences(text)
    if not cleaned:
        return Failure(FailureKind.parse_failure, "empty model output")
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.debug("Model output is not JSON: %r", cleaned[:200])
        return Failure(FailureKind.parse_failure, f"invalid JSON: {exc.msg}")

    if not isinstance(data, dict):
        return Failure(FailureKind.parse_failure, "top-level value is not an object")
    days = data.get("days")
    if not isinstance(days, list) or not days:
        return Failure(FailureKind.parse_failure, "missing or empty 'days' array")
    if not all(isinstance(day, dict) for day in days):
        return Failure(FailureKind.parse_failure, "'days' entries must be objects")
    return Ok(data)
