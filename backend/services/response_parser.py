"""Tolerant extraction of a JSON array from free-form model output."""

import json
import logging
import re
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)

# Greedy: first "[" through last "]"
_ARRAY_PATTERN = re.compile(r"\[[\s\S]*\]")


class ParseStatus(str, Enum):
    SUCCESS = "success"
    PARSE_FAILURE = "parse_failure"
    EMPTY = "empty"  # no response text at all


@dataclass(frozen=True)
class ParseResult:
    status: ParseStatus
    items: list = field(default_factory=list)
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.SUCCESS


def parse_json_array(text: str | None) -> ParseResult:
    """Parse the first bracket-delimited array found in ``text``.

    Never raises. Any failure (no text, no array-shaped substring, invalid
    JSON, or a JSON value that is not a list of objects) is reported in the
    returned ``ParseResult``.
    """
    if text is None or not text.strip():
        return ParseResult(ParseStatus.EMPTY, error="No response text")

    match = _ARRAY_PATTERN.search(text)
    if not match:
        logger.warning("No JSON array found in model response: %s", text[:200])
        return ParseResult(ParseStatus.PARSE_FAILURE, error="No JSON array found")

    try:
        data = json.loads(match.group())
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse model response as JSON: %s", e)
        return ParseResult(ParseStatus.PARSE_FAILURE, error=str(e))

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        return ParseResult(ParseStatus.PARSE_FAILURE, error="Expected a JSON array of objects")

    return ParseResult(ParseStatus.SUCCESS, items=data)
