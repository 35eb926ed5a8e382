"""
JSON extraction from model output.

Handles the formats models actually produce when asked for "JSON only":
- Clean JSON
- JSON in ```json blocks
- JSON in ``` blocks (no language tag)
- JSON surrounded by prose
"""

import json
import re
from functools import partial

_FENCE_OPEN_RE = re.compile(r"^```[\w-]*\s*")
_FENCE_CLOSE_RE = re.compile(r"\s*```$")


def strip_code_fence(text: str) -> str:
    """Remove a leading ```lang fence and a trailing ``` fence, if present."""
    text = text.strip()
    text = _FENCE_OPEN_RE.sub("", text, count=1)
    text = _FENCE_CLOSE_RE.sub("", text, count=1)
    return text.strip()


def extract_json(text: str, expect_array: bool = False) -> dict | list | None:
    """
    Extract JSON from a model response using several strategies.

    Args:
        text: Raw model response text
        expect_array: If True, expect a JSON array; if False, expect an object

    Returns:
        Parsed JSON of the expected type, or None if extraction fails
    """
    if not text or not text.strip():
        return None

    strategies = [
        _try_clean_json,
        _try_stripped_fence,
        _try_fenced_any,
        partial(_try_find_json_bounds, expect_array=expect_array),
    ]

    expected = list if expect_array else dict
    for strategy in strategies:
        result = strategy(text)
        if isinstance(result, expected):
            return result

    return None


def _try_clean_json(text: str) -> dict | list | None:
    """Try parsing the entire text as JSON."""
    try:
        return json.loads(text.strip())
    except json.JSONDecodeError:
        return None


def _try_stripped_fence(text: str) -> dict | list | None:
    """Parse after removing fences that wrap the whole response."""
    try:
        return json.loads(strip_code_fence(text))
    except json.JSONDecodeError:
        return None


def _try_fenced_any(text: str) -> dict | list | None:
    """Extract JSON from ``` ... ``` blocks anywhere in the text."""
    pattern = r"```(?:\w*)\s*([\s\S]*?)\s*```"
    for match in re.findall(pattern, text):
        try:
            return json.loads(match.strip())
        except json.JSONDecodeError:
            continue
    return None


def _try_find_json_bounds(text: str, expect_array: bool = False) -> dict | list | None:
    """Find JSON by matching brackets/braces, trying the expected kind first."""
    pairs = [("{", "}"), ("[", "]")]
    if expect_array:
        pairs.reverse()
    for open_char, close_char in pairs:
        start = text.find(open_char)
        if start == -1:
            continue
        candidate = _extract_balanced(text, start, open_char, close_char)
        if candidate:
            try:
                return json.loads(candidate)
            except json.JSONDecodeError:
                pass
    return None


def _extract_balanced(text: str, start: int, open_char: str, close_char: str) -> str | None:
    """Extract balanced brackets/braces starting from position."""
    depth = 0
    in_string = False
    escape_next = False

    for i, char in enumerate(text[start:], start):
        if escape_next:
            escape_next = False
            continue

        if char == "\\" and in_string:
            escape_next = True
            continue

        if char == '"':
            in_string = not in_string
            continue

        if in_string:
            continue

        if char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                return text[start : i + 1]

    return None
