"""
Tolerant JSON parsing for LLM responses.

Models wrap JSON in markdown fences, emit invalid escapes, or surround the
payload with prose. These helpers recover the payload where possible.
"""

import json
import re
from typing import Any, Dict, List, Optional


_VALID_ESCAPES = {
    '\\"': "\x00Q\x00",
    "\\\\": "\x00B\x00",
    "\\/": "\x00S\x00",
    "\\b": "\x00b\x00",
    "\\f": "\x00f\x00",
    "\\n": "\x00n\x00",
    "\\r": "\x00r\x00",
    "\\t": "\x00t\x00",
}


def strip_markdown_fences(text: str) -> str:
    """Drop ``` fence lines, keeping what is between them."""
    text = text.strip()
    if not text.startswith("```"):
        return text
    lines = [line for line in text.split("\n") if not line.strip().startswith("```")]
    return "\n".join(lines).strip()


def extract_largest_balanced_json(text: str) -> Optional[str]:
    """Return the longest balanced ``{...}`` or ``[...]`` substring, ignoring brackets in strings."""
    if not text:
        return None

    in_string = False
    escape = False
    stack: List[str] = []
    start: Optional[int] = None
    best: Optional[str] = None
    pairs = {"}": "{", "]": "["}

    for i, ch in enumerate(text):
        if in_string:
            if escape:
                escape = False
            elif ch == "\\":
                escape = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch in "{[":
            if not stack:
                start = i
            stack.append(ch)
        elif ch in "}]" and stack:
            if stack[-1] != pairs[ch]:
                stack.clear()
                start = None
                continue
            stack.pop()
            if not stack and start is not None:
                candidate = text[start:i + 1]
                if best is None or len(candidate) > len(best):
                    best = candidate
                start = None

    return best


def fix_json_escapes(text: str) -> str:
    """Double any backslash that does not start a valid JSON escape."""
    for valid, marker in _VALID_ESCAPES.items():
        text = text.replace(valid, marker)
    text = re.sub(r"\\u([0-9a-fA-F]{4})", "\x00u\\1\x00", text)

    text = text.replace("\\", "\\\\")

    text = re.sub("\x00u([0-9a-fA-F]{4})\x00", r"\\u\1", text)
    for valid, marker in _VALID_ESCAPES.items():
        text = text.replace(marker, valid)
    return text


def parse_json_response(text: str, default: Optional[Dict[str, Any]] = None) -> Any:
    """Parse JSON from an LLM response, returning ``default`` ({} if unset) when nothing parses.

    Tries, in order: the fence-stripped text, the same with escapes repaired,
    and the largest balanced JSON substring.
    """
    if default is None:
        default = {}
    if not text:
        return default

    cleaned = strip_markdown_fences(text)
    candidates = [cleaned, fix_json_escapes(cleaned)]
    balanced = extract_largest_balanced_json(cleaned)
    if balanced:
        candidates.extend([balanced, fix_json_escapes(balanced)])

    for candidate in candidates:
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            continue
    return default


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim."""
    return re.sub(r"\s+", " ", text).strip()
