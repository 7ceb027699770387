"""
Parsing Module

Usage:
    from reelsmith.services.infrastructure.parsing import parse_json_response
"""

from .json_parser import (
    parse_json_response,
    extract_largest_balanced_json,
    fix_json_escapes,
    strip_markdown_fences,
    normalize_whitespace,
)

__all__ = [
    "parse_json_response",
    "extract_largest_balanced_json",
    "fix_json_escapes",
    "strip_markdown_fences",
    "normalize_whitespace",
]
