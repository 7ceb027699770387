"""
Tests for reelsmith.services.infrastructure.parsing.json_parser
"""

from reelsmith.services.infrastructure.parsing import (
    extract_largest_balanced_json,
    fix_json_escapes,
    normalize_whitespace,
    parse_json_response,
    strip_markdown_fences,
)


class TestParseJsonResponse:

    def test_plain_json(self):
        assert parse_json_response('{"chunks": ["a", "b"]}') == {"chunks": ["a", "b"]}

    def test_markdown_fenced_json(self):
        text = '```json\n{"prompts": ["p1"]}\n```'
        assert parse_json_response(text) == {"prompts": ["p1"]}

    def test_json_surrounded_by_prose(self):
        text = 'Here you go: {"chunks": ["Hello world."]} Let me know!'
        assert parse_json_response(text) == {"chunks": ["Hello world."]}

    def test_invalid_escape_is_repaired(self):
        text = '{"prompts": ["a \\d path"]}'
        assert parse_json_response(text) == {"prompts": ["a \\d path"]}

    def test_unparseable_returns_default(self):
        assert parse_json_response("not json at all") == {}
        assert parse_json_response("", default={"x": 1}) == {"x": 1}


class TestHelpers:

    def test_extract_largest_balanced_json_ignores_brackets_in_strings(self):
        text = 'noise {"a": "}"} and {"bigger": [1, 2, 3]}'
        assert extract_largest_balanced_json(text) == '{"bigger": [1, 2, 3]}'

    def test_extract_returns_none_without_json(self):
        assert extract_largest_balanced_json("plain text") is None

    def test_fix_json_escapes_keeps_valid_escapes(self):
        assert fix_json_escapes('"line\\nnext \\u00e9"') == '"line\\nnext \\u00e9"'

    def test_strip_markdown_fences(self):
        assert strip_markdown_fences("```\n[1]\n```") == "[1]"
        assert strip_markdown_fences("  [1]  ") == "[1]"

    def test_normalize_whitespace(self):
        assert normalize_whitespace(" Hello\n\tworld.  ") == "Hello world."
