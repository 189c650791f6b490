#!/usr/bin/env python3
"""
Tests for IosStringsHandler.

Tests verify:
1. Line and block comments (including multi-line blocks) are never entries
2. Escapes are decoded to plain text and re-applied on encode
3. Malformed statements are skipped, unterminated strings are errors
4. Round-trip integrity
"""

import pytest

from loctrans.errors import ParseError
from loctrans.format_handlers import decode, encode
from loctrans.format_handlers.ios_strings import IosStringsHandler


@pytest.fixture
def handler():
    return IosStringsHandler()


def test_skips_comment_lines(handler):
    """Comment lines around entries are ignored."""
    content = '/* comment */\n"a" = "b";\n// note\n"c" = "d";'
    assert handler.decode(content) == {"a": "b", "c": "d"}


def test_skips_multiline_block_comment(handler):
    """A block comment spanning lines, even one containing entry-like text, is skipped."""
    content = (
        '/*\n'
        ' "ghost" = "not an entry";\n'
        '*/\n'
        '"title" = "Settings";\n'
        '"subtitle" = "General"; /* trailing */\n'
    )
    assert handler.decode(content) == {"title": "Settings", "subtitle": "General"}


def test_preserves_order_and_last_duplicate_wins(handler):
    content = '"b" = "1";\n"a" = "2";\n"b" = "3";\n'
    table = handler.decode(content)
    assert list(table) == ["b", "a"]
    assert table["b"] == "3"


def test_unescapes_values(handler):
    """Escaped quotes, backslashes, newlines and unicode escapes decode to text."""
    content = r'"quote" = "Say \"hi\"";' + '\n' + r'"multi" = "Line 1\nLine 2\tTabbed \\ done \U00E9";'
    table = handler.decode(content)
    assert table["quote"] == 'Say "hi"'
    assert table["multi"] == "Line 1\nLine 2\tTabbed \\ done \u00e9"


def test_value_with_semicolon_and_equals(handler):
    content = '"formula" = "a = b; c = d";\n'
    assert handler.decode(content) == {"formula": "a = b; c = d"}


def test_skips_malformed_lines(handler):
    """Lines that do not match the entry form are skipped, not rejected."""
    content = (
        'garbage line\n'
        '"missing_semicolon" = "x"\n'
        '"ok" = "fine";\n'
        'unquoted = "value";\n'
        '"no_value" = ;\n'
        '"last" = "one";\n'
    )
    assert handler.decode(content) == {"ok": "fine", "last": "one"}


def test_dangling_assignment_keeps_next_line(handler):
    """A key with no value on its line does not consume the following entry."""
    content = '"a" =\n"b" = "c";\n"d" = "e";\n'
    assert handler.decode(content) == {"b": "c", "d": "e"}


def test_leading_byte_order_mark(handler):
    content = '\ufeff"first" = "One";\n"second" = "Two";\n'
    assert handler.decode(content) == {"first": "One", "second": "Two"}


def test_unterminated_string_raises(handler):
    with pytest.raises(ParseError):
        handler.decode('"key" = "never closed;\n')


def test_unterminated_block_comment_raises(handler):
    with pytest.raises(ParseError):
        handler.decode('"a" = "b";\n/* open comment\n"c" = "d";\n')


def test_empty_content(handler):
    assert handler.decode("") == {}
    assert handler.encode({}, "fr") == ""


def test_encode_escapes_defensively(handler):
    output = handler.encode({"greeting": 'He said "hi"\nC:\\path'}, "fr")
    assert output == '"greeting" = "He said \\"hi\\"\\nC:\\\\path";\n'


def test_encode_one_line_per_entry(handler):
    output = handler.encode({"a": "1", "b": "2"}, "de")
    assert output.splitlines() == ['"a" = "1";', '"b" = "2";']


def test_round_trip(handler):
    table = {
        "app.title": "My App",
        "quote": 'She said "yes"',
        "path": "C:\\Users",
        "lines": "First\nSecond",
        "percent": "%@ of %d",
    }
    assert handler.decode(handler.encode(table, "fr")) == table


def test_module_level_dispatch():
    table = {"k": "v"}
    assert decode("ios", encode("ios", table, "fr")) == table
