#!/usr/bin/env python3
"""
Tests for AndroidXmlHandler.

Tests verify:
1. <string> resources decode to name -> text, with entities and escapes resolved
2. Missing resources/string structure yields an empty table plus a warning
3. Encoding escapes apostrophes, quotes and ampersands for every language
4. Round-trip integrity
"""

import logging

import pytest

from loctrans.errors import ParseError
from loctrans.format_handlers.android_xml import AndroidXmlHandler, XML_DECLARATION


TEST_XML = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="app_name">My App</string>
    <string name="welcome">Welcome, %1$s!</string>
    <string name="apostrophe">Don\\'t stop</string>
    <string name="quoted">Say \\"cheese\\"</string>
    <string name="multiline">Line 1\\nLine 2</string>
</resources>"""


@pytest.fixture
def handler():
    return AndroidXmlHandler()


def test_entry_text_extraction(handler):
    """Text is extracted and unescaped for every <string>."""
    table = handler.decode(TEST_XML)
    assert table == {
        "app_name": "My App",
        "welcome": "Welcome, %1$s!",
        "apostrophe": "Don't stop",
        "quoted": 'Say "cheese"',
        "multiline": "Line 1\nLine 2",
    }


def test_entities_decode(handler):
    content = '<resources><string name="greeting">Hello &amp; welcome</string></resources>'
    assert handler.decode(content) == {"greeting": "Hello & welcome"}


def test_double_escaped_entities_decode(handler):
    """Entities escaped twice by older tooling still decode to literal characters."""
    content = '<resources><string name="tag">&amp;lt;b&amp;gt; &amp;amp; &amp;quot;x&amp;quot;</string></resources>'
    assert handler.decode(content) == {"tag": '<b> & "x"'}


def test_single_string_element(handler):
    content = '<resources><string name="only">One</string></resources>'
    assert handler.decode(content) == {"only": "One"}


def test_inline_markup_contributes_text(handler):
    content = (
        '<resources xmlns:xliff="urn:oasis:names:tc:xliff:document:1.2">'
        '<string name="count">You have <xliff:g id="n">%d</xliff:g> items</string>'
        '</resources>'
    )
    assert handler.decode(content) == {"count": "You have %d items"}


def test_missing_string_elements_warns(handler, caplog):
    """No resources/string structure: empty table and a warning, not an exception."""
    with caplog.at_level(logging.WARNING, logger="loctrans.format_handlers.android_xml"):
        table = handler.decode('<resources><plurals name="x"/></resources>')
    assert table == {}
    assert any("resources/string" in record.getMessage() for record in caplog.records)


def test_wrong_root_warns(handler, caplog):
    with caplog.at_level(logging.WARNING):
        assert handler.decode('<strings><string name="a">b</string></strings>') == {}
    assert caplog.records


def test_malformed_xml_raises(handler):
    with pytest.raises(ParseError):
        handler.decode('<resources><string name="a">unclosed</resources>')


def test_encode_structure(handler):
    output = handler.encode({"app_name": "Mi Aplicacion"}, "es")
    assert output.startswith(XML_DECLARATION + "\n")
    assert "<resources>" in output
    assert '    <string name="app_name">Mi Aplicacion</string>' in output
    assert output.rstrip().endswith("</resources>")


def test_encode_escapes_special_characters(handler):
    output = handler.encode({"msg": "It's \"fine\" & <ok>"}, "de")
    assert "It\\'s \\\"fine\\\" &amp; &lt;ok&gt;" in output


def test_apostrophes_escaped_for_every_language(handler):
    """Escaping must not depend on the target language."""
    for code in ("fr", "de", "ar", "zh-Hans"):
        assert "L\\'app" in handler.encode({"k": "L'app"}, code)


def test_leading_reference_characters_escaped(handler):
    table = {"at": "@home", "question": "?maybe"}
    output = handler.encode(table, "fr")
    assert "\\@home" in output
    assert "\\?maybe" in output
    assert handler.decode(output) == table


def test_escaping_round_trip(handler):
    """A value with ', ", & and a newline survives encode -> decode exactly."""
    table = {"tricky": "It's a \"test\" & more\nsecond line"}
    assert handler.decode(handler.encode(table, "fr")) == table


def test_carriage_return_round_trip(handler):
    table = {"k": "a\r\nb"}
    output = handler.encode(table, "fr")
    assert "a\\r\\nb" in output
    assert handler.decode(output) == table


def test_round_trip_preserves_order(handler):
    table = {"z": "Last", "a": "First", "m": "Back\\slash", "empty": ""}
    decoded = handler.decode(handler.encode(table, "it"))
    assert decoded == table
    assert list(decoded) == list(table)
