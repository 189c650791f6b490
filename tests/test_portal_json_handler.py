#!/usr/bin/env python3
"""
Tests for PortalJsonHandler.
"""

import json
import logging

import pytest

from loctrans.errors import ParseError
from loctrans.format_handlers.portal_json import PortalJsonHandler


@pytest.fixture
def handler():
    return PortalJsonHandler()


def test_decode_flat_object(handler):
    content = json.dumps({"welcome": "Welcome", "logout": "Sign out"})
    table = handler.decode(content)
    assert table == {"welcome": "Welcome", "logout": "Sign out"}
    assert list(table) == ["welcome", "logout"]


def test_decode_skips_non_string_values(handler, caplog):
    content = json.dumps({"title": "Home", "count": 3, "nested": {"a": "b"}})
    with caplog.at_level(logging.WARNING):
        assert handler.decode(content) == {"title": "Home"}
    assert len(caplog.records) == 2


def test_decode_rejects_non_object(handler):
    with pytest.raises(ParseError):
        handler.decode('["a", "b"]')


def test_decode_rejects_invalid_json(handler):
    with pytest.raises(ParseError):
        handler.decode('{"a": ')


def test_encode_is_compact_and_keeps_unicode(handler):
    output = handler.encode({"a": "Café", "b": "x"}, "fr")
    assert output == '{"a":"Café","b":"x"}'


def test_round_trip(handler):
    table = {"quote": 'He said "hi"', "amp": "Tom & Jerry", "nl": "a\nb", "emoji": "\U0001F600"}
    assert handler.decode(handler.encode(table, "fr")) == table
