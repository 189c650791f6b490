#!/usr/bin/env python3
"""
Tests for forward/reverse routing of conversion jobs.
"""

import json

import pytest

from loctrans.errors import ParseError
from loctrans.format_handlers import FormatRegistry, Platform
from loctrans.router import ConversionJob, Direction, route


def _write(path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_forward_decodes_source(tmp_path):
    source = _write(tmp_path / "en.lproj" / "Localizable.strings", '"hello" = "Hello";\n')
    table = route(ConversionJob(source, Platform.IOS, "fr", Direction.FORWARD))
    assert table == {"hello": "Hello"}


def test_forward_reads_source_with_byte_order_mark(tmp_path):
    source = tmp_path / "en.lproj" / "Localizable.strings"
    source.parent.mkdir(parents=True)
    source.write_text('"hello" = "Hello";\n"bye" = "Bye";\n', encoding="utf-8-sig")
    table = route(ConversionJob(source, Platform.IOS, "fr", Direction.FORWARD))
    assert table == {"hello": "Hello", "bye": "Bye"}


def test_reverse_writes_destination(tmp_path):
    source = _write(tmp_path / "en.lproj" / "Localizable.strings", '"hello" = "Hello";\n')
    destination = route(ConversionJob(source, Platform.IOS, "fr", Direction.REVERSE), {"hello": "Bonjour"})
    assert destination == (tmp_path / "fr.lproj" / "Localizable.strings").resolve()
    assert destination.read_text(encoding="utf-8") == '"hello" = "Bonjour";\n'


def test_reverse_android(tmp_path):
    source = _write(tmp_path / "values" / "strings.xml", '<resources><string name="a">A</string></resources>')
    destination = route(ConversionJob(source, "android", "de", "reverse"), {"a": "Ä & Ö"})
    assert destination.parent.name == "values-de"
    text = destination.read_text(encoding="utf-8")
    assert text.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert "Ä &amp; Ö" in text


def test_reverse_portal(tmp_path):
    source = _write(tmp_path / "Localization" / "app.json", json.dumps({"a": "A"}))
    destination = route(ConversionJob(source, Platform.PORTAL, "ur", Direction.REVERSE), {"a": "اے"})
    assert destination.name == "app_ur.json"
    assert json.loads(destination.read_text(encoding="utf-8")) == {"a": "اے"}


def test_reverse_without_table_converts_json_dump(tmp_path):
    source = _write(tmp_path / "ios" / "en.lproj" / "Localizable.strings.json", json.dumps({"k": "v"}))
    destination = route(ConversionJob(source, Platform.IOS, "fr", Direction.REVERSE))
    assert destination == (tmp_path / "ios" / "fr.lproj" / "Localizable.strings").resolve()
    assert destination.read_text(encoding="utf-8") == '"k" = "v";\n'


def test_forward_parse_error_propagates(tmp_path):
    source = _write(tmp_path / "values" / "strings.xml", "<resources><string>")
    with pytest.raises(ParseError):
        route(ConversionJob(source, Platform.ANDROID, "fr", Direction.FORWARD))


def test_forward_missing_file_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        route(ConversionJob(tmp_path / "missing.json", Platform.PORTAL, "fr", Direction.FORWARD))


@pytest.mark.parametrize("platform", list(Platform))
def test_decode_encode_round_trip_through_files(tmp_path, platform):
    """decode(encode(T)) == T for each platform, through the filesystem."""
    table = {"greeting": "Hello", "farewell": "Goodbye for now", "count": "%d items"}
    source = _write(tmp_path / "src" / f"file{platform.extension}", "")
    destination = route(ConversionJob(source, platform, "fr", Direction.REVERSE), table)
    reread = route(ConversionJob(destination, platform, "fr", Direction.FORWARD))
    assert reread == table


def test_detect_platform_by_extension():
    assert FormatRegistry.detect_platform("a/en.lproj/x.strings") is Platform.IOS
    assert FormatRegistry.detect_platform("a/values/strings.xml") is Platform.ANDROID
    assert FormatRegistry.detect_platform("a/Localization/app.json") is Platform.PORTAL
    assert FormatRegistry.detect_platform("a/readme.txt") is Platform.PORTAL


def test_detect_platform_for_converted_input():
    assert FormatRegistry.detect_platform("exports/Android/strings.json", converted=True) is Platform.ANDROID
    assert FormatRegistry.detect_platform("exports/iOS/app.json", converted=True) is Platform.IOS
    assert FormatRegistry.detect_platform("exports/misc/app.json", converted=True) is Platform.PORTAL
