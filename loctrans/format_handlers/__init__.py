#!/usr/bin/env python3
"""
Format handlers for localization file formats.

Supported platforms:
- ios: Apple .strings files
- android: Android strings.xml resources
- portal: flat JSON key/value files
"""

from typing import Union

from .base import (
    FormatHandler,
    FormatRegistry,
    LocalizationTable,
    Platform,
    PLATFORM_EXTENSIONS,
)
from .android_xml import AndroidXmlHandler
from .ios_strings import IosStringsHandler
from .portal_json import PortalJsonHandler

FormatRegistry.register(IosStringsHandler)
FormatRegistry.register(AndroidXmlHandler)
FormatRegistry.register(PortalJsonHandler)


def decode(platform: Union[Platform, str], content: str) -> LocalizationTable:
    """Decode raw content of the given platform into a localization table."""
    return FormatRegistry.get_handler(platform).decode(content)


def encode(platform: Union[Platform, str], table: LocalizationTable, language_code: str) -> str:
    """Encode a localization table into the given platform's format."""
    return FormatRegistry.get_handler(platform).encode(table, language_code)


__all__ = [
    'FormatHandler',
    'FormatRegistry',
    'LocalizationTable',
    'Platform',
    'PLATFORM_EXTENSIONS',
    'AndroidXmlHandler',
    'IosStringsHandler',
    'PortalJsonHandler',
    'decode',
    'encode',
]
