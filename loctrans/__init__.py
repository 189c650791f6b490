"""
loctrans - Localization file translation CLI

Walks a source tree, extracts strings from iOS .strings, Android
strings.xml and portal JSON files, sends them to a translation endpoint,
and writes translated files in the same format under language-suffixed
paths.

Quick start:
    loctrans translate --source ./App --language fr --endpoint https://...
    loctrans extract --input App/en.lproj/Localizable.strings
"""

__version__ = "1.0.0"

from .errors import ConfigError, LocalizationError, ParseError, TranslationUnavailable
from .format_handlers import FormatRegistry, LocalizationTable, Platform, decode, encode
from .paths import resolve_destination
from .results import ResultAggregator
from .router import ConversionJob, Direction, route

__all__ = [
    "ConfigError",
    "LocalizationError",
    "ParseError",
    "TranslationUnavailable",
    "FormatRegistry",
    "LocalizationTable",
    "Platform",
    "decode",
    "encode",
    "resolve_destination",
    "ResultAggregator",
    "ConversionJob",
    "Direction",
    "route",
]
