#!/usr/bin/env python3
"""
Base classes for format handlers.

FormatHandler is the abstract base class that every platform handler
implements. A handler decodes raw file content into a LocalizationTable
(an insertion-ordered mapping of key -> unescaped text) and encodes such a
table back into its platform format.
"""

import re
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Insertion-ordered key -> value mapping; values hold unescaped human text.
LocalizationTable = dict[str, str]


class Platform(str, Enum):
    """Localization platforms and their native file formats."""
    IOS = "ios"
    ANDROID = "android"
    PORTAL = "portal"

    @property
    def extension(self) -> str:
        return PLATFORM_EXTENSIONS[self]


PLATFORM_EXTENSIONS = {
    Platform.IOS: ".strings",
    Platform.ANDROID: ".xml",
    Platform.PORTAL: ".json",
}

# Used for converted inputs, where the extension no longer tells the platform
PLATFORM_PATH_PATTERN = re.compile(r'(android|ios|portal)', re.IGNORECASE)


class FormatHandler(ABC):
    """
    Abstract base class for platform-specific handlers.

    Each handler owns both directions for one platform: decode (extract
    entries for translation) and encode (re-emit a translated table). The
    language code is passed to encode so handlers see the target locale,
    but escaping rules must not depend on it.
    """

    @property
    @abstractmethod
    def platform(self) -> Platform:
        """Platform this handler serves."""
        pass

    @property
    def name(self) -> str:
        """Human-readable format name."""
        return self.platform.value

    @property
    def file_extension(self) -> str:
        """File extension (with dot) this handler reads and writes."""
        return self.platform.extension

    @abstractmethod
    def decode(self, content: str) -> LocalizationTable:
        """
        Decode raw file content into a localization table.

        Args:
            content: Raw file content as string

        Returns:
            Insertion-ordered mapping of key -> unescaped value

        Raises:
            ParseError: If the content violates the format's grammar
        """
        pass

    @abstractmethod
    def encode(self, table: LocalizationTable, language_code: str) -> str:
        """
        Encode a localization table into platform-native content.

        Args:
            table: Mapping of key -> unescaped value
            language_code: Target language code of the table

        Returns:
            Serialized file content
        """
        pass


class FormatRegistry:
    """Registry of available format handlers."""

    _handlers: dict[Platform, type[FormatHandler]] = {}
    _extension_map: dict[str, Platform] = {}

    @classmethod
    def register(cls, handler_class: type[FormatHandler]) -> None:
        """Register a format handler class."""
        handler = handler_class()
        cls._handlers[handler.platform] = handler_class
        cls._extension_map[handler.file_extension.lower()] = handler.platform

    @classmethod
    def get_handler(cls, platform: Union[Platform, str]) -> FormatHandler:
        """Get handler instance by platform (enum or name)."""
        try:
            key = Platform(platform.lower())
        except ValueError:
            key = None
        if key not in cls._handlers:
            available = ', '.join(p.value for p in cls._handlers)
            raise ValueError(f"Unknown platform: {platform}. Available: {available}")
        return cls._handlers[key]()

    @classmethod
    def get_handler_for_extension(cls, extension: str) -> FormatHandler:
        """Get handler instance by file extension."""
        ext = '.' + extension.lower().lstrip('.')
        if ext not in cls._extension_map:
            available = ', '.join(cls._extension_map)
            raise ValueError(f"Unknown extension: {ext}. Supported: {available}")
        return cls.get_handler(cls._extension_map[ext])

    @classmethod
    def detect_platform(cls, filepath: Union[str, Path], converted: bool = False) -> Platform:
        """
        Detect the platform of a source file.

        Args:
            filepath: Path to the file
            converted: Input is a JSON dump of an already-extracted table;
                the platform is read from a path segment (ios/android/portal)
                instead of the extension.

        Returns:
            Detected Platform, falling back to portal
        """
        path = Path(filepath)
        if converted:
            match = PLATFORM_PATH_PATTERN.search(str(path).lower())
            if match:
                return Platform(match.group(1))
            return Platform.PORTAL

        ext = path.suffix.lower()
        return cls._extension_map.get(ext, Platform.PORTAL)

    @classmethod
    def list_formats(cls) -> list[dict[str, Any]]:
        """List all registered formats with their extensions."""
        return [
            {'platform': platform.value, 'extension': platform.extension}
            for platform in cls._handlers
        ]
