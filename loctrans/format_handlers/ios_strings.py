#!/usr/bin/env python3
"""
iOS .strings format handler.

Handles decoding and encoding of Apple .strings localization files used in
iOS, macOS, watchOS, and tvOS applications.
"""

import logging
from typing import Iterator, Optional

from ..errors import ParseError
from .base import FormatHandler, LocalizationTable, Platform

_LOGGER = logging.getLogger(__name__)

_UNESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    '"': '"',
    "'": "'",
    '\\': '\\',
}


class _StringsScanner:
    """
    Character scanner over .strings content.

    Tracks line comments, block comments and quoted strings explicitly, so
    a multi-line /* ... */ block is never mistaken for an entry.
    """

    def __init__(self, content: str):
        self.content = content
        self.pos = 0
        self.length = len(content)

    def _peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.content[index] if index < self.length else ''

    def _line_number(self) -> int:
        return self.content.count('\n', 0, self.pos) + 1

    def _skip_trivia(self) -> None:
        """Skip whitespace, byte order marks and comments."""
        while self.pos < self.length:
            char = self._peek()
            if char.isspace() or char == '\ufeff':
                self.pos += 1
            elif char == '/' and self._peek(1) == '/':
                end = self.content.find('\n', self.pos)
                self.pos = self.length if end == -1 else end + 1
            elif char == '/' and self._peek(1) == '*':
                end = self.content.find('*/', self.pos + 2)
                if end == -1:
                    raise ParseError(f"Unterminated block comment at line {self._line_number()}")
                self.pos = end + 2
            else:
                return

    def _skip_line(self) -> None:
        end = self.content.find('\n', self.pos)
        self.pos = self.length if end == -1 else end + 1

    def _read_quoted(self) -> str:
        """Read a quoted string starting at the opening quote, unescaping it."""
        start_line = self._line_number()
        self.pos += 1
        chars = []
        while self.pos < self.length:
            char = self.content[self.pos]
            if char == '"':
                self.pos += 1
                return ''.join(chars)
            if char == '\\' and self.pos + 1 < self.length:
                escaped = self.content[self.pos + 1]
                if escaped in _UNESCAPES:
                    chars.append(_UNESCAPES[escaped])
                    self.pos += 2
                    continue
                if escaped in 'uU':
                    hex_digits = self.content[self.pos + 2:self.pos + 6]
                    if len(hex_digits) == 4 and all(c in '0123456789abcdefABCDEF' for c in hex_digits):
                        chars.append(chr(int(hex_digits, 16)))
                        self.pos += 6
                        continue
                # Unknown escape: keep it verbatim
                chars.append(char + escaped)
                self.pos += 2
                continue
            chars.append(char)
            self.pos += 1
        raise ParseError(f"Unterminated quoted string starting at line {start_line}")

    def pairs(self) -> Iterator[tuple[str, str]]:
        """Yield (key, value) pairs in document order."""
        while True:
            self._skip_trivia()
            if self.pos >= self.length:
                return

            if self._peek() != '"':
                _LOGGER.debug("Skipping unrecognized content at line %d", self._line_number())
                self._skip_line()
                continue

            key = self._read_quoted()
            line_end = self.content.find('\n', self.pos)
            value = self._read_assignment()
            if value is None:
                _LOGGER.debug("Skipping malformed entry %r at line %d", key, self._line_number())
                # Resume on the line after the key, never past it
                self.pos = self.length if line_end == -1 else line_end + 1
                continue
            yield key, value

    def _read_assignment(self) -> Optional[str]:
        """Read `= "value";` after a key, or None if the statement is malformed."""
        self._skip_trivia()
        if self._peek() != '=':
            return None
        self.pos += 1
        self._skip_trivia()
        if self._peek() != '"':
            return None
        value = self._read_quoted()
        self._skip_trivia()
        if self._peek() != ';':
            return None
        self.pos += 1
        return value


class IosStringsHandler(FormatHandler):
    """
    Handler for iOS/macOS .strings files.

    .strings format structure:
    ```
    /* Comment about the string */
    "key.name" = "Value text";

    // Another style of comment
    "greeting" = "Hello, %@!";
    ```

    Comments are dropped; statements that are not `"key" = "value";` are
    skipped rather than rejected.
    """

    @property
    def platform(self) -> Platform:
        return Platform.IOS

    def decode(self, content: str) -> LocalizationTable:
        """
        Decode .strings content into a localization table.

        Args:
            content: Raw .strings file content

        Returns:
            Mapping of key -> unescaped value (last duplicate wins)
        """
        table: LocalizationTable = {}
        for key, value in _StringsScanner(content).pairs():
            table[key] = value
        return table

    def _escape_string(self, s: str) -> str:
        """Escape string for .strings format."""
        return (
            s.replace('\\', '\\\\')
            .replace('"', '\\"')
            .replace('\n', '\\n')
            .replace('\t', '\\t')
            .replace('\r', '\\r')
        )

    def encode(self, table: LocalizationTable, language_code: str) -> str:
        """
        Encode a table as .strings content, one entry per line.

        Args:
            table: Mapping of key -> unescaped value
            language_code: Target language code (unused by this format)

        Returns:
            Complete .strings file content
        """
        lines = []
        for key, value in table.items():
            lines.append(f'"{self._escape_string(key)}" = "{self._escape_string(value)}";\n')
        return ''.join(lines)
