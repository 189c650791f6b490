#!/usr/bin/env python3
"""
Android XML strings.xml format handler.

Handles decoding and encoding of Android <string> resources.
"""

import logging
import re
from xml.etree import ElementTree as ET

from ..errors import ParseError
from .base import FormatHandler, LocalizationTable, Platform

_LOGGER = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Backslash escapes, plus entities left over from double-escaped files
_UNESCAPE_PATTERN = re.compile(r'\\u([0-9a-fA-F]{4})|\\(.)|&(lt|gt|quot|apos|amp);', re.DOTALL)

_BACKSLASH_UNESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    '"': '"',
    "'": "'",
    '\\': '\\',
    '@': '@',
    '?': '?',
}

_ENTITY_UNESCAPES = {
    'lt': '<',
    'gt': '>',
    'quot': '"',
    'apos': "'",
    'amp': '&',
}


class AndroidXmlHandler(FormatHandler):
    """
    Handler for Android strings.xml resource files.

    Android XML structure:
    ```xml
    <?xml version="1.0" encoding="UTF-8"?>
    <resources>
        <string name="app_name">My App</string>
        <string name="welcome">Welcome, %1$s!</string>
    </resources>
    ```

    Apostrophes and quotes are backslash-escaped for every target language;
    Android rejects a bare apostrophe regardless of locale.
    """

    @property
    def platform(self) -> Platform:
        return Platform.ANDROID

    def decode(self, content: str) -> LocalizationTable:
        """
        Decode Android XML content into a localization table.

        Args:
            content: Raw XML file content

        Returns:
            Mapping of string name -> unescaped text. Empty (with a warning)
            when the document has no resources/string structure.

        Raises:
            ParseError: If the XML is malformed
        """
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise ParseError(f"Invalid XML: {e}") from e

        elements = root.findall('string') if root.tag == 'resources' else []
        if not elements:
            _LOGGER.warning("No resources/string elements found in XML structure (root: <%s>)", root.tag)
            return {}

        table: LocalizationTable = {}
        for elem in elements:
            name = elem.get('name')
            if not name:
                _LOGGER.debug("Skipping <string> without a name attribute")
                continue
            table[name] = self._get_element_text(elem)
        return table

    def _get_element_text(self, elem: ET.Element) -> str:
        """Extract text content from element, including inline markup like <xliff:g>."""
        text = ''.join(elem.itertext())
        return self._unescape_android(text)

    def _unescape_android(self, text: str) -> str:
        """Undo Android string escapes in a single pass."""
        def replace(match: re.Match) -> str:
            code, escaped, entity = match.groups()
            if code is not None:
                return chr(int(code, 16))
            if escaped is not None:
                # Unknown escapes keep the escaped character, as aapt does
                return _BACKSLASH_UNESCAPES.get(escaped, escaped)
            return _ENTITY_UNESCAPES[entity]

        return _UNESCAPE_PATTERN.sub(replace, text)

    def _escape_android(self, text: str) -> str:
        """Escape string for Android XML (the serializer handles &, <, >)."""
        text = text.replace('\\', '\\\\')
        text = text.replace("'", "\\'")
        text = text.replace('"', '\\"')
        text = text.replace('\n', '\\n')
        text = text.replace('\t', '\\t')
        text = text.replace('\r', '\\r')
        if text.startswith(('@', '?')):
            text = '\\' + text
        return text

    def encode(self, table: LocalizationTable, language_code: str) -> str:
        """
        Encode a table as an Android resources document.

        Args:
            table: Mapping of string name -> unescaped text
            language_code: Target language code (escaping does not vary by language)

        Returns:
            Complete XML file content with declaration
        """
        root = ET.Element('resources')
        for key, value in table.items():
            elem = ET.SubElement(root, 'string', name=key)
            elem.text = self._escape_android(value)

        ET.indent(root, space='    ')
        body = ET.tostring(root, encoding='unicode')
        return f'{XML_DECLARATION}\n{body}\n'
