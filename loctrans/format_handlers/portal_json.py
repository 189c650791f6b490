#!/usr/bin/env python3
"""
Portal JSON format handler.

Portal files are flat JSON objects of key -> text. JSON already encodes
string content, so no extra escaping layer is applied in either direction.
"""

import json
import logging

from ..errors import ParseError
from .base import FormatHandler, LocalizationTable, Platform

_LOGGER = logging.getLogger(__name__)


class PortalJsonHandler(FormatHandler):
    """
    Handler for flat portal JSON localization files.

    ```json
    {"welcome": "Welcome", "logout": "Sign out"}
    ```
    """

    @property
    def platform(self) -> Platform:
        return Platform.PORTAL

    def decode(self, content: str) -> LocalizationTable:
        """
        Decode JSON content into a localization table.

        Args:
            content: Raw JSON file content

        Returns:
            Mapping of key -> text; non-string values are skipped

        Raises:
            ParseError: If the content is not a JSON object
        """
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON: {e.msg} at line {e.lineno}") from e

        if not isinstance(data, dict):
            raise ParseError(f"Root element must be an object, found {type(data).__name__}")

        table: LocalizationTable = {}
        for key, value in data.items():
            if isinstance(value, str):
                table[key] = value
            else:
                _LOGGER.warning("Skipping non-string value for key %r (%s)", key, type(value).__name__)
        return table

    def encode(self, table: LocalizationTable, language_code: str) -> str:
        """Serialize the table as compact JSON."""
        return json.dumps(table, ensure_ascii=False, separators=(',', ':'))
