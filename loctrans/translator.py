#!/usr/bin/env python3
"""
Translation service client.

Posts a localization table to the remote translation endpoint over aiohttp
and returns the translated table, retrying timeouts and transient HTTP
failures a bounded number of times.
"""

import asyncio
import logging
from typing import Any, Optional

import aiohttp

from .format_handlers import LocalizationTable

_LOGGER = logging.getLogger(__name__)


class TranslationClient:
    """
    HTTP client for the remote translation endpoint.

    Requests are `POST {"id": ..., "data": {...}, "language": "French"}`;
    the response is either the translated mapping itself or an object
    carrying it under `translated_data`.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        endpoint: str,
        retries: int = 3,
        timeout: float = 300,
        retry_delay: float = 1.0,
    ) -> None:
        """
        Initialize the client.

        Args:
            session: Shared aiohttp session
            endpoint: Translation API URL
            retries: Attempts per request
            timeout: Total seconds per attempt
            retry_delay: Seconds to wait between attempts
        """
        self.session = session
        self.endpoint = endpoint
        self.retries = retries
        self.timeout = timeout
        self.retry_delay = retry_delay

    async def _post(self, payload: dict[str, Any]) -> Any:
        async with self.session.post(
            self.endpoint,
            json=payload,
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        ) as response:
            response.raise_for_status()
            return await response.json(content_type=None)

    async def translate(
        self,
        table: LocalizationTable,
        language: str,
        request_id: str,
    ) -> Optional[LocalizationTable]:
        """
        Translate a table, retrying transient failures.

        Args:
            table: Mapping of key -> source text
            language: Target language name sent to the service
            request_id: Identifier echoed in the request and in logs

        Returns:
            Translated table, or None once every attempt has failed or when
            the service answers with something that is not a key/value object
        """
        payload = {"id": request_id, "data": table, "language": language}

        for attempt in range(1, self.retries + 1):
            _LOGGER.info("Translating file ID %s (%d/%d)...", request_id, attempt, self.retries)
            try:
                data = await self._post(payload)
            except asyncio.TimeoutError:
                _LOGGER.warning("Request %s timed out (attempt %d/%d)", request_id, attempt, self.retries)
            except (aiohttp.ClientError, ValueError) as err:
                _LOGGER.warning("Request %s failed (attempt %d/%d): %s", request_id, attempt, self.retries, err)
            else:
                return self._extract_translation(data, request_id)

            if attempt < self.retries:
                await asyncio.sleep(self.retry_delay)

        _LOGGER.error("Failed to translate file ID %s after %d attempts", request_id, self.retries)
        return None

    @staticmethod
    def _extract_translation(data: Any, request_id: str) -> Optional[LocalizationTable]:
        if isinstance(data, dict) and "translated_data" in data:
            data = data["translated_data"]
        if not isinstance(data, dict) or not data:
            _LOGGER.error("Unusable translation response for %s: %r", request_id, type(data).__name__)
            return None
        return {str(key): value for key, value in data.items() if isinstance(value, str)}
