#!/usr/bin/env python3
"""
Translation run orchestration.

Each file is one independent pipeline:

    forward route (decode) -> translation service -> reverse route (encode)

Files are fanned out in batches of `batch_size`; a batch must finish (with
successes or recorded failures) before the next one starts. A failure in
one file never aborts its siblings.
"""

import asyncio
import logging
import time
import uuid
from pathlib import Path
from typing import Optional, Protocol, Sequence

import aiohttp

from .batcher import TokenBatcher
from .config import Settings
from .errors import LocalizationError, TranslationUnavailable
from .format_handlers import FormatRegistry, LocalizationTable, Platform
from .languages import Language
from .results import ResultAggregator
from .router import ConversionJob, Direction, route
from .translator import TranslationClient

_LOGGER = logging.getLogger(__name__)


class Translator(Protocol):
    """Anything that can translate a table (TranslationClient, test fakes)."""

    async def translate(
        self,
        table: LocalizationTable,
        language: str,
        request_id: str,
    ) -> Optional[LocalizationTable]:
        ...


class TranslationRun:
    """
    Drives one CLI invocation over a list of files and languages.

    Handles:
    - Platform selection per file (extension, or path segment for converted dumps)
    - Splitting large tables into token-bounded requests
    - Bounded batches with per-job failure isolation
    - Per-language result aggregation and timing
    """

    def __init__(
        self,
        client: Translator,
        settings: Settings,
        platform: Optional[Platform] = None,
        converted: bool = False,
    ):
        """
        Initialize a run.

        Args:
            client: Translation service client
            settings: Run configuration
            platform: Target platform override for converted inputs
            converted: Inputs are JSON dumps to re-emit in their platform format
        """
        self.client = client
        self.settings = settings
        self.platform = Platform(platform) if platform else None
        self.converted = converted
        self.batcher = TokenBatcher(target_tokens=settings.chunk_tokens)
        self.results = ResultAggregator()

    def platforms_for(self, path: Path) -> tuple[Platform, Platform]:
        """Return (source platform to decode with, target platform to encode to)."""
        source = FormatRegistry.detect_platform(path)
        if not self.converted:
            return source, source
        target = self.platform or FormatRegistry.detect_platform(path, converted=True)
        return source, target

    async def translate_table(
        self,
        table: LocalizationTable,
        language: Language,
        request_id: str,
    ) -> LocalizationTable:
        """
        Translate a table, one request per token-bounded chunk.

        Raises:
            TranslationUnavailable: If any chunk comes back empty
        """
        chunks = self.batcher.create_chunks(table)
        translated: LocalizationTable = {}

        for chunk in chunks:
            chunk_id = request_id if len(chunks) == 1 else f"{request_id}-{chunk.chunk_num}"
            result = await self.client.translate(chunk.table, language.name, chunk_id)
            if not result:
                raise TranslationUnavailable(
                    f"No translation returned for request {chunk_id} ({language.name})"
                )
            translated.update(result)

        return translated

    async def process_file(self, path: Path, language: Language, results: ResultAggregator) -> None:
        """Run one file's pipeline and record its outcome in `results`."""
        request_id = str(uuid.uuid4())
        source_platform, target_platform = self.platforms_for(path)
        _LOGGER.info("Processing file: %s (%s -> %s)", path, source_platform.value, language.code)

        try:
            table = route(ConversionJob(path, source_platform, language.code, Direction.FORWARD))
            if not table:
                raise TranslationUnavailable(f"No translatable entries in {path}")

            translated = await self.translate_table(table, language, request_id)
            destination = route(
                ConversionJob(path, target_platform, language.code, Direction.REVERSE),
                translated,
            )
        except (LocalizationError, OSError) as e:
            _LOGGER.error("Error processing %s to %s: %s", path, language.name, e)
            results.record_failure(language.name, str(path), request_id, f"{type(e).__name__}: {e}")
            return

        _LOGGER.info("File processed successfully: %s -> %s", path, destination)
        results.record_success(language.name, str(path), request_id)

    async def translate_language(self, paths: Sequence[Path], language: Language) -> None:
        """Translate every file into one language, batch by batch."""
        start = time.perf_counter()
        batch_size = self.settings.batch_size
        _LOGGER.info("Starting translation of %d file(s) to %s", len(paths), language.name)

        for offset in range(0, len(paths), batch_size):
            batch = list(paths[offset:offset + batch_size])
            batch_results = ResultAggregator()

            outcomes = await asyncio.gather(
                *(self.process_file(path, language, batch_results) for path in batch),
                return_exceptions=True,
            )
            for path, outcome in zip(batch, outcomes):
                if isinstance(outcome, Exception):
                    _LOGGER.error("Unexpected error processing %s: %r", path, outcome)
                    batch_results.record_failure(
                        language.name, str(path), "", f"{type(outcome).__name__}: {outcome}"
                    )
                elif isinstance(outcome, BaseException):
                    raise outcome

            self.results.merge(batch_results)

        self.results.set_elapsed(language.name, time.perf_counter() - start)
        _LOGGER.info("Completed translations for %s", language.name)

    async def run(self, paths: Sequence[Path], languages: Sequence[Language]) -> ResultAggregator:
        """Translate all files into each language in turn."""
        for language in languages:
            await self.translate_language(paths, language)
        return self.results


async def run_translation(
    paths: Sequence[Path],
    languages: Sequence[Language],
    settings: Settings,
    platform: Optional[Platform] = None,
    converted: bool = False,
) -> ResultAggregator:
    """Open an HTTP session, run the translation, and return the results."""
    async with aiohttp.ClientSession() as session:
        client = TranslationClient(
            session,
            settings.endpoint,
            retries=settings.retries,
            timeout=settings.timeout,
            retry_delay=settings.retry_delay,
        )
        run = TranslationRun(client, settings, platform=platform, converted=converted)
        return await run.run(paths, languages)
