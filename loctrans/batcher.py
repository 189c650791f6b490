#!/usr/bin/env python3
"""
Token-based chunking of localization tables.

Uses tiktoken to split large tables into chunks whose estimated output size
stays under a target, so a single translation request never exceeds what
the remote API accepts.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

import tiktoken

from .format_handlers import LocalizationTable

_LOGGER = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _get_encoding(model: str):
    """Load a tiktoken encoding once; None when it cannot be loaded."""
    try:
        return tiktoken.get_encoding(model)
    except Exception as e:
        # Encodings are fetched on first use; offline runs fall back to a char estimate
        _LOGGER.debug("tiktoken encoding %s unavailable (%s); using character estimate", model, e)
        return None


@dataclass
class TableChunk:
    """One ordered slice of a table."""
    chunk_num: int
    table: LocalizationTable
    estimated_tokens: int


class TokenBatcher:
    """
    Splits a table into chunks based on estimated output token count.

    Instead of fixed entry counts, entries are grouped to approximate a
    target token count per request.
    """

    # Expansion factor: translations are typically longer than source
    EXPANSION_FACTOR = 1.2

    # Overhead per entry (key, quotes, separators)
    ENTRY_OVERHEAD = 10

    def __init__(self, target_tokens: int = 5000, model: str = "cl100k_base"):
        """
        Initialize token batcher.

        Args:
            target_tokens: Target tokens per chunk; 0 disables splitting
            model: Tiktoken encoding name
        """
        self.target_tokens = target_tokens
        self.encoder = _get_encoding(model)

    def estimate_tokens(self, key: str, value: str) -> int:
        """Estimate output tokens for one entry."""
        text = f"{key}{value}"
        if self.encoder:
            base_tokens = len(self.encoder.encode(text))
        else:
            # Fallback: ~4 chars per token (rough estimate)
            base_tokens = len(text) // 4

        return int(base_tokens * self.EXPANSION_FACTOR) + self.ENTRY_OVERHEAD

    def create_chunks(self, table: LocalizationTable) -> list[TableChunk]:
        """
        Group a table's entries into ordered chunks.

        Args:
            table: Table to split

        Returns:
            List of TableChunk; every entry lands in exactly one chunk, in order
        """
        if not table:
            return []

        if self.target_tokens <= 0:
            total = sum(self.estimate_tokens(k, v) for k, v in table.items())
            return [TableChunk(1, dict(table), total)]

        chunks = []
        current: LocalizationTable = {}
        current_tokens = 0

        for key, value in table.items():
            entry_tokens = self.estimate_tokens(key, value)

            if current_tokens + entry_tokens > self.target_tokens and current:
                chunks.append(TableChunk(len(chunks) + 1, current, current_tokens))
                current = {}
                current_tokens = 0

            current[key] = value
            current_tokens += entry_tokens

        if current:
            chunks.append(TableChunk(len(chunks) + 1, current, current_tokens))

        return chunks
