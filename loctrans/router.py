#!/usr/bin/env python3
"""
Format routing for conversion jobs.

A file goes through two externally driven states:

    forward  source file  -> LocalizationTable   (extract for translation)
    reverse  translated table -> destination file (re-emit in platform format)

The translation step happens between the two and is not performed here.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .format_handlers import FormatRegistry, LocalizationTable, Platform
from .paths import ensure_destination

_LOGGER = logging.getLogger(__name__)


class Direction(str, Enum):
    """Conversion direction."""
    FORWARD = "forward"
    REVERSE = "reverse"


@dataclass
class ConversionJob:
    """
    One file's conversion request.

    Attributes:
        source_path: Source localization file (or JSON dump in convert mode)
        platform: Platform whose rules apply
        language_code: Target language code, used for destination paths
        direction: forward (decode) or reverse (encode)
    """
    source_path: Path
    platform: Platform
    language_code: str
    direction: Direction = Direction.FORWARD

    def __post_init__(self):
        """Normalize path and enum fields."""
        self.source_path = Path(self.source_path)
        self.platform = Platform(self.platform)
        self.direction = Direction(self.direction)


def read_table(job: ConversionJob) -> LocalizationTable:
    """Forward route: read and decode the job's source file."""
    content = job.source_path.read_text(encoding='utf-8-sig')
    handler = FormatRegistry.get_handler(job.platform)
    table = handler.decode(content)
    _LOGGER.debug("Decoded %d entries from %s (%s)", len(table), job.source_path, job.platform.value)
    return table


def write_table(job: ConversionJob, table: Optional[LocalizationTable] = None) -> Path:
    """
    Reverse route: encode a table and write it to the job's destination.

    Args:
        job: Reverse conversion job
        table: Translated table. When None, the source file is read as a
            portal JSON dump and re-emitted in the job's platform format.

    Returns:
        Path of the written file
    """
    if table is None:
        content = job.source_path.read_text(encoding='utf-8-sig')
        table = FormatRegistry.get_handler(Platform.PORTAL).decode(content)

    handler = FormatRegistry.get_handler(job.platform)
    output = handler.encode(table, job.language_code)

    destination = ensure_destination(job.source_path, job.platform, job.language_code)
    destination.write_text(output, encoding='utf-8')
    _LOGGER.info("Converted: %s -> %s", job.source_path, destination)
    return destination


def route(
    job: ConversionJob,
    table: Optional[LocalizationTable] = None,
) -> Union[LocalizationTable, Path]:
    """
    Dispatch a job to its decode or encode path.

    Returns:
        The decoded table for forward jobs, the written path for reverse jobs

    Raises:
        ParseError: Source content is malformed
        OSError: Reading, writing or creating the destination failed
    """
    if job.direction is Direction.FORWARD:
        return read_table(job)
    return write_table(job, table)
