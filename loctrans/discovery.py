#!/usr/bin/env python3
"""
Source file discovery and locale directory maintenance.

Traversal uses an explicit stack instead of recursion and returns flat,
sorted lists, so results are deterministic and deep trees are safe.
"""

import json
import logging
import re
from pathlib import Path
from typing import Union

from .format_handlers import PLATFORM_EXTENSIONS, Platform

_LOGGER = logging.getLogger(__name__)

SOURCE_EXTENSIONS = frozenset(PLATFORM_EXTENSIONS.values())
PORTAL_DIR_PATTERN = re.compile(r'(Localisation|Localization)', re.IGNORECASE)

# Non-ASCII characters tolerated in English source files
ALLOWED_NON_ASCII = frozenset({
    0x2018,  # left single quotation mark
    0x2019,  # right single quotation mark
    0x201C,  # left double quotation mark
    0x201D,  # right double quotation mark
    0x2022,  # bullet
    0x00A9,  # copyright sign
    0x2014,  # em dash
    0x2028,  # line separator
    0x00A0,  # no-break space
    0x2026,  # horizontal ellipsis
})


def is_english_only(text: str, path: Union[str, Path] = "") -> bool:
    """
    Heuristic check that content is untranslated English source text.

    ASCII, a few typographic characters and astral-plane characters
    (emoji) are accepted; any other non-ASCII character rejects the file.
    """
    for index, char in enumerate(text):
        code = ord(char)
        if code <= 127 or code in ALLOWED_NON_ASCII or code > 0xFFFF:
            continue
        _LOGGER.warning("Unsupported character %r (U+%04X) at offset %d in %s", char, code, index, path)
        return False
    return True


def _is_flat_portal_json(path: Path) -> bool:
    """Portal candidates are non-empty objects that are not purely nested groups."""
    try:
        data = json.loads(path.read_text(encoding='utf-8-sig'))
    except (OSError, ValueError) as e:
        _LOGGER.warning("Skipping unreadable JSON %s: %s", path, e)
        return False
    if not isinstance(data, dict) or not data:
        return False
    return not all(isinstance(value, dict) for value in data.values())


def is_source_location(path: Path) -> bool:
    """
    Whether a file found during a directory walk sits where sources live.

    - .strings inside en.lproj
    - .xml inside values
    - .json under a Localisation/Localization directory
    """
    ext = path.suffix.lower()
    if ext == Platform.IOS.extension:
        return path.parent.name == 'en.lproj'
    if ext == Platform.ANDROID.extension:
        return path.parent.name == 'values'
    if ext == Platform.PORTAL.extension:
        return bool(PORTAL_DIR_PATTERN.search(str(path.parent))) and _is_flat_portal_json(path)
    return False


def _has_valid_content(path: Path) -> bool:
    try:
        content = path.read_text(encoding='utf-8-sig')
    except (OSError, UnicodeDecodeError) as e:
        _LOGGER.warning("Skipping unreadable file %s: %s", path, e)
        return False
    return bool(content.strip()) and is_english_only(content, path)


def find_files(source: Union[str, Path]) -> list[Path]:
    """
    Collect candidate source files.

    Args:
        source: A file or directory, or a comma-separated list of them.
            Files given explicitly only need a supported extension and
            valid content; files found by walking must also sit in a
            source location (see is_source_location).

    Returns:
        Sorted, de-duplicated list of file paths

    Raises:
        FileNotFoundError: If a listed source does not exist
    """
    results: set[Path] = set()
    stack: list[Path] = []

    for item in str(source).split(','):
        item = item.strip()
        if not item:
            continue
        path = Path(item)
        if not path.exists():
            raise FileNotFoundError(f"Source not found: {path}")
        if path.is_file():
            if path.suffix.lower() in SOURCE_EXTENSIONS and _has_valid_content(path):
                results.add(path)
        else:
            stack.append(path)

    while stack:
        directory = stack.pop()
        for child in directory.iterdir():
            if child.is_dir():
                stack.append(child)
            elif (
                child.suffix.lower() in SOURCE_EXTENSIONS
                and is_source_location(child)
                and _has_valid_content(child)
            ):
                results.add(child)

    return sorted(results)


def rename_locale_dirs(
    root: Union[str, Path],
    old_name: str = "no.lproj",
    new_name: str = "nb.lproj",
) -> list[tuple[Path, Path]]:
    """
    Rename every locale directory called old_name to new_name under root.

    Renamed directories are not descended into again; existing targets are
    left untouched and logged.

    Returns:
        List of (old_path, new_path) pairs that were renamed
    """
    renamed = []
    stack = [Path(root)]

    while stack:
        directory = stack.pop()
        for child in sorted(directory.iterdir()):
            if not child.is_dir():
                continue
            if child.name != old_name:
                stack.append(child)
                continue

            target = child.with_name(new_name)
            if target.exists():
                _LOGGER.warning("Not renaming %s: %s already exists", child, target)
                continue
            child.rename(target)
            _LOGGER.info("Renamed: %s -> %s", child, target)
            renamed.append((child, target))

    return renamed
