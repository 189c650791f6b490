#!/usr/bin/env python3
"""
Destination path resolution.

Given a source file, its platform and a target language code, derive where
the translated file is written:

    ios      .../en.lproj/Localizable.strings -> .../fr.lproj/Localizable.strings
    android  .../values/strings.xml           -> .../values-fr/strings.xml
    portal   .../Localization/app.json        -> .../Localization/app_fr.json
"""

import re
from pathlib import Path
from typing import Optional, Union

from .format_handlers import Platform
from .languages import DEFAULT_LANGUAGE_CODE

LPROJ_PATTERN = re.compile(r'^([a-z]{2})(?=\.lproj$)', re.IGNORECASE)


def _language_or_default(language_code: Optional[str]) -> str:
    return language_code or DEFAULT_LANGUAGE_CODE


def destination_dir(
    source_path: Union[str, Path],
    platform: Union[Platform, str],
    language_code: Optional[str],
) -> Path:
    """
    Directory that receives the translated file.

    Args:
        source_path: Path of the source localization file
        platform: Source platform
        language_code: Target language code ("ar" when empty)

    Returns:
        Destination directory (not created)
    """
    platform = Platform(platform)
    code = _language_or_default(language_code)
    source_dir = Path(source_path).resolve().parent

    if platform is Platform.IOS:
        if LPROJ_PATTERN.match(source_dir.name):
            name = LPROJ_PATTERN.sub(code, source_dir.name)
        else:
            name = f"{code}.lproj"
        return source_dir.parent / name

    if platform is Platform.ANDROID:
        return source_dir.parent / f"values-{code}"

    return source_dir


def destination_filename(
    source_path: Union[str, Path],
    platform: Union[Platform, str],
    language_code: Optional[str],
) -> str:
    """File name of the translated file."""
    platform = Platform(platform)
    source = Path(source_path)

    if platform is Platform.PORTAL:
        return f"{source.stem}_{_language_or_default(language_code)}{source.suffix}"

    # Converted input: a JSON dump of a platform table, e.g. Localizable.strings.json
    if source.suffix.lower() == Platform.PORTAL.extension:
        stem = source.stem
        if not stem.lower().endswith(platform.extension):
            stem += platform.extension
        return stem

    return source.name


def resolve_destination(
    source_path: Union[str, Path],
    platform: Union[Platform, str],
    language_code: Optional[str],
) -> Path:
    """Full destination file path for a source file, platform and language."""
    return (
        destination_dir(source_path, platform, language_code)
        / destination_filename(source_path, platform, language_code)
    )


def ensure_destination(
    source_path: Union[str, Path],
    platform: Union[Platform, str],
    language_code: Optional[str],
) -> Path:
    """Resolve the destination and create its directory if absent (idempotent)."""
    destination = resolve_destination(source_path, platform, language_code)
    destination.parent.mkdir(parents=True, exist_ok=True)
    return destination
