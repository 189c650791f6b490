#!/usr/bin/env python3
"""
loctrans - Localization file translation CLI

Extracts strings from iOS .strings, Android strings.xml and portal JSON
files, sends them to a translation endpoint, and writes translated files
next to the sources:

    en.lproj/Localizable.strings -> fr.lproj/Localizable.strings
    values/strings.xml           -> values-fr/strings.xml
    Localization/app.json        -> Localization/app_fr.json

Commands:
    translate       - Translate every discovered file (all languages by default)
    extract         - Decode one file and print its table as JSON
    convert         - Re-emit a JSON dump in a platform format
    find            - List the source files a translate run would pick up
    rename-locales  - Rename locale directories (e.g. no.lproj -> nb.lproj)
    languages       - List configured target languages
    formats         - List supported platforms
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from .config import load_settings
from .discovery import find_files, rename_locale_dirs
from .errors import ConfigError
from .format_handlers import FormatRegistry, Platform
from .languages import Language, all_languages, find_language
from .pipeline import run_translation
from .router import ConversionJob, Direction, route

PLATFORM_CHOICES = [p.value for p in Platform]


def _resolve_languages(value, table: dict[str, str]) -> list[Language]:
    if not value:
        return all_languages(table)
    language = find_language(value, table)
    if language is None:
        raise ConfigError(f"Unknown language: {value}. Run 'loctrans languages' for the list.")
    return [language]


def cmd_translate(args) -> dict:
    """Translate all discovered files."""
    settings = load_settings(
        args.config,
        endpoint=args.endpoint,
        batch_size=args.batch_size,
    ).validate(require_endpoint=True)
    languages = _resolve_languages(args.language, settings.languages)
    platform = Platform(args.platform) if args.platform else None

    paths = find_files(args.source)
    if platform and not args.convert:
        paths = [p for p in paths if FormatRegistry.detect_platform(p) is platform]
    logging.getLogger(__name__).info("Found %d files", len(paths))

    results = asyncio.run(run_translation(
        paths,
        languages,
        settings,
        platform=platform,
        converted=args.convert,
    ))

    summary = results.summary()
    summary["files_found"] = len(paths)
    return summary


def cmd_extract(args) -> dict:
    """Decode one file (forward route)."""
    path = Path(args.input)
    platform = Platform(args.platform) if args.platform else FormatRegistry.detect_platform(path)
    table = route(ConversionJob(path, platform, "", Direction.FORWARD))
    return {
        "status": "ok",
        "input_file": str(path),
        "platform": platform.value,
        "entries": len(table),
        "table": table,
    }


def cmd_convert(args) -> dict:
    """Re-emit a JSON dump in a platform format (reverse route)."""
    settings = load_settings(args.config)
    language = find_language(args.language, settings.languages)
    code = language.code if language else args.language

    path = Path(args.input)
    platform = Platform(args.platform) if args.platform else FormatRegistry.detect_platform(path, converted=True)
    destination = route(ConversionJob(path, platform, code, Direction.REVERSE))
    return {
        "status": "ok",
        "input_file": str(path),
        "output_file": str(destination),
        "platform": platform.value,
        "language": code,
        "summary": f"Converted: {path} -> {destination}",
    }


def cmd_find(args) -> dict:
    """List discovered source files."""
    paths = find_files(args.source)
    return {
        "status": "ok",
        "files": [
            {"path": str(p), "platform": FormatRegistry.detect_platform(p).value}
            for p in paths
        ],
        "summary": f"Found {len(paths)} files",
    }


def cmd_rename_locales(args) -> dict:
    """Rename locale directories."""
    renamed = rename_locale_dirs(args.source, args.old_name, args.new_name)
    return {
        "status": "ok",
        "renamed": [{"from": str(old), "to": str(new)} for old, new in renamed],
        "summary": f"Renamed {len(renamed)} director{'y' if len(renamed) == 1 else 'ies'}",
    }


def cmd_languages(args) -> dict:
    """List configured languages."""
    settings = load_settings(args.config)
    languages = all_languages(settings.languages)
    return {
        "status": "ok",
        "languages": [{"name": lang.name, "code": lang.code} for lang in languages],
        "summary": f"{len(languages)} languages configured",
    }


def cmd_formats(args) -> dict:
    """List supported formats."""
    formats = FormatRegistry.list_formats()
    return {
        "status": "ok",
        "formats": formats,
        "summary": f"{len(formats)} formats supported: {', '.join(f['platform'] for f in formats)}",
    }


COMMANDS = {
    "translate": cmd_translate,
    "extract": cmd_extract,
    "convert": cmd_convert,
    "find": cmd_find,
    "rename-locales": cmd_rename_locales,
    "languages": cmd_languages,
    "formats": cmd_formats,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loctrans",
        description="loctrans - Localization file translation CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Translate everything under ./App to French
  loctrans translate --source ./App --language fr

  # Translate to every configured language, 20 files at a time
  loctrans translate --source ./App,./web/Localization --batch-size 20

  # Inspect what would be sent for translation
  loctrans extract --input App/en.lproj/Localizable.strings

  # Turn a JSON dump back into an Android resource file
  loctrans convert --input android/strings.xml.json --platform android --language de
        """,
    )
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Increase log verbosity (-v info, -vv debug)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    translate_parser = subparsers.add_parser("translate", help="Translate discovered files")
    translate_parser.add_argument("--source", "-s", required=True,
                                  help="Source file or folder (comma-separated for several)")
    translate_parser.add_argument("--platform", "-p", choices=PLATFORM_CHOICES,
                                  help="Only this platform (or target platform with --convert)")
    translate_parser.add_argument("--language", "-l",
                                  help="Language code or name to translate to (default: all)")
    translate_parser.add_argument("--convert", "-c", action="store_true",
                                  help="Inputs are JSON dumps; emit them in their platform format")
    translate_parser.add_argument("--config", help="YAML config file (default: ./loctrans.yaml)")
    translate_parser.add_argument("--endpoint", "-e", help="Translation API endpoint")
    translate_parser.add_argument("--batch-size", "-b", type=int,
                                  help="Files translated concurrently per batch")

    extract_parser = subparsers.add_parser("extract", help="Decode one file and print its table")
    extract_parser.add_argument("--input", "-i", required=True, help="Input file")
    extract_parser.add_argument("--platform", "-p", choices=PLATFORM_CHOICES,
                                help="Platform (default: from extension)")

    convert_parser = subparsers.add_parser("convert", help="Re-emit a JSON dump in a platform format")
    convert_parser.add_argument("--input", "-i", required=True, help="JSON file with key/value pairs")
    convert_parser.add_argument("--platform", "-p", choices=PLATFORM_CHOICES,
                                help="Target platform (default: from path)")
    convert_parser.add_argument("--language", "-l", required=True, help="Language code or name")
    convert_parser.add_argument("--config", help="YAML config file (default: ./loctrans.yaml)")

    find_parser = subparsers.add_parser("find", help="List discovered source files")
    find_parser.add_argument("--source", "-s", required=True, help="Source file or folder")

    rename_parser = subparsers.add_parser("rename-locales", help="Rename locale directories")
    rename_parser.add_argument("--source", "-s", required=True, help="Root folder")
    rename_parser.add_argument("--from", dest="old_name", default="no.lproj", help="Directory name to replace")
    rename_parser.add_argument("--to", dest="new_name", default="nb.lproj", help="New directory name")

    languages_parser = subparsers.add_parser("languages", help="List configured languages")
    languages_parser.add_argument("--config", help="YAML config file (default: ./loctrans.yaml)")

    subparsers.add_parser("formats", help="List supported formats")

    return parser


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.verbose)

    try:
        result = COMMANDS[args.command](args)
    except Exception as e:
        print(json.dumps({
            "status": "error",
            "error": str(e),
            "error_type": type(e).__name__,
        }), file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
