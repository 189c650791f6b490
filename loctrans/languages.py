#!/usr/bin/env python3
"""
Target languages.

The translation API is addressed by language name; destination paths use
the ISO code.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_LANGUAGE_CODE = "ar"


@dataclass(frozen=True)
class Language:
    """A translation target."""
    name: str
    code: str


LANGUAGES: dict[str, str] = {
    "Hindi": "hi",
    "French": "fr",
    "Urdu": "ur",
    "Filipino": "fil",
    "Persian": "fa",
    "Punjabi": "pa",
    "Bengali": "bn",
    "Russian": "ru",
    "Chinese": "zh",
    "Nepali": "ne",
    "Marathi": "mr",
    "Malay": "ms",
    "Albanian": "sq",
    "Armenian": "hy",
    "Azerbaijani": "az",
    "Basque": "eu",
    "Bosnian": "bs",
    "Brazilian Portuguese": "pt-BR",
    "Bulgarian": "bg",
    "Catalan": "ca",
    "Croatian": "hr",
    "Czech": "cs",
    "Danish": "da",
    "Dutch": "nl",
    "Estonian": "et",
    "Finnish": "fi",
    "Galician": "gl",
    "Georgian": "ka",
    "German": "de",
    "Greek": "el",
    "Gujarati": "gu",
    "Hungarian": "hu",
    "Indonesian": "id",
    "Italian": "it",
    "Japanese": "ja",
    "Kannada": "kn",
    "Kazakh": "kk",
    "Korean": "ko",
    "Latvian": "lv",
    "Lithuanian": "lt",
    "Macedonian": "mk",
    "Maltese": "mt",
    "Mandarin": "zh-CN",
    "Mongolian": "mn",
    "Norwegian": "nb",
    "Oriya": "or",
    "Pashto": "ps",
    "Polish": "pl",
    "Portuguese": "pt",
    "Romanian": "ro",
    "Serbian": "sr",
    "Sinhala": "si",
    "Slovak": "sk",
    "Slovene": "sl",
    "Ukrainian": "uk",
    "Uzbek": "uz",
    "Vietnamese": "vi",
    "Welsh": "cy",
    "zh-Hans": "zh-Hans",
    "zh-Hant": "zh-Hant",
}


def all_languages(table: Optional[dict[str, str]] = None) -> list[Language]:
    """All configured languages, in table order."""
    table = LANGUAGES if table is None else table
    return [Language(name, code) for name, code in table.items()]


def find_language(value: str, table: Optional[dict[str, str]] = None) -> Optional[Language]:
    """
    Look up a language by ISO code or by name (case-insensitive).

    Args:
        value: Code such as "fr" or name such as "French"
        table: Optional name -> code mapping (defaults to LANGUAGES)

    Returns:
        Matching Language or None
    """
    table = LANGUAGES if table is None else table
    wanted = value.strip().lower()
    for name, code in table.items():
        if code.lower() == wanted:
            return Language(name, code)
    for name, code in table.items():
        if name.lower() == wanted:
            return Language(name, code)
    return None
