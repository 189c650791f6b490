#!/usr/bin/env python3
"""
Error taxonomy for localization conversion and translation.

Filesystem failures are left as the builtin OSError; everything else a
single file's pipeline can hit derives from LocalizationError so the
orchestrator can isolate it per job.
"""


class LocalizationError(Exception):
    """Base class for loctrans errors."""


class ParseError(LocalizationError, ValueError):
    """Source content violates the grammar of its platform format."""


class TranslationUnavailable(LocalizationError):
    """Translation service returned nothing usable for a file."""


class ConfigError(LocalizationError):
    """Fatal configuration problem; aborts the run before any file is processed."""
