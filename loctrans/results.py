#!/usr/bin/env python3
"""
Per-language result aggregation.

Each batch records into its own ResultAggregator, which is merged into the
run-level aggregator once the batch has completed.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass
class FileResult:
    """Outcome of one file for one language."""
    path: str
    request_id: str = ""
    error: Optional[str] = None


@dataclass
class LanguageResults:
    """Success/failure records and timing for one language."""
    success: list[FileResult] = field(default_factory=list)
    failure: list[FileResult] = field(default_factory=list)
    elapsed_seconds: float = 0.0


class ResultAggregator:
    """Collects file outcomes keyed by language name."""

    def __init__(self):
        self.languages: dict[str, LanguageResults] = {}

    def _results_for(self, language: str) -> LanguageResults:
        if language not in self.languages:
            self.languages[language] = LanguageResults()
        return self.languages[language]

    def record_success(self, language: str, path: str, request_id: str) -> None:
        self._results_for(language).success.append(FileResult(str(path), request_id))

    def record_failure(self, language: str, path: str, request_id: str, error: str) -> None:
        self._results_for(language).failure.append(FileResult(str(path), request_id, error))

    def set_elapsed(self, language: str, seconds: float) -> None:
        self._results_for(language).elapsed_seconds = seconds

    def merge(self, other: "ResultAggregator") -> None:
        """Append another aggregator's records into this one."""
        for language, results in other.languages.items():
            target = self._results_for(language)
            target.success.extend(results.success)
            target.failure.extend(results.failure)
            target.elapsed_seconds += results.elapsed_seconds

    @property
    def success_count(self) -> int:
        return sum(len(r.success) for r in self.languages.values())

    @property
    def failure_count(self) -> int:
        return sum(len(r.failure) for r in self.languages.values())

    def summary(self) -> dict[str, Any]:
        """
        Build a JSON-ready run summary.

        Returns:
            Dictionary with per-language saved/failed counts, failed file
            details and timing, plus run totals
        """
        languages = {}
        total_seconds = 0.0
        for language, results in self.languages.items():
            total_seconds += results.elapsed_seconds
            languages[language] = {
                "saved_files": len(results.success),
                "failed_files": len(results.failure),
                "failures": [asdict(f) for f in results.failure],
                "total_minutes": round(results.elapsed_seconds / 60, 2),
            }

        return {
            "status": "ok" if self.failure_count == 0 else "partial",
            "languages": languages,
            "totals": {
                "saved_files": self.success_count,
                "failed_files": self.failure_count,
                "total_minutes": round(total_seconds / 60, 2),
            },
            "summary": (
                f"Translation complete for {len(languages)} language(s): "
                f"{self.success_count} saved, {self.failure_count} failed."
            ),
        }
