# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Detector base classes and shared scan context."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field

from ..models.detection import Candidate
from .fsreader import ProjectFS
from .keys import (
    LANG_CSHARP,
    LANG_ELIXIR,
    LANG_GO,
    LANG_JAVA,
    LANG_JS,
    LANG_OTHER,
    LANG_PHP,
    LANG_PYTHON,
    LANG_RUBY,
    LANG_RUST,
    LANG_UNKNOWN,
)

EXTENSION_LANGUAGES: dict[str, str] = {
    ".py": LANG_PYTHON,
    ".js": LANG_JS,
    ".jsx": LANG_JS,
    ".ts": LANG_JS,
    ".tsx": LANG_JS,
    ".vue": LANG_JS,
    ".svelte": LANG_JS,
    ".php": LANG_PHP,
    ".rb": LANG_RUBY,
    ".go": LANG_GO,
    ".rs": LANG_RUST,
    ".java": LANG_JAVA,
    ".cs": LANG_CSHARP,
    ".ex": LANG_ELIXIR,
    ".exs": LANG_ELIXIR,
}


def dominant_language(ext_counts: Mapping[str, int]) -> str:
    """Language with the most files; ties resolve alphabetically."""
    totals: dict[str, int] = {}
    for ext, count in ext_counts.items():
        language = EXTENSION_LANGUAGES.get(ext.lower(), LANG_OTHER)
        totals[language] = totals.get(language, 0) + count
    best, best_count = LANG_UNKNOWN, 0
    for language in sorted(totals):
        if totals[language] > best_count:
            best, best_count = language, totals[language]
    return best


@dataclass
class ProjectScan:
    """Result of the single tree walk shared by every detector."""

    files: list[str] = field(default_factory=list)
    ext_counts: dict[str, int] = field(default_factory=dict)
    dominant_language: str = LANG_UNKNOWN


class LanguageDetector(ABC):
    name: str = "base"
    priority: int = 50

    @abstractmethod
    def detect(self, fs: ProjectFS, scan: ProjectScan) -> list[Candidate]: ...

    @staticmethod
    def keep(candidates: list[Candidate], candidate: Candidate, minimum: float | None = None) -> bool:
        """Append ``candidate`` if it scores at least ``minimum`` (any positive score when unset)."""
        qualifies = candidate.score > 0 if minimum is None else candidate.score >= minimum
        if qualifies:
            candidates.append(candidate)
        return qualifies

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}(priority={self.priority})"
