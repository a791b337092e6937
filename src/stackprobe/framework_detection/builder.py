# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fluent score/signal accumulator that framework detectors are composed from."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..models.detection import Candidate
from .fsreader import ProjectFS, contains_ext
from .keys import Framework


@dataclass(frozen=True)
class DependencyRule:
    """One entry of an ordered dependency check; the first matching rule wins."""

    substring: str
    score: float
    signal: str


class DetectionBuilder:
    """
    Accumulate weighted evidence for one framework hypothesis.

    Every ``check_*`` method either adds its weight and signal or leaves the
    builder untouched, and returns the builder so checks can be chained. A
    builder belongs to exactly one detector call.
    """

    def __init__(self, framework: Framework, language: str, fs: ProjectFS):
        self.framework = framework
        self.language = language
        self.fs = fs
        self.score = 0.0
        self.signals: list[str] = []

    def _hit(self, score: float, signal: str) -> DetectionBuilder:
        self.score += score
        self.signals.append(signal)
        return self

    def _file_contains(self, path: str, substring: str) -> bool:
        if not self.fs.has(path):
            return False
        return substring.lower() in self.fs.read(path).lower()

    def check_file(self, path: str, score: float, signal: str) -> DetectionBuilder:
        if self.fs.has(path):
            return self._hit(score, signal)
        return self

    def check_any_file(self, paths: Iterable[str], score: float, signal: str) -> DetectionBuilder:
        if any(self.fs.has(path) for path in paths):
            return self._hit(score, signal)
        return self

    def check_dir(self, path: str, score: float, signal: str) -> DetectionBuilder:
        if self.fs.dir_exists(path):
            return self._hit(score, signal)
        return self

    def check_any_dir(self, paths: Iterable[str], score: float, signal: str) -> DetectionBuilder:
        if any(self.fs.dir_exists(path) for path in paths):
            return self._hit(score, signal)
        return self

    def check_any_path(self, paths: Iterable[str], score: float, signal: str) -> DetectionBuilder:
        """Score once when any path exists as either a file or a directory."""
        if any(self.fs.has(path) or self.fs.dir_exists(path) for path in paths):
            return self._hit(score, signal)
        return self

    def check_dependency(self, path: str, dependency: str, score: float, signal: str) -> DetectionBuilder:
        if self._file_contains(path, dependency):
            return self._hit(score, signal)
        return self

    def check_content(self, path: str, substring: str, score: float, signal: str) -> DetectionBuilder:
        return self.check_dependency(path, substring, score, signal)

    def check_multiple_content(
        self, paths: Iterable[str], substring: str, score: float, signal: str
    ) -> DetectionBuilder:
        if any(self._file_contains(path, substring) for path in paths):
            return self._hit(score, signal)
        return self

    def check_content_in_files(
        self, all_files: Iterable[str], ext: str, substring: str, score: float, signal: str
    ) -> DetectionBuilder:
        """Score once if any scanned file with ``ext`` mentions ``substring``."""
        suffix = ext.lower()
        candidates = (path for path in all_files if path.lower().endswith(suffix))
        if any(self._file_contains(path, substring) for path in candidates):
            return self._hit(score, signal)
        return self

    def check_extension(self, all_files: Iterable[str], ext: str, score: float, signal: str) -> DetectionBuilder:
        if contains_ext(all_files, ext):
            return self._hit(score, signal)
        return self

    def check_condition(self, condition: bool, score: float, signal: str) -> DetectionBuilder:
        if condition:
            return self._hit(score, signal)
        return self

    def check_dependency_priority(self, path: str, rules: Sequence[DependencyRule]) -> DetectionBuilder:
        if not self.fs.has(path):
            return self
        content = self.fs.read(path).lower()
        for rule in rules:
            if rule.substring.lower() in content:
                return self._hit(rule.score, rule.signal)
        return self

    def build(self) -> Candidate:
        return Candidate(
            framework=self.framework,
            score=self.score,
            language=self.language,
            signals=tuple(self.signals),
        )


__all__ = ["DependencyRule", "DetectionBuilder"]
