# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Ruby framework detectors."""

from __future__ import annotations

from ...models.detection import Candidate
from ..base import LanguageDetector, ProjectScan
from ..builder import DetectionBuilder
from ..fsreader import ProjectFS
from ..keys import LANG_RUBY, Framework
from ..scoring import SCORE_CONFIG_FILE, SCORE_DEPENDENCY, SCORE_LOCKFILE, SCORE_MINOR_INDICATOR, SCORE_STRUCTURE


def detect_rails(fs: ProjectFS) -> Candidate:
    return (
        DetectionBuilder(Framework.RAILS, LANG_RUBY, fs)
        .check_file("bin/rails", SCORE_CONFIG_FILE, "bin/rails")
        .check_file("Gemfile.lock", SCORE_LOCKFILE, "Gemfile.lock")
        .check_file("config/application.rb", SCORE_MINOR_INDICATOR, "config/application.rb")
        .build()
    )


def detect_jekyll(fs: ProjectFS) -> Candidate:
    return (
        DetectionBuilder(Framework.JEKYLL, LANG_RUBY, fs)
        .check_file("_config.yml", SCORE_CONFIG_FILE, "_config.yml")
        .check_dependency("Gemfile", "jekyll", SCORE_DEPENDENCY, "jekyll in Gemfile")
        .check_any_dir(["_posts", "_site"], SCORE_STRUCTURE, "_posts/ or _site/ directory")
        .build()
    )


class RubyDetector(LanguageDetector):
    name = "ruby"
    priority = 30

    def detect(self, fs: ProjectFS, scan: ProjectScan) -> list[Candidate]:
        candidates: list[Candidate] = []
        self.keep(candidates, detect_rails(fs))
        self.keep(candidates, detect_jekyll(fs))
        return candidates
