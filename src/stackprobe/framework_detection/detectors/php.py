# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""PHP framework detectors."""

from __future__ import annotations

from ...models.detection import Candidate
from ..base import LanguageDetector, ProjectScan
from ..builder import DetectionBuilder
from ..fsreader import ProjectFS
from ..keys import LANG_PHP, Framework
from ..scoring import SCORE_BUILD_TOOL, SCORE_CONFIG_FILE, SCORE_LOCKFILE, SCORE_MINOR_INDICATOR, SCORE_STRUCTURE


def detect_laravel(fs: ProjectFS) -> Candidate:
    return (
        DetectionBuilder(Framework.LARAVEL, LANG_PHP, fs)
        .check_file("artisan", SCORE_CONFIG_FILE, "artisan")
        .check_file("composer.lock", SCORE_LOCKFILE, "composer.lock")
        .check_file("config/app.php", SCORE_MINOR_INDICATOR, "config/app.php")
        .build()
    )


def detect_symfony(fs: ProjectFS) -> Candidate:
    return (
        DetectionBuilder(Framework.SYMFONY, LANG_PHP, fs)
        .check_file("symfony.lock", SCORE_CONFIG_FILE, "symfony.lock")
        .check_file("bin/console", SCORE_BUILD_TOOL, "bin/console")
        .check_dependency("composer.json", "symfony", SCORE_LOCKFILE, "symfony in composer.json")
        .check_file("config/bundles.php", SCORE_STRUCTURE, "config/bundles.php")
        .build()
    )


class PHPDetector(LanguageDetector):
    name = "php"
    priority = 40

    def detect(self, fs: ProjectFS, scan: ProjectScan) -> list[Candidate]:
        candidates: list[Candidate] = []
        self.keep(candidates, detect_laravel(fs))
        self.keep(candidates, detect_symfony(fs))
        return candidates
