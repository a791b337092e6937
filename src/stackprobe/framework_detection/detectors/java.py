# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Java framework detectors."""

from __future__ import annotations

from ...models.detection import Candidate
from ..base import LanguageDetector, ProjectScan
from ..builder import DetectionBuilder
from ..fsreader import ProjectFS
from ..keys import LANG_JAVA, Framework
from ..scoring import SCORE_CONFIG_FILE, SCORE_STRUCTURE


def detect_spring_boot(fs: ProjectFS) -> Candidate:
    return (
        DetectionBuilder(Framework.SPRING_BOOT, LANG_JAVA, fs)
        .check_content("pom.xml", "spring-boot", SCORE_CONFIG_FILE, "pom.xml has spring-boot")
        .check_multiple_content(
            ["build.gradle", "build.gradle.kts"], "spring-boot", SCORE_CONFIG_FILE, "gradle has spring-boot"
        )
        .check_dir("src/main/java", SCORE_STRUCTURE, "Maven/Gradle Java structure")
        .build()
    )


class JavaDetector(LanguageDetector):
    name = "java"
    priority = 70

    def detect(self, fs: ProjectFS, scan: ProjectScan) -> list[Candidate]:
        candidates: list[Candidate] = []
        self.keep(candidates, detect_spring_boot(fs))
        return candidates
