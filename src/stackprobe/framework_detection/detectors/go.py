# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Go framework detectors with a generic Go fallback."""

from __future__ import annotations

from ...models.detection import Candidate
from ..base import LanguageDetector, ProjectScan
from ..builder import DetectionBuilder
from ..fsreader import ProjectFS, contains_ext
from ..keys import LANG_GO, Framework
from ..scoring import SCORE_CONFIG_FILE, SCORE_DEPENDENCY, SCORE_LOCKFILE, SCORE_STRUCTURE

# Module path and import in source together clear this; either alone does not.
WEB_FRAMEWORK_MIN_SCORE = 4.0
HUGO_MIN_SCORE = 3.0

WEB_FRAMEWORKS: tuple[tuple[Framework, str], ...] = (
    (Framework.GIN, "github.com/gin-gonic/gin"),
    (Framework.ECHO, "github.com/labstack/echo"),
    (Framework.FIBER, "github.com/gofiber/fiber"),
)

HUGO_CONFIGS = ("hugo.toml", "hugo.yaml", "hugo.json")


def detect_web_framework(fs: ProjectFS, scan: ProjectScan, framework: Framework, import_path: str) -> Candidate:
    return (
        DetectionBuilder(framework, LANG_GO, fs)
        .check_content("go.mod", import_path, SCORE_LOCKFILE, f"{import_path} in go.mod")
        .check_content_in_files(
            scan.files, ".go", f'"{import_path}', SCORE_LOCKFILE, f"{framework.value} import in .go files"
        )
        .build()
    )


def detect_hugo(fs: ProjectFS) -> Candidate:
    builder = DetectionBuilder(Framework.HUGO, LANG_GO, fs).check_any_path(
        HUGO_CONFIGS, SCORE_CONFIG_FILE, "hugo config file"
    )
    if not any(fs.has(path) for path in HUGO_CONFIGS):
        # A bare config.toml only counts next to a content/ tree.
        generic_config = fs.has("config.toml") or fs.has("config.yaml")
        builder.check_condition(generic_config and fs.dir_exists("content"), SCORE_CONFIG_FILE, "hugo config file")
    return (
        builder.check_dir("content", SCORE_LOCKFILE, "content/ directory")
        .check_dir("themes", SCORE_STRUCTURE, "themes/ directory")
        .build()
    )


def detect_generic_go(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    return (
        DetectionBuilder(Framework.GO, LANG_GO, fs)
        .check_file("go.mod", SCORE_DEPENDENCY, "go.mod")
        .check_condition(fs.has("main.go") or contains_ext(scan.files, ".go"), SCORE_LOCKFILE, "main.go/.go files")
        .build()
    )


class GoDetector(LanguageDetector):
    name = "go"
    priority = 50

    def detect(self, fs: ProjectFS, scan: ProjectScan) -> list[Candidate]:
        candidates: list[Candidate] = []
        specific = False
        for framework, import_path in WEB_FRAMEWORKS:
            candidate = detect_web_framework(fs, scan, framework, import_path)
            specific |= self.keep(candidates, candidate, WEB_FRAMEWORK_MIN_SCORE)
        specific |= self.keep(candidates, detect_hugo(fs), HUGO_MIN_SCORE)
        if not specific:
            self.keep(candidates, detect_generic_go(fs, scan))
        return candidates
