# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Rust framework detectors."""

from __future__ import annotations

from ...models.detection import Candidate
from ..base import LanguageDetector, ProjectScan
from ..builder import DetectionBuilder
from ..fsreader import ProjectFS
from ..keys import LANG_RUST, Framework
from ..scoring import SCORE_DEPENDENCY, SCORE_LOCKFILE

# A Cargo.toml and .rs files alone reach 4.5 for both frameworks, so the
# framework-specific dependency decides between them.
MIN_SCORE = 4.0


def detect_actix(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    return (
        DetectionBuilder(Framework.ACTIX, LANG_RUST, fs)
        .check_file("Cargo.toml", SCORE_DEPENDENCY, "Cargo.toml")
        .check_content("Cargo.toml", "actix-web", SCORE_DEPENDENCY, "actix-web in Cargo.toml")
        .check_extension(scan.files, ".rs", SCORE_LOCKFILE, ".rs files")
        .build()
    )


def detect_axum(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    cargo = fs.read("Cargo.toml").lower()
    return (
        DetectionBuilder(Framework.AXUM, LANG_RUST, fs)
        .check_file("Cargo.toml", SCORE_DEPENDENCY, "Cargo.toml")
        .check_extension(scan.files, ".rs", SCORE_LOCKFILE, ".rs files")
        .check_condition("axum" in cargo and "tokio" in cargo, SCORE_DEPENDENCY, "axum and tokio in Cargo.toml")
        .build()
    )


class RustDetector(LanguageDetector):
    name = "rust"
    priority = 60

    def detect(self, fs: ProjectFS, scan: ProjectScan) -> list[Candidate]:
        candidates: list[Candidate] = []
        self.keep(candidates, detect_actix(fs, scan), MIN_SCORE)
        self.keep(candidates, detect_axum(fs, scan), MIN_SCORE)
        return candidates
