# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Elixir framework detectors."""

from __future__ import annotations

from ...models.detection import Candidate
from ..base import LanguageDetector, ProjectScan
from ..builder import DetectionBuilder
from ..fsreader import ProjectFS
from ..keys import LANG_ELIXIR, Framework
from ..scoring import SCORE_DEPENDENCY, SCORE_LOCKFILE, SCORE_STRUCTURE


def detect_phoenix(fs: ProjectFS) -> Candidate:
    return (
        DetectionBuilder(Framework.PHOENIX, LANG_ELIXIR, fs)
        .check_file("mix.exs", SCORE_DEPENDENCY, "mix.exs")
        .check_content("mix.exs", "phoenix", SCORE_LOCKFILE, "Phoenix in mix.exs")
        .check_condition(fs.dir_exists("lib") and fs.dir_exists("priv"), SCORE_STRUCTURE, "Elixir project structure")
        .build()
    )


class ElixirDetector(LanguageDetector):
    name = "elixir"
    priority = 90

    def detect(self, fs: ProjectFS, scan: ProjectScan) -> list[Candidate]:
        candidates: list[Candidate] = []
        self.keep(candidates, detect_phoenix(fs))
        return candidates
