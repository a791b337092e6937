# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""C# framework detectors."""

from __future__ import annotations

from ...models.detection import Candidate
from ..base import LanguageDetector, ProjectScan
from ..builder import DetectionBuilder
from ..fsreader import ProjectFS
from ..keys import LANG_CSHARP, Framework
from ..scoring import SCORE_DEPENDENCY, SCORE_LOCKFILE, SCORE_STRUCTURE


def detect_aspnet_core(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    return (
        DetectionBuilder(Framework.ASPNET_CORE, LANG_CSHARP, fs)
        .check_extension(scan.files, ".csproj", SCORE_DEPENDENCY, ".csproj file")
        .check_condition(fs.has("Program.cs") or fs.has("Startup.cs"), SCORE_LOCKFILE, "ASP.NET Core entry point")
        .check_file("appsettings.json", SCORE_STRUCTURE, "appsettings.json")
        .build()
    )


class CSharpDetector(LanguageDetector):
    name = "csharp"
    priority = 80

    def detect(self, fs: ProjectFS, scan: ProjectScan) -> list[Candidate]:
        candidates: list[Candidate] = []
        self.keep(candidates, detect_aspnet_core(fs, scan))
        return candidates
