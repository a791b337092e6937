# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Python framework detectors."""

from __future__ import annotations

from ...models.detection import Candidate
from ..base import LanguageDetector, ProjectScan
from ..builder import DetectionBuilder
from ..fsreader import ProjectFS
from ..keys import LANG_PYTHON, Framework
from ..scoring import SCORE_CONFIG_FILE, SCORE_DEPENDENCY, SCORE_LOCKFILE, SCORE_MINOR_INDICATOR, SCORE_STRUCTURE


def detect_django(fs: ProjectFS) -> Candidate:
    return (
        DetectionBuilder(Framework.DJANGO, LANG_PYTHON, fs)
        .check_file("manage.py", SCORE_CONFIG_FILE, "manage.py")
        .check_any_file(
            ["requirements.txt", "Pipfile.lock", "poetry.lock", "pyproject.toml"], SCORE_LOCKFILE, "python deps lockfile"
        )
        .check_any_file(["myproject/wsgi.py", "wsgi.py", "asgi.py"], SCORE_STRUCTURE, "wsgi/asgi")
        .check_multiple_content(["requirements.txt", "pyproject.toml"], "django", SCORE_LOCKFILE, "mentions django in deps")
        .build()
    )


def detect_flask(fs: ProjectFS) -> Candidate:
    return (
        DetectionBuilder(Framework.FLASK, LANG_PYTHON, fs)
        .check_any_file(["app.py", "wsgi.py", "application.py"], SCORE_LOCKFILE, "Flask app file")
        .check_multiple_content(
            ["requirements.txt", "Pipfile", "pyproject.toml"], "flask", SCORE_DEPENDENCY, "Flask in dependencies"
        )
        .check_dir("templates", SCORE_MINOR_INDICATOR, "templates/ folder")
        .build()
    )


def detect_fastapi(fs: ProjectFS) -> Candidate:
    return (
        DetectionBuilder(Framework.FASTAPI, LANG_PYTHON, fs)
        .check_multiple_content(["main.py", "app.py"], "fastapi", SCORE_CONFIG_FILE, "FastAPI import in main/app file")
        .check_multiple_content(
            ["requirements.txt", "pyproject.toml"], "fastapi", SCORE_DEPENDENCY, "FastAPI in dependencies"
        )
        .build()
    )


class PythonDetector(LanguageDetector):
    name = "python"
    priority = 20

    def detect(self, fs: ProjectFS, scan: ProjectScan) -> list[Candidate]:
        candidates: list[Candidate] = []
        for check in (detect_django, detect_flask, detect_fastapi):
            self.keep(candidates, check(fs))
        return candidates
