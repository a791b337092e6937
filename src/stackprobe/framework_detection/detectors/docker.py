# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Container detectors: Compose stacks and plain Dockerfiles."""

from __future__ import annotations

from ...models.detection import Candidate
from ..base import LanguageDetector, ProjectScan
from ..builder import DetectionBuilder
from ..fsreader import ProjectFS
from ..keys import LANG_CONTAINER, Framework
from ..scoring import SCORE_DOCKER_COMPOSE, SCORE_LOCKFILE

COMPOSE_FILES = ("docker-compose.yml", "docker-compose.yaml", "compose.yml", "compose.yaml")


def detect_docker_compose(fs: ProjectFS) -> Candidate:
    return (
        DetectionBuilder(Framework.DOCKER_COMPOSE, LANG_CONTAINER, fs)
        .check_any_file(COMPOSE_FILES, SCORE_DOCKER_COMPOSE, "docker-compose file")
        .build()
    )


def detect_generic_docker(fs: ProjectFS, language: str) -> Candidate:
    # Tagged with the project's dominant language; a Dockerfile says nothing about the framework.
    return (
        DetectionBuilder(Framework.GENERIC_DOCKER, language, fs)
        .check_file("Dockerfile", SCORE_LOCKFILE, "Dockerfile")
        .build()
    )


class DockerDetector(LanguageDetector):
    name = "docker"
    priority = 100

    def detect(self, fs: ProjectFS, scan: ProjectScan) -> list[Candidate]:
        candidates: list[Candidate] = []
        self.keep(candidates, detect_docker_compose(fs))
        self.keep(candidates, detect_generic_docker(fs, scan.dominant_language))
        return candidates
