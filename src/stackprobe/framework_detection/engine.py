# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Framework detection orchestrator."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence

from ..config import DetectionSettings, load_detection_settings
from ..models import Candidate, Detection
from .base import LanguageDetector, ProjectScan, dominant_language
from .fsreader import LocalFS, ProjectFS
from .helpers import detect_port, detect_runtime_version, get_default_port
from .keys import META_NOTE, META_PORT, META_RUNTIME_VERSION, NO_FRAMEWORK_MESSAGE, Framework
from .plans import get_plan_builder
from .registry import DETECTORS
from .scoring import confidence_from_score

logger = logging.getLogger(__name__)


def pick_best(candidates: Sequence[Candidate]) -> Candidate | None:
    """
    Highest-scoring candidate, or ``None`` when there are none.

    Equal scores keep the earlier candidate (registration order), except that
    ``Generic Docker`` gives way to any other framework with the same score.
    """
    if not candidates:
        return None
    best = candidates[0]
    for candidate in candidates[1:]:
        if candidate.score > best.score:
            best = candidate
        elif (
            candidate.score == best.score
            and best.framework is Framework.GENERIC_DOCKER
            and candidate.framework is not Framework.GENERIC_DOCKER
        ):
            best = candidate
    return best


class FrameworkDetectionEngine:
    """Coordinates language detectors and turns the winning candidate into a Detection."""

    def __init__(
        self,
        settings: DetectionSettings | None = None,
        detectors: Iterable[LanguageDetector] | None = None,
    ):
        self.settings = settings or load_detection_settings()
        self.detectors = list(detectors) if detectors is not None else list(DETECTORS)

    def detect(self, root: str | os.PathLike[str]) -> Detection:
        """Detect the framework of the project rooted at ``root`` on disk."""
        return self.detect_fs(LocalFS(root, self.settings))

    def detect_fs(self, fs: ProjectFS) -> Detection:
        tree = fs.scan_tree()
        scan = ProjectScan(
            files=tree.files,
            ext_counts=tree.ext_counts,
            dominant_language=dominant_language(tree.ext_counts),
        )
        candidates = self.collect_candidates(fs, scan)
        logger.debug(
            "Scanned %d files, %d candidate(s): %s",
            len(scan.files),
            len(candidates),
            ", ".join(f"{c.name}={c.score:g}" for c in candidates),
        )

        best = self.select(candidates)
        if best is None:
            return self._fallback(fs, scan)
        logger.info("Detected %s (%s) with score %g", best.name, best.language, best.score)
        return self._assemble(fs, best)

    def collect_candidates(self, fs: ProjectFS, scan: ProjectScan) -> list[Candidate]:
        candidates: list[Candidate] = []
        for detector in self.detectors:
            try:
                candidates.extend(detector.detect(fs, scan))
            except Exception as exc:  # noqa: BLE001
                logger.exception("Detector %s failed: %s", detector.name, exc)
        return candidates

    def select(self, candidates: Sequence[Candidate]) -> Candidate | None:
        if self.settings.compose_override:
            for candidate in candidates:
                if candidate.framework is Framework.DOCKER_COMPOSE:
                    logger.debug("Docker Compose file present, overriding %d other candidate(s)", len(candidates) - 1)
                    return candidate
        return pick_best(candidates)

    @staticmethod
    def _fallback(fs: ProjectFS, scan: ProjectScan) -> Detection:
        logger.warning("no framework detected, falling back to generic settings")
        meta = {META_NOTE: NO_FRAMEWORK_MESSAGE}
        runtime_version = detect_runtime_version(fs, scan.dominant_language)
        if runtime_version:
            meta[META_RUNTIME_VERSION] = runtime_version
        return Detection(language=scan.dominant_language, meta=meta)

    @staticmethod
    def _assemble(fs: ProjectFS, best: Candidate) -> Detection:
        plan = get_plan_builder(best.framework).build(fs)
        meta = dict(plan.meta)

        runtime_version = detect_runtime_version(fs, best.language)
        if runtime_version:
            meta[META_RUNTIME_VERSION] = runtime_version
        if META_PORT not in meta:
            meta[META_PORT] = detect_port(fs, best.framework) or get_default_port(best.framework)

        confidence, confidence_level = confidence_from_score(best.score)
        return Detection(
            framework=best.name,
            language=best.language,
            score=best.score,
            confidence=confidence,
            confidence_level=confidence_level,
            signals=list(best.signals),
            build_plan=list(plan.build),
            run_plan=list(plan.run),
            healthcheck=plan.health,
            env=list(plan.env),
            meta=meta,
        )


__all__ = ["FrameworkDetectionEngine", "pick_best"]
