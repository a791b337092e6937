# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Candidate and detection result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..config import DEFAULT_HEALTH_CHECK_PATH, DEFAULT_HEALTH_CHECK_STATUS, DEFAULT_HEALTH_CHECK_TIMEOUT

if TYPE_CHECKING:
    from ..framework_detection.keys import Framework


@dataclass(frozen=True)
class Candidate:
    """
    A scored hypothesis that the project uses one framework.

    The plan builder is not stored on the candidate; it is looked up by
    ``framework`` only when the candidate wins.
    """

    framework: Framework
    score: float
    language: str
    signals: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.framework.value


@dataclass(frozen=True)
class HealthCheck:
    path: str = DEFAULT_HEALTH_CHECK_PATH
    expect: int = DEFAULT_HEALTH_CHECK_STATUS
    timeout_seconds: int = DEFAULT_HEALTH_CHECK_TIMEOUT

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "expect": self.expect, "timeout_seconds": self.timeout_seconds}


@dataclass(frozen=True)
class Detection:
    """Final detection result: winning framework plus its deployment plan."""

    framework: str = ""
    language: str = ""
    score: float = 0.0
    confidence: float = 0.0
    confidence_level: str = "low"
    signals: list[str] = field(default_factory=list)
    build_plan: list[str] = field(default_factory=list)
    run_plan: list[str] = field(default_factory=list)
    healthcheck: HealthCheck | None = None
    env: list[str] = field(default_factory=list)
    meta: dict[str, str] = field(default_factory=dict)

    @property
    def detected(self) -> bool:
        return bool(self.framework)

    @property
    def is_static(self) -> bool:
        """True when every run command is a `#` comment, so there is no server to start."""
        return bool(self.run_plan) and all(cmd.lstrip().startswith("#") for cmd in self.run_plan)

    def to_dict(self) -> dict[str, Any]:
        return {
            "framework": self.framework,
            "language": self.language,
            "score": self.score,
            "confidence": self.confidence,
            "confidence_level": self.confidence_level,
            "signals": list(self.signals),
            "build_plan": list(self.build_plan),
            "run_plan": list(self.run_plan),
            "healthcheck": self.healthcheck.to_dict() if self.healthcheck else None,
            "env": list(self.env),
            "meta": dict(self.meta),
        }
