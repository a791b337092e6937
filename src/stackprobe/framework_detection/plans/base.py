# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plan builder base classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ...models.detection import HealthCheck
from ..fsreader import ProjectFS
from ..keys import Framework


@dataclass
class Plan:
    """Deployment recipe for one framework: commands, health check, env and meta."""

    build: list[str] = field(default_factory=list)
    run: list[str] = field(default_factory=list)
    health: HealthCheck = field(default_factory=HealthCheck)
    env: list[str] = field(default_factory=list)
    meta: dict[str, str] = field(default_factory=dict)


class PlanBuilder(ABC):
    framework: Framework

    @abstractmethod
    def build(self, fs: ProjectFS) -> Plan: ...

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}({self.framework.value})"


class FixedPlanBuilder(PlanBuilder):
    """Plan that does not depend on project contents."""

    build_commands: tuple[str, ...] = ()
    run_commands: tuple[str, ...] = ()
    health_path: str = "/"
    env: tuple[str, ...] = ()
    meta: dict[str, str] = {}

    def build(self, fs: ProjectFS) -> Plan:
        return Plan(
            build=list(self.build_commands),
            run=list(self.run_commands),
            health=HealthCheck(path=self.health_path),
            env=list(self.env),
            meta=dict(self.meta),
        )
