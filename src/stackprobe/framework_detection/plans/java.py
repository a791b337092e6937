# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plan builder for Spring Boot."""

from __future__ import annotations

from ...models.detection import HealthCheck
from .. import keys
from ..fsreader import ProjectFS
from ..keys import Framework
from .base import Plan, PlanBuilder


class SpringBootPlanBuilder(PlanBuilder):
    framework = Framework.SPRING_BOOT

    def build(self, fs: ProjectFS) -> Plan:
        if fs.has("pom.xml"):
            build, run, tool, output = "./mvnw clean package -DskipTests", "java -jar target/*.jar", "maven", "target/"
        else:
            build, run, tool, output = "./gradlew build -x test", "java -jar build/libs/*.jar", "gradle", "build/"
        return Plan(
            build=[build],
            run=[run],
            health=HealthCheck(path="/actuator/health"),
            env=["SPRING_PROFILES_ACTIVE", "DATABASE_URL", "SERVER_PORT"],
            meta={keys.META_BUILD_TOOL: tool, keys.META_BUILD_OUTPUT: output},
        )
