# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plan builders for container-based projects."""

from .. import keys
from ..keys import Framework
from .base import FixedPlanBuilder


class DockerComposePlanBuilder(FixedPlanBuilder):
    framework = Framework.DOCKER_COMPOSE
    build_commands = ("docker compose build",)
    run_commands = ("docker compose up -d",)
    meta = {keys.META_DEPLOYMENT_TYPE: "docker-compose"}


class DockerPlanBuilder(FixedPlanBuilder):
    framework = Framework.GENERIC_DOCKER
    build_commands = ("docker build -t app:latest .",)
    run_commands = ("docker run -p 8080:8080 app:latest",)
