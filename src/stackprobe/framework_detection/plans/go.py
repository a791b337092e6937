# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plan builders for Go services and Hugo sites."""

from .. import keys
from ..keys import Framework
from .base import FixedPlanBuilder

GO_BUILD = ("go build -o app .",)


class GinPlanBuilder(FixedPlanBuilder):
    framework = Framework.GIN
    build_commands = GO_BUILD
    run_commands = ("./app",)
    health_path = "/ping"
    env = ("GIN_MODE", "PORT")
    meta = {keys.META_FRAMEWORK: "gin"}


class EchoPlanBuilder(FixedPlanBuilder):
    framework = Framework.ECHO
    build_commands = GO_BUILD
    run_commands = ("./app",)
    health_path = "/health"
    env = ("PORT", "DATABASE_URL")
    meta = {keys.META_FRAMEWORK: "echo"}


class FiberPlanBuilder(FixedPlanBuilder):
    framework = Framework.FIBER
    build_commands = GO_BUILD
    run_commands = ("./app",)
    health_path = "/health"
    env = ("PORT", "DATABASE_URL")
    meta = {keys.META_FRAMEWORK: "fiber"}


class GoPlanBuilder(FixedPlanBuilder):
    framework = Framework.GO
    build_commands = GO_BUILD
    run_commands = ("./app -port 8080",)
    health_path = "/healthz"
    env = ("PORT", "any app-specific envs")


class HugoPlanBuilder(FixedPlanBuilder):
    framework = Framework.HUGO
    build_commands = ("hugo --minify",)
    run_commands = ("hugo server --bind 0.0.0.0 --port 1313",)
    env = ("HUGO_ENV",)
    meta = {keys.META_BUILD_OUTPUT: "public/", keys.META_STATIC: "true"}
