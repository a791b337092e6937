# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plan builder for ASP.NET Core."""

from .. import keys
from ..keys import Framework
from .base import FixedPlanBuilder


class AspNetPlanBuilder(FixedPlanBuilder):
    framework = Framework.ASPNET_CORE
    build_commands = ("dotnet restore", "dotnet publish -c Release -o out")
    run_commands = ("dotnet $(ls out/*.dll | head -n 1)",)
    health_path = "/health"
    env = ("ASPNETCORE_ENVIRONMENT", "ConnectionStrings__DefaultConnection")
    meta = {keys.META_BUILD_OUTPUT: "out/"}
