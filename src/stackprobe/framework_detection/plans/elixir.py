# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plan builder for Phoenix."""

from ..keys import Framework
from .base import FixedPlanBuilder


class PhoenixPlanBuilder(FixedPlanBuilder):
    framework = Framework.PHOENIX
    build_commands = ("mix deps.get", "mix compile", "mix assets.deploy", "mix phx.digest")
    run_commands = ("mix phx.server",)
    env = ("DATABASE_URL", "SECRET_KEY_BASE", "PHX_HOST")
